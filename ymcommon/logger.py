"""Base class that owns a single output file for logging classes."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TextIO

from ymcommon.assertion import YmAssertError

_log = logging.getLogger(__name__)

_TIME_STAMP_FORMAT = "_%Y_%m_%d_%H_%M_%S"


class FilenameMode(Enum):
    """How the configured filename is changed before opening."""

    KEEP_ORIGINAL = 0
    APPEND_TIME_STAMP = 1


class OpenError(YmAssertError):
    """Raised when an output file cannot be prepared."""


def _split_extension(filename: str) -> tuple[str, str]:
    pos = filename.rfind(".")
    if pos <= 0:  # no extension, or a hidden file
        pos = len(filename)
    return filename[:pos], filename[pos:]


class Logger:
    """Owns at most one output file, opened on request rather than on construction."""

    def __init__(
        self,
        filename: str,
        filename_mode: FilenameMode = FilenameMode.APPEND_TIME_STAMP,
        *,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._filename = filename
        self._filename_mode = filename_mode
        self._now = now
        self._outfile: TextIO | None = None
        self._opened_path: str | None = None

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def filename_mode(self) -> FilenameMode:
        return self._filename_mode

    @property
    def outfile(self) -> TextIO | None:
        """The open output file, or None."""
        return self._outfile

    @property
    def opened_path(self) -> str | None:
        """Path of the file currently open, or None."""
        return self._opened_path

    def is_outfile_opened(self) -> bool:
        return self._outfile is not None

    def open_outfile(self) -> bool:
        """Open the output file; return True only if this call opened it.

        An existing file is never overwritten.
        """
        if self.is_outfile_opened():
            return False
        if self._filename_mode is FilenameMode.APPEND_TIME_STAMP:
            return self._open_path(self._time_stamped(self._filename))
        return self._open_path(self._filename)

    def close_outfile(self) -> None:
        """Close the output file, leaving the standard streams open."""
        outfile = self._outfile
        self._outfile = None
        self._opened_path = None
        if outfile is not None and outfile not in (sys.stdout, sys.stderr):
            outfile.close()

    def _time_stamped(self, filename: str) -> str:
        stem, ext = _split_extension(filename)
        return f"{stem}{self._now().strftime(_TIME_STAMP_FORMAT)}{ext}"

    def _open_path(self, path: str) -> bool:
        try:
            exists = Path(path).exists()
        except OSError as exc:
            _log.warning(
                "WARNING: Filesystem error when attempting to open '%s' with error code %s",
                path,
                exc.errno,
            )
            return False
        if exists:
            _log.warning("WARNING: File (or directory) '%s' already exists", path)
            return False
        try:
            self._outfile = open(path, "w", encoding="utf-8")
        except OSError:
            return False
        self._opened_path = path
        return True