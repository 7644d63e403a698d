"""A fixed-depth black box that records tracked values and dumps them as CSV."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ymcommon.assertion import YmAssertError, ymassert
from ymcommon.logger import FilenameMode, Logger


class DataLoggerError(YmAssertError):
    """Raised when a data logger is misconfigured."""


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


@dataclass
class _ColumnEntry:
    name: str
    read: Callable[[], Any]
    values: list[Any] = field(default_factory=list)


class DataLogger(Logger):
    """Keeps the latest readings of registered values in a circular buffer.

    Not thread-safe.
    """

    def __init__(self, max_n_data_entries: int) -> None:
        super().__init__("", FilenameMode.KEEP_ORIGINAL)
        ymassert(
            max_n_data_entries > 0,
            DataLoggerError,
            "Depth of data logger must be > 0",
        )
        self._max_n_data_entries = max_n_data_entries
        self._columns: list[_ColumnEntry] = []
        self._next_idx = 0
        self._rollover = False

    @property
    def max_n_data_entries(self) -> int:
        return self._max_n_data_entries

    @property
    def names(self) -> list[str]:
        """Names of the tracked values, in registration order."""
        return [column.name for column in self._columns]

    def add_entry(self, name: str, read: Callable[[], Any]) -> None:
        """Track the value returned by ``read`` under ``name``."""
        if not callable(read):
            raise TypeError("read must be callable")
        self._columns.append(
            _ColumnEntry(name, read, [None] * self._max_n_data_entries)
        )

    def acquire_all(self) -> None:
        """Read every tracked value into the next slot of the buffer."""
        for column in self._columns:
            column.values[self._next_idx] = column.read()
        self._next_idx = (self._next_idx + 1) % self._max_n_data_entries
        if self._next_idx == 0:
            self._rollover = True

    def clear(self) -> None:
        """Forget every tracked value."""
        self._columns.clear()

    def _row_indices(self):
        depth = self._max_n_data_entries
        i = (self._next_idx + 1) % depth if self._rollover else 0
        while i != self._next_idx:
            yield i
            i = (i + 1) % depth

    def dump(self, filename: str) -> bool:
        """Write the buffer as CSV, oldest row first.

        Returns False, writing nothing, if the file already exists or cannot
        be opened.
        """
        if not self._open_path(filename):
            return False
        try:
            outfile = self.outfile
            assert outfile is not None
            outfile.write(",".join(self.names) + "\n")
            for i in self._row_indices():
                row = ",".join(_stringify(column.values[i]) for column in self._columns)
                outfile.write(row + "\n")
        finally:
            self.close_outfile()
        return True