"""File input helpers."""

from __future__ import annotations

import os


def read_file(filename: str | os.PathLike[str]) -> str:
    """Return the whole contents of ``filename`` as text, unchanged.

    Line endings are kept as they are stored. Raises :class:`OSError` if the
    file cannot be opened or read.
    """
    with open(filename, encoding="utf-8", newline="") as infile:
        return infile.read()