"""Assertion helpers that raise typed errors with bounded, located messages."""

from __future__ import annotations

import inspect
import os
from typing import Any

MAX_MSG_SIZE = 128


class YmAssertError(Exception):
    """Base class for every assertion error raised through :func:`ymassert`.

    The stored message is limited to ``MAX_MSG_SIZE - 1`` characters.
    """

    def __init__(self, message: str = "") -> None:
        self.message = message[: MAX_MSG_SIZE - 1]
        super().__init__(self.message)

    def what(self) -> str:
        """Return the identifying message."""
        return self.message


def _caller_location() -> str:
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        if caller is None:
            return "<unknown>:0"
        return f"{os.path.basename(caller.f_code.co_filename)}:{caller.f_lineno}"
    finally:
        del frame


def ymassert(condition: Any, error_type: type[YmAssertError], message: str, *args: Any) -> None:
    """Raise ``error_type`` with a formatted message when ``condition`` is false.

    ``message`` is a ``str.format`` template filled with ``args``; the raised
    message is prefixed with the caller's file and line.
    """
    if not (isinstance(error_type, type) and issubclass(error_type, YmAssertError)):
        raise TypeError("Assert class must derive from YmAssertError")
    if condition:
        return
    location = _caller_location()
    body = message.format(*args) if args else message
    raise error_type(f'Assert @ "{location}": {body}')