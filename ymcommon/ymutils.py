"""Small general-purpose utilities: non-null checks, emptiness and binary search."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from ymcommon.assertion import YmAssertError, ymassert

T = TypeVar("T")


class NullPtrError(YmAssertError):
    """Raised when a value that must be present is ``None``."""


def bounded(value: T | None) -> T:
    """Return ``value`` unchanged, raising :class:`NullPtrError` if it is ``None``."""
    ymassert(value is not None, NullPtrError, "Bounded pointer cannot be null")
    return value  # type: ignore[return-value]


def is_empty(s: str | None) -> bool:
    """Return True if ``s`` is ``None`` or an empty string."""
    return not s


def binary_search(seq: Sequence[Any], value: Any, compare: Callable[[Any, Any], int]) -> int:
    """Find ``value`` in ascending ``seq``.

    ``compare(value, element)`` returns a negative number, zero or a positive
    number as ``value`` is less than, equal to or greater than ``element``.
    Returns the index of a matching element, or ``len(seq)`` if none matches.
    """
    first, last = 0, len(seq)
    while first != last:
        mid = first + (last - first) // 2
        cmp = compare(value, seq[mid])
        if cmp < 0:
            last = mid
        elif cmp > 0:
            first = mid + 1
        else:
            return mid
    return len(seq)