"""A wrapper that serialises access to an object with a lock."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class ThreadSafeProxy(Generic[T]):
    """Guards an object so that only one thread uses it at a time.

    Use it as a context manager to get the object with the lock held, or pass
    a function to :meth:`call` to run it on the object under the lock.
    """

    def __init__(self, obj: T, lock: Any = None) -> None:
        self._obj = obj
        self._lock = lock if lock is not None else threading.Lock()

    def __enter__(self) -> T:
        self._lock.acquire()
        return self._obj

    def __exit__(self, *args: Any) -> None:
        self._lock.release()

    def call(self, fn: Callable[[T], R]) -> R:
        """Return ``fn(obj)``, evaluated with the lock held."""
        with self._lock:
            return fn(self._obj)