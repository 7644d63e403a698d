"""A simple elapsed-time timer."""

from __future__ import annotations

import time
from collections.abc import Callable


class Timer:
    """Measures time elapsed since creation or the last reset, in nanoseconds."""

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self._start = clock()

    def reset(self) -> None:
        """Restart timing from now."""
        self._start = self._clock()

    def elapsed(self) -> int:
        """Return the nanoseconds elapsed since the start time."""
        return self._clock() - self._start