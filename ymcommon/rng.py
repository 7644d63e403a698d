"""Pseudo-random and timing-mixed random number generators."""

from __future__ import annotations

import struct
import time
from collections.abc import Callable

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1

DEFAULT_SEED = 0x763B_15C2_1847_EA8D
_MULT = 6364136223846793005
_PLUS = 1442695040888963407
_OUTPUT_MULT = 12605985483714917081


def _u32_to_unit_f32(value: int) -> float:
    """Map the high 23 bits of a 32-bit value onto a float32 in [0, 1)."""
    bits = ((value & _MASK32) >> (32 - 23)) | (127 << 23)
    as_float = struct.unpack("<f", struct.pack("<I", bits))[0]
    return as_float - 1.0


def _u64_to_unit_f64(value: int) -> float:
    """Map the high 52 bits of a 64-bit value onto a float64 in [0, 1)."""
    bits = ((value & _MASK64) >> (64 - 52)) | (1023 << 52)
    as_float = struct.unpack("<d", struct.pack("<Q", bits))[0]
    return as_float - 1.0


class Prng:
    """A 64-bit permuted linear congruential generator.

    Calling the instance yields uniform integers in ``[MIN, MAX]``.
    """

    MIN = 0
    MAX = _MASK64

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._seed = seed & _MASK64
        self._state = self._seed

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> int:
        return self._state

    def set_seed(self, seed: int) -> None:
        """Set the seed and restart the sequence from it."""
        self._seed = seed & _MASK64
        self._state = self._seed

    def gen_u64(self) -> int:
        """Return a uniform integer in ``[0, 2**64)`` and advance the state."""
        self._state = (self._state * _MULT + _PLUS) & _MASK64
        state = self._state
        word = (((state >> ((state >> 59) + 5)) ^ state) * _OUTPUT_MULT) & _MASK64
        return (word >> 43) ^ word

    def gen_u32(self) -> int:
        """Return a uniform integer in ``[0, 2**32)``."""
        return self.gen_u64() & _MASK32

    def gen_f32(self) -> float:
        """Return a uniform float in ``[0, 1)`` with 23 bits of resolution."""
        return _u32_to_unit_f32(self.gen_u32())

    def gen_f64(self) -> float:
        """Return a uniform float in ``[0, 1)`` with 52 bits of resolution."""
        return _u64_to_unit_f64(self.gen_u64())

    def jump(self, n_jumps: int) -> None:
        """Advance the state by ``n_jumps`` steps in logarithmic time."""
        if n_jumps < 0:
            raise ValueError("number of jumps must be non-negative")
        acc_mult, acc_plus = 1, 0
        cur_mult, cur_plus = _MULT, _PLUS
        while n_jumps > 0:
            if n_jumps & 1:
                acc_mult = (acc_mult * cur_mult) & _MASK64
                acc_plus = (acc_plus * cur_mult + cur_plus) & _MASK64
            cur_plus = ((cur_mult + 1) * cur_plus) & _MASK64
            cur_mult = (cur_mult * cur_mult) & _MASK64
            n_jumps //= 2
        self._state = (self._state * acc_mult + acc_plus) & _MASK64

    def __call__(self) -> int:
        return self.gen_u64()


class Trng:
    """A generator that mixes a :class:`Prng` with a high-resolution counter.

    Calling the instance yields integers in ``[MIN, MAX]``.
    """

    MIN = 0
    MAX = _MASK64

    def __init__(
        self,
        seed: int = DEFAULT_SEED,
        *,
        counter: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        self._prng = Prng(seed)
        self._counter = counter

    @property
    def prng(self) -> Prng:
        """The internal pseudo-random generator."""
        return self._prng

    def gen_u64(self) -> int:
        """Return an integer in ``[0, 2**64)`` and advance the internal state."""
        return self._prng.gen_u64() ^ (self._counter() & _MASK64)

    def gen_u32(self) -> int:
        """Return an integer in ``[0, 2**32)``."""
        return self.gen_u64() & _MASK32

    def gen_f32(self) -> float:
        """Return a float in ``[0, 1)`` with 23 bits of resolution."""
        return _u32_to_unit_f32(self.gen_u32())

    def gen_f64(self) -> float:
        """Return a float in ``[0, 1)`` with 52 bits of resolution."""
        return _u64_to_unit_f64(self.gen_u64())

    def __call__(self) -> int:
        return self.gen_u64()