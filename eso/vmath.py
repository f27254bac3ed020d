"""Trigonometry helpers and a Mersenne Twister random source."""

from __future__ import annotations

import math
import time
from typing import Optional

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER = 0x80000000
_LOWER = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF


class Mt19937:
    """32-bit Mersenne Twister seeded with a single 32-bit value."""

    def __init__(self, seed: int) -> None:
        state = [seed & _MASK32]
        for i in range(1, _N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        mt = self._state
        for i in range(_N):
            y = (mt[i] & _UPPER) | (mt[(i + 1) % _N] & _LOWER)
            mt[i] = mt[(i + _M) % _N] ^ (y >> 1) ^ (_MATRIX_A if y & 1 else 0)
        self._index = 0

    def next_u32(self) -> int:
        """Return the next 32-bit output."""
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32


def rand(tick: Optional[int] = None) -> int:
    """Return one random 32-bit value seeded from a tick count.

    Without a tick, the current time in microseconds is used.
    """
    if tick is None:
        tick = time.time_ns() // 1000
    return Mt19937(tick & _MASK32).next_u32()


def cosf(x: float) -> float:
    """Cosine of an angle in radians."""
    return math.cos(x)


def sinf(x: float) -> float:
    """Sine of an angle in radians."""
    return math.sin(x)