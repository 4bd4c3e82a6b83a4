# MT19937 Mersenne Twister for seeded dice rolls (no external deps)
# Source: Matsumoto & Nishimura reference algorithm, 32-bit seeding via init_genrand
"""Deterministic MT19937 engine with a 1-based bounded draw."""

from __future__ import annotations

import logging
import time
from typing import List, Optional

logger = logging.getLogger(__name__)

# Period parameters
N = 624
M = 397
MATRIX_A = 0x9908B0DF
UPPER_MASK = 0x80000000  # most significant w-r bits
LOWER_MASK = 0x7FFFFFFF  # least significant r bits

# Tempering parameters
TEMPERING_MASK_B = 0x9D2C5680
TEMPERING_MASK_C = 0xEFC60000

UINT32_MASK = 0xFFFFFFFF
INT32_MAX = 0x7FFFFFFF

_MAG01 = (0x0, MATRIX_A)


class InvalidArgument(ValueError):
    """Raised when a bounded draw is requested for an unsatisfiable range."""


def time_seed() -> int:
    """Wall-clock milliseconds truncated to 32 bits."""
    return (time.time_ns() // 1_000_000) & UINT32_MASK


class MersenneTwister:
    """MT19937 generator owned by a single caller.

    ``MersenneTwister()`` seeds from the wall clock, so two default engines
    almost never agree; pass an explicit ``seed`` for reproducible output.
    Only the low 32 bits of the seed are significant.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = time_seed()
            logger.debug("Seeding MT19937 from wall clock: %d", seed)
        self._seed = int(seed) & UINT32_MASK
        self.regenerations = 0

        state: List[int] = [0] * N
        state[0] = self._seed
        for i in range(1, N):
            prev = state[i - 1]
            state[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & UINT32_MASK
        self.state = state
        self.index = N  # exhausted: first draw twists

    @property
    def seed(self) -> int:
        """Effective 32-bit seed, useful to replay a time-seeded engine."""
        return self._seed

    def _regenerate(self) -> None:
        # In-place and forward-dependent: the ranges must run in this order.
        mt = self.state
        kk = 0
        while kk < N - M:
            y = (mt[kk] & UPPER_MASK) | (mt[kk + 1] & LOWER_MASK)
            mt[kk] = mt[kk + M] ^ (y >> 1) ^ _MAG01[y & 0x1]
            kk += 1
        while kk < N - 1:
            y = (mt[kk] & UPPER_MASK) | (mt[kk + 1] & LOWER_MASK)
            mt[kk] = mt[kk + (M - N)] ^ (y >> 1) ^ _MAG01[y & 0x1]
            kk += 1
        y = (mt[N - 1] & UPPER_MASK) | (mt[0] & LOWER_MASK)
        mt[N - 1] = mt[M - 1] ^ (y >> 1) ^ _MAG01[y & 0x1]

        self.index = 0
        self.regenerations += 1
        logger.debug("MT19937 state regenerated (pass %d)", self.regenerations)

    def next_word(self) -> int:
        """Return the next tempered 32-bit word in [0, 2**32)."""
        if self.index >= N:
            self._regenerate()

        y = self.state[self.index]
        self.index += 1

        y ^= y >> 11
        y ^= (y << 7) & TEMPERING_MASK_B
        y ^= (y << 15) & TEMPERING_MASK_C
        y ^= y >> 18
        return y

    def next_boolean(self) -> bool:
        return (self.next_word() >> 31) != 0

    def next_int(self, n: int) -> int:
        """Uniform integer in [1, n] inclusive.

        Powers of two take the high bits of a single draw. Other ranges use
        rejection sampling on 31-bit draws to remove modulo bias; each draw is
        accepted with probability above one half.
        """
        if n <= 1:
            raise InvalidArgument(f"n must be greater than one, got: {n}")
        if n > INT32_MAX:
            raise InvalidArgument(f"n must fit in a signed 32-bit int, got: {n}")

        if (n & -n) == n:  # power of two
            return ((n * (self.next_word() >> 1)) >> 31) + 1

        while True:
            bits = self.next_word() >> 1
            val = bits % n
            # Reject the partial block at the top of the 31-bit range.
            if bits - val + (n - 1) <= INT32_MAX:
                return val + 1
