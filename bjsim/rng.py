"""xorshift64* pseudo-random generator used to shuffle the shoe."""

import os
import time

_MASK64 = (1 << 64) - 1
_MULTIPLIER = 2685821657736338717
DEFAULT_SEED = 88172645463393265


class XorShift64Star:
    """A xorshift64* generator with a 64-bit non-zero state."""

    def __init__(self, seed=DEFAULT_SEED):
        seed &= _MASK64
        self._state = seed if seed else DEFAULT_SEED

    @property
    def state(self):
        return self._state

    def next_u64(self):
        """Advance the state and return the next 64-bit output."""
        x = self._state
        x ^= x >> 12
        x ^= (x << 25) & _MASK64
        x ^= x >> 27
        self._state = x
        return (x * _MULTIPLIER) & _MASK64

    def u32(self):
        """Return the upper 32 bits of the next output."""
        return self.next_u64() >> 32

    def below(self, bound):
        """Return a value in ``[0, bound)``; 0 when ``bound`` is 0."""
        return self.u32() % bound if bound else 0


def clock_seeded_rng():
    """Build a generator seeded from the clock and the process id."""
    now = time.time_ns()
    seconds, nanos = divmod(now, 1_000_000_000)
    seed = nanos ^ (seconds << 21) ^ (os.getpid() << 32) ^ id(object())
    rng = XorShift64Star(seed & _MASK64)
    for _ in range(4):
        rng.next_u64()
    return rng