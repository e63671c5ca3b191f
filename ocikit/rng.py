"""Small deterministic pseudo-random generator built from three LCGs."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


class Rng:
    """Deterministic generator of floats in ``[0, 1)`` from a 32-bit seed."""

    def __init__(self, seed):
        seed &= _MASK
        self._s0 = seed
        self._s1 = (seed + 1) & _MASK
        self._s2 = (seed + 2) & _MASK

    def next(self):
        """Advance the state and return a float in ``[0, 1)``."""
        self._s0 = ((self._s0 * 171) & _MASK) % 30269
        self._s1 = ((self._s1 * 172) & _MASK) % 30307
        self._s2 = ((self._s2 * 170) & _MASK) % 30323
        x = self._s0 / 30269.0 + self._s1 / 30307.0 + self._s2 / 30323.0
        return x - int(x)

    def range(self, x0, x1):
        """Return a float between ``x0`` and ``x1``."""
        return x0 + self.next() * (x1 - x0)

    def irange(self, x0, x1):
        """Return an integer between ``x0`` and ``x1``, truncated toward zero."""
        return int(self.range(float(x0), float(x1)))