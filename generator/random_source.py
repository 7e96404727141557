"""
Seeded random source — a tiny linear congruential generator.

Every generator draws from one of these instead of the ``random`` module so
that a given seed produces the same float sequence on every platform.
"""

from __future__ import annotations

_MULTIPLIER = 9301
_INCREMENT = 49297
_MODULUS = 233280


class RandomSource:
    """Callable LCG stream: ``rng()`` returns the next float in [0, 1)."""

    __slots__ = ("seed", "_state")

    def __init__(self, seed: int):
        self.seed = int(seed)
        self._state = self.seed

    def __call__(self) -> float:
        self._state = (self._state * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self._state / _MODULUS

    def spawn(self, offset: int = 0) -> RandomSource:
        """Fresh, independent stream seeded from ``seed + offset``."""
        return RandomSource(self.seed + offset)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"


def make_random(seed: int) -> RandomSource:
    """Build a new random source for ``seed``."""
    return RandomSource(seed)
