"""Injectable randomness for the synthetic generators.

Every draw goes through an object exposing ``random() -> float`` in
``[0, 1)``. :class:`random.Random` satisfies this, and tests use
:class:`FixedSequence` to replay known values.
"""

from __future__ import annotations

import random as _random
from itertools import cycle
from typing import Iterable, Protocol


class RandomSource(Protocol):
    """Anything that yields floats in ``[0, 1)``."""

    def random(self) -> float:
        """Return the next float in ``[0, 1)``."""


class FixedSequence:
    """Replay a fixed list of floats, cycling when exhausted."""

    def __init__(self, values: Iterable[float]) -> None:
        self.values = [float(v) for v in values]
        if not self.values:
            raise ValueError("FixedSequence needs at least one value")
        for v in self.values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"values must lie in [0, 1), got {v}")
        self._it = cycle(self.values)
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return next(self._it)


def new_source(seed: int | None = None) -> RandomSource:
    """Return a fresh request-scoped generator."""
    return _random.Random(seed)


def uniform(rng: RandomSource, low: float, high: float) -> float:
    """Draw a float uniformly from ``[low, high)``."""
    return low + (high - low) * rng.random()


def randint_rounded(rng: RandomSource, low: int, high: int) -> int:
    """Draw an integer in ``[low, high]`` by rounding a uniform draw."""
    return int(min(high, max(low, round(uniform(rng, low, high)))))
