"""Deterministic scalar generator used to jitter blip positions."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_SEED = 42


@dataclass(frozen=True)
class Range:
    min: float
    max: float


class PseudoRandomSource:
    """Sine-hash generator: not uniform, not secure, but reproducible.

    Two sources built with the same seed yield identical sequences for the same
    call order.
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self.seed = seed

    def random(self) -> float:
        gen = math.sin(self.seed) * 10_000
        self.seed += 1
        return gen - math.floor(gen)

    def random_between(self, rng: Range) -> float:
        return rng.min + self.random() * (rng.max - rng.min)

    def normal_between(self, rng: Range) -> float:
        """Sample biased toward ``rng.min``; never exceeds the lower half."""

        first = self.random()
        second = self.random()
        return rng.min + (first * second) * 0.5 * (rng.max - rng.min)
