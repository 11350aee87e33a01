"""
Dice rolls for character stat generation.

A roll of ``count`` dice with ``sides`` faces is the sum of ``count``
uniform draws over [1, sides]. The entropy source is a numpy Generator
that callers may inject (seed or ready-made generator); without one,
fresh OS entropy is used and results are not reproducible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


class Dice:
    """Sums of uniform integer draws backed by a numpy Generator."""

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        if rng is not None and seed is not None:
            raise ValueError("Pass either seed or rng, not both")
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    def roll(self, count: int, sides: int) -> int:
        """Roll ``count`` dice with ``sides`` faces and return the total."""
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        if sides < 1:
            raise ValueError(f"sides must be at least 1, got {sides}")

        draws = self._rng.integers(1, sides, size=count, endpoint=True)
        total = int(draws.sum())
        logger.debug("roll(%d, %d) -> %d", count, sides, total)
        return total


@dataclass(frozen=True)
class StatRoll:
    """A stat formula of the form roll(count, sides) + modifier."""

    count: int
    sides: int
    modifier: int = 0

    @property
    def minimum(self) -> int:
        return self.count + self.modifier

    @property
    def maximum(self) -> int:
        return self.count * self.sides + self.modifier

    def roll(self, dice: Dice) -> int:
        return dice.roll(self.count, self.sides) + self.modifier

    def __str__(self) -> str:
        if self.modifier:
            return f"{self.count}d{self.sides}+{self.modifier}"
        return f"{self.count}d{self.sides}"
