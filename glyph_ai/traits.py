"""
Traits, goals and the clamped trait-range type.

Each of the seven traits controls exactly one goal. A trait's per-turn value
is rolled from a ``TraitRange`` that situational factors have shifted; the
rolled value is only used as the activation threshold in the goal cascade.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict

TRAIT_MIN = 0.0
TRAIT_MAX = 100.0


class Trait(Enum):
    AGGRESSION = "aggression"
    GREED = "greed"
    SPITE = "spite"
    CAUTION = "caution"
    PATIENCE = "patience"
    OPPORTUNISM = "opportunism"
    PRAGMATISM = "pragmatism"


class Goal(Enum):
    TRAP = "trap"
    SCORE = "score"
    DENY = "deny"
    ESCAPE = "escape"
    BUILD = "build"
    STEAL = "steal"
    DUMP = "dump"

    @property
    def trait(self) -> Trait:
        return GOAL_TRAIT[self]


GOAL_TRAIT: Dict[Goal, Trait] = {
    Goal.TRAP: Trait.AGGRESSION,
    Goal.SCORE: Trait.GREED,
    Goal.DENY: Trait.SPITE,
    Goal.ESCAPE: Trait.CAUTION,
    Goal.BUILD: Trait.PATIENCE,
    Goal.STEAL: Trait.OPPORTUNISM,
    Goal.DUMP: Trait.PRAGMATISM,
}


def _clamp(v: float) -> float:
    return max(TRAIT_MIN, min(TRAIT_MAX, float(v)))


@dataclass
class TraitRange:
    """A [min, max] interval inside [0, 100].

    Every mutator clamps to [0, 100] and keeps ``min <= max``; there is no
    invalid state to report.
    """

    min: float
    max: float

    def __post_init__(self) -> None:
        self.min = _clamp(self.min)
        self.max = _clamp(self.max)
        if self.min > self.max:
            self.min, self.max = self.max, self.min

    @property
    def center(self) -> float:
        return (self.min + self.max) / 2.0

    @property
    def width(self) -> float:
        return self.max - self.min

    def shift(self, delta: float) -> "TraitRange":
        self.min = _clamp(self.min + delta)
        self.max = _clamp(self.max + delta)
        if self.min > self.max:
            self.min, self.max = self.max, self.min
        return self

    def shift_min(self, delta: float) -> "TraitRange":
        self.min = _clamp(self.min + delta)
        if self.min > self.max:
            self.min = self.max
        return self

    def shift_max(self, delta: float) -> "TraitRange":
        self.max = _clamp(self.max + delta)
        if self.max < self.min:
            self.max = self.min
        return self

    def narrow(self, pct: float) -> "TraitRange":
        """Pull both bounds toward the centre by ``pct`` of the half-width."""
        return self._scale(1.0 - pct)

    def widen(self, pct: float) -> "TraitRange":
        """Push both bounds away from the centre by ``pct`` of the half-width."""
        return self._scale(1.0 + pct)

    def _scale(self, factor: float) -> "TraitRange":
        c = self.center
        half = max(0.0, (self.max - self.min) / 2.0 * factor)
        self.min = _clamp(c - half)
        self.max = _clamp(c + half)
        return self

    def roll(self, rng: random.Random) -> float:
        return self.min + rng.random() * (self.max - self.min)

    def to_list(self) -> list:
        return [round(self.min, 2), round(self.max, 2)]


__all__ = [
    "Trait",
    "Goal",
    "GOAL_TRAIT",
    "TraitRange",
]
