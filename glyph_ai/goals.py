"""
Goal selection by priority cascade.

Walk the personality's goal priority in order. For each goal, roll a threshold
inside its controlling trait's shifted range, then roll a d100; the first goal
whose d100 lands at or under its threshold wins. If every goal misses, the
primary goal (index 0) is taken as a fallback, so selection always terminates.
"""

from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import List, Mapping, Sequence, Tuple

from .traits import Goal, Trait, TraitRange

DEFAULT_GOAL = Goal.SCORE


@dataclass(frozen=True)
class GoalSelection:
    goal: Goal
    was_fallback: bool
    roll: int = 0
    threshold: float = 0.0
    # (goal, threshold, d100) for every goal the cascade visited
    attempts: Tuple[Tuple[Goal, float, int], ...] = field(default_factory=tuple)
    reasoning: str = ""


def select_goal(
    priority: Sequence[Goal],
    ranges: Mapping[Trait, TraitRange],
    rng: random.Random,
) -> GoalSelection:
    if not priority:
        return GoalSelection(DEFAULT_GOAL, True, reasoning="empty priority list, defaulting to score")

    attempts: List[Tuple[Goal, float, int]] = []
    for goal in priority:
        trait_range = ranges.get(goal.trait)
        threshold = int(trait_range.roll(rng)) if trait_range is not None else 0
        roll = rng.randint(1, 100)
        attempts.append((goal, float(threshold), roll))
        if roll <= threshold:
            return GoalSelection(
                goal=goal,
                was_fallback=False,
                roll=roll,
                threshold=float(threshold),
                attempts=tuple(attempts),
                reasoning=f"{goal.value} activated: rolled {roll} <= {threshold} ({goal.trait.value})",
            )

    primary = priority[0]
    return GoalSelection(
        goal=primary,
        was_fallback=True,
        roll=attempts[0][2],
        threshold=attempts[0][1],
        attempts=tuple(attempts),
        reasoning=f"no goal activated, falling back to primary goal {primary.value}",
    )


__all__ = ["GoalSelection", "select_goal", "DEFAULT_GOAL"]
