"""
Weighted-random move selection.

The AI never deterministically plays its single best candidate. Moves scoring
within a flexibility-controlled band of the best form a pool, and one is drawn
with weight proportional to how far it clears the band's floor.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .evaluators import GoalEvaluationResult
from .tuning import DEFAULT_TUNING, AITuning


@dataclass(frozen=True)
class SelectionPool:
    ranked: List[GoalEvaluationResult]
    pool: List[GoalEvaluationResult]
    threshold: float
    used_fallback: bool


def selection_threshold(best: float, flexibility: float, tuning: AITuning = DEFAULT_TUNING) -> float:
    if best > 0:
        return best * (tuning.flex_base + (1.0 - flexibility) * tuning.flex_span)
    return best - tuning.negative_margin


def rank(results: Sequence[GoalEvaluationResult]) -> List[GoalEvaluationResult]:
    """Best first; ties keep candidate order."""
    return sorted(results, key=lambda r: r.score, reverse=True)


def build_pool(
    results: Sequence[GoalEvaluationResult],
    flexibility: float,
    tuning: AITuning = DEFAULT_TUNING,
) -> SelectionPool:
    ranked = rank(results)
    if not ranked:
        return SelectionPool([], [], 0.0, False)
    threshold = selection_threshold(ranked[0].score, flexibility, tuning)
    pool = [r for r in ranked if r.score >= threshold][: tuning.pool_size]
    if pool:
        return SelectionPool(ranked, pool, threshold, False)
    return SelectionPool(ranked, ranked[: tuning.fallback_pool], threshold, True)


def weighted_choice(
    pool: Sequence[GoalEvaluationResult], threshold: float, rng: random.Random
) -> GoalEvaluationResult:
    weights = [max(0.1, r.score - threshold + 1.0) for r in pool]
    roll = rng.random() * sum(weights)
    cumulative = 0.0
    for result, weight in zip(pool, weights):
        cumulative += weight
        if roll <= cumulative:
            return result
    return pool[0]


def select_move(
    results: Sequence[GoalEvaluationResult],
    flexibility: float,
    rng: random.Random,
    tuning: AITuning = DEFAULT_TUNING,
) -> Optional[GoalEvaluationResult]:
    pool = build_pool(results, flexibility, tuning)
    if not pool.pool:
        return None
    return weighted_choice(pool.pool, pool.threshold, rng)


__all__ = [
    "SelectionPool",
    "selection_threshold",
    "rank",
    "build_pool",
    "weighted_choice",
    "select_move",
]
