"""Steal: form words that run through the opponent's tiles."""
from __future__ import annotations
from typing import List

from ..action_gen import AIMove
from ..rules.api import owner_of
from ..traits import Goal
from ..words import score_word_for_player
from .common import EvalContext, GoalEvaluationResult, invalid, simulate


def evaluate_steal(move: AIMove, ctx: EvalContext) -> GoalEvaluationResult:
    sim = simulate(ctx, move)
    if sim is None:
        return invalid(move, Goal.STEAL)
    t = ctx.tuning
    value = 0.0
    tags: List[str] = []
    stolen = 0
    for word in ctx.allowed_words(sim, move):
        ours = theirs = 0
        for pos in word.positions:
            owner = owner_of(sim, pos)
            if owner is None:
                continue
            if owner == ctx.player:
                ours += 1
            else:
                theirs += 1
        if theirs == 0:
            continue
        points = score_word_for_player(word, sim, ctx.player)
        stolen += theirs
        if theirs > ours:
            value += points + theirs * t.steal_full_rate
            tags.append(f"STEAL:{word.letters}({theirs}opp)")
        else:
            value += points + theirs * t.steal_partial_rate
            tags.append(f"steal:{word.letters}({theirs}opp)")

    if not tags:
        tags.append("no steal")
    return GoalEvaluationResult(move, Goal.STEAL, value, tuple(tags), {"opponent_tiles": stolen})


__all__ = ["evaluate_steal"]
