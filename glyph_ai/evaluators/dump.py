"""Dump: play the junkiest letter, preferably somewhere nobody cares about."""
from __future__ import annotations
from typing import List

from ..action_gen import AIMove
from ..perception import assess_letter_junk
from ..traits import Goal
from .common import EvalContext, GoalEvaluationResult, invalid, simulate


def evaluate_dump(move: AIMove, ctx: EvalContext) -> GoalEvaluationResult:
    sim = simulate(ctx, move)
    if sim is None:
        return invalid(move, Goal.DUMP)
    t = ctx.tuning
    junk = assess_letter_junk(move.letter, ctx.state.hands.get(ctx.player, []))
    value = junk
    tags: List[str] = []
    if junk >= 7:
        tags.append(f"dump:{move.letter}(junk{junk:g})")
    elif junk >= 4:
        tags.append(f"discard:{move.letter}")
    else:
        tags.append(f"{move.letter}(not-junk)")

    distances = [
        g.position.distance_to(move.cast_position) for g in sim.glyphlings if g.is_placed
    ]
    if distances and min(distances) >= t.dump_safe_distance:
        value += t.dump_safe_bonus
        tags.append("safe-dump")
    return GoalEvaluationResult(move, Goal.DUMP, value, tuple(tags), {"junk": junk})


__all__ = ["evaluate_dump"]
