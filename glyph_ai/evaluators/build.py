"""Build: placements that set up future words near our existing tiles."""
from __future__ import annotations
from typing import List

from ..action_gen import AIMove
from ..detectors import evaluate_setup
from ..traits import Goal
from .common import EvalContext, GoalEvaluationResult, fmt, invalid, simulate


def evaluate_build(move: AIMove, ctx: EvalContext) -> GoalEvaluationResult:
    sim = simulate(ctx, move)
    if sim is None:
        return invalid(move, Goal.BUILD)
    t = ctx.tuning
    setup = evaluate_setup(sim, ctx.lexicon, move.cast_position)
    value = setup.total
    tags: List[str] = []
    if setup.gaps:
        tags.append(f"gap({fmt(setup.gap_value)})")
    if setup.extension_paths:
        tags.append(f"ext({fmt(setup.extension_value)})")
    if setup.crossing_value:
        tags.append(f"cross({fmt(setup.crossing_value)})")

    chain = sum(
        1
        for tile in ctx.state.tiles.values()
        if tile.owner == ctx.player
        and tile.position.distance_to(move.cast_position) <= t.build_chain_range
    )
    if chain:
        value += chain * t.build_chain
        tags.append(f"chain({chain})")

    if not tags:
        tags.append("no setup")
    return GoalEvaluationResult(
        move,
        Goal.BUILD,
        value,
        tuple(tags),
        {
            "gaps": setup.gaps,
            "extension_paths": setup.extension_paths,
            "crossings": setup.crossings,
            "spacing": setup.spacing_bonus,
            "chain": chain,
        },
    )


__all__ = ["evaluate_build"]
