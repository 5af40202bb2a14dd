"""Escape: lower our own pressure and keep routes open in many directions."""
from __future__ import annotations
from typing import List

from ..action_gen import AIMove
from ..board import direction_between
from ..perception import assess_pressure
from ..rules.api import legal_destinations
from ..traits import Goal
from .common import EvalContext, GoalEvaluationResult, fmt, invalid, simulate


def evaluate_escape(move: AIMove, ctx: EvalContext) -> GoalEvaluationResult:
    sim = simulate(ctx, move)
    if sim is None:
        return invalid(move, Goal.ESCAPE)
    t = ctx.tuning
    before = assess_pressure(ctx.state, ctx.state.find_glyphling(move.glyphling))
    mover = sim.find_glyphling(move.glyphling)
    after = assess_pressure(sim, mover)
    improvement = before - after

    routes = legal_destinations(sim, mover)
    directions = {direction_between(mover.position, r) for r in routes}
    directions.discard(None)

    value = 0.0
    tags: List[str] = []
    if improvement > 0:
        value += improvement * t.escape_improvement
        tags.append(f"safer({fmt(improvement)})")
    value += len(routes) * t.escape_route + len(directions) * t.escape_direction

    if len(routes) >= t.escape_open_routes:
        tags.append("open")
    elif len(routes) <= t.escape_risky_routes:
        value -= t.escape_risky_penalty
        tags.append("risky")
    if improvement < 0:
        value += improvement * t.escape_danger
        tags.append("danger!")
    if not tags:
        tags.append(f"{len(routes)}routes")
    return GoalEvaluationResult(
        move,
        Goal.ESCAPE,
        value,
        tuple(tags),
        {"pressure_before": before, "pressure_after": after, "routes": len(routes), "directions": len(directions)},
    )


__all__ = ["evaluate_escape"]
