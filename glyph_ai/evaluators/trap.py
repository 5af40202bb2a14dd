"""Trap: restrict enemy movement, ideally to zero (a tangle worth 10 points)."""
from __future__ import annotations
from typing import List

from ..action_gen import AIMove
from ..detectors import adjacency, analyze_target
from ..rules.api import count_moves
from ..traits import Goal
from .common import EvalContext, GoalEvaluationResult, fmt, invalid, simulate


def evaluate_trap(move: AIMove, ctx: EvalContext) -> GoalEvaluationResult:
    sim = simulate(ctx, move)
    if sim is None:
        return invalid(move, Goal.TRAP)
    t = ctx.tuning
    value = 0.0
    tags: List[str] = []
    kill = False
    details = {"restricted": 0, "kills": 0}

    for enemy in ctx.state.glyphlings:
        if enemy.owner == ctx.player or not enemy.is_placed:
            continue
        result = analyze_target(
            ctx.state, sim, enemy.key, move.cast_position, move.destination, ctx.moves_before(enemy)
        )
        if result is None or result.moves_restricted <= 0:
            continue
        value += result.moves_restricted * t.trap_per_move
        details["restricted"] += result.moves_restricted
        if result.is_kill_shot:
            adj = adjacency(sim, enemy.position, ctx.player)
            value += t.kill_bonus + adj * t.kill_adjacency
            kill = True
            details["kills"] += 1
            tags.append(f"KILL({adj}adj)")
        elif result.is_near_kill_shot(t.near_kill_max):
            value += t.near_kill_bonus
            tags.append(f"restrict({result.moves_after})")
        if t.trap_geometry:
            value += result.geometry_bonus

    self_tangle = False
    if ctx.board_fill > t.self_tangle_fill and ctx.perceived_lead > t.self_tangle_lead:
        mover = sim.find_glyphling(move.glyphling)
        if mover is not None and count_moves(sim, mover) == 0:
            cost = adjacency(sim, move.destination, ctx.opponent) * t.self_tangle_adjacency_cost
            net = ctx.perceived_lead - cost
            if net > t.self_tangle_min_net:
                value += t.self_tangle_base + net
                self_tangle = True
                tags.append(f"self-tangle(net+{fmt(net)})")

    if not tags and value <= 0:
        tags.append("no trap value")
    return GoalEvaluationResult(
        move, Goal.TRAP, value, tuple(tags), details, is_kill_shot=kill, is_self_tangle=self_tangle
    )


__all__ = ["evaluate_trap"]
