"""Deny: take space the opponent wants, block their leylines and cast near their tiles."""
from __future__ import annotations
from typing import List

from ..action_gen import AIMove
from ..game_models import GameState, Player
from ..board import HexCoord
from ..rules.api import is_occupied
from ..perception import assess_letter_junk
from ..traits import Goal
from .common import EvalContext, GoalEvaluationResult, fmt, invalid, simulate


def leyline_blocks(state: GameState, player: Player, cast_position: HexCoord, reach: int) -> int:
    """Enemy leylines (from their glyphlings' current hexes) that ``cast_position`` would cut."""
    blocked = 0
    for g in state.glyphlings:
        if g.owner == player or not g.is_placed:
            continue
        for direction in range(6):
            for i, pos in enumerate(state.board.leyline(g.position, direction)):
                if i >= reach:
                    break
                if pos == cast_position:
                    blocked += 1
                    break
                if is_occupied(state, pos):
                    break
    return blocked


def evaluate_deny(move: AIMove, ctx: EvalContext) -> GoalEvaluationResult:
    if simulate(ctx, move) is None:
        return invalid(move, Goal.DENY)
    t = ctx.tuning
    state = ctx.state
    value = 0.0
    tags: List[str] = []

    blocked = leyline_blocks(state, ctx.player, move.cast_position, t.leyline_reach)
    if blocked:
        value += blocked * t.deny_leyline
        tags.append(f"block-ley({blocked})")

    near = sum(
        1
        for tile in state.tiles.values()
        if tile.owner == ctx.opponent
        and tile.position.distance_to(move.cast_position) <= t.deny_proximity_range
    )
    if near:
        value += near * t.deny_proximity
        tags.append(f"near-opp({near})")

    denial = ctx.denial_value(move.cast_position)
    if denial > 0:
        value += denial
        tags.append(f"deny-word({fmt(denial)})")

    junk = assess_letter_junk(move.letter, state.hands.get(ctx.player, []))
    if junk > t.deny_junk_min:
        value += junk
        tags.append("junk")

    if not tags:
        tags.append("no denial")
    return GoalEvaluationResult(
        move, Goal.DENY, value, tuple(tags), {"leylines_blocked": blocked, "near_opponent": near}
    )


__all__ = ["evaluate_deny", "leyline_blocks"]
