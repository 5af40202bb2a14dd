"""Tangle detection and scoring: a placed glyphling with no legal moves is tangled."""
from __future__ import annotations

from typing import List

from ..game_models import GameState, Glyphling, Player
from .api import count_moves

TANGLE_BONUS = 10


def is_tangled(state: GameState, glyphling: Glyphling) -> bool:
    return glyphling.is_placed and count_moves(state, glyphling) == 0


def tangled_glyphlings(state: GameState, player: Player) -> List[Glyphling]:
    return [g for g in state.player_glyphlings(player) if is_tangled(state, g)]


def score_new_tangles(state: GameState) -> List[Glyphling]:
    """Award TANGLE_BONUS to the opponent once per newly tangled glyphling."""
    newly: List[Glyphling] = []
    for g in state.glyphlings:
        if g.key in state.tangled or not is_tangled(state, g):
            continue
        state.tangled.add(g.key)
        state.scores[g.owner.opponent] += TANGLE_BONUS
        newly.append(g)
    return newly


def all_tangled(state: GameState, player: Player) -> bool:
    mine = state.player_glyphlings(player)
    return bool(mine) and all(is_tangled(state, g) for g in mine)


def should_end_game(state: GameState) -> bool:
    return all_tangled(state, Player.YELLOW) or all_tangled(state, Player.BLUE)


__all__ = [
    "TANGLE_BONUS",
    "is_tangled",
    "tangled_glyphlings",
    "score_new_tangles",
    "all_tangled",
    "should_end_game",
]
