"""
New-game construction: tile bag, starting glyphlings and opening hands.

Two variants are supported: the fixed opening (glyphlings start on four
mirrored interior hexes) and the draft opening (glyphlings start unplaced and
players alternate picks from ``rules.valid_draft_placements``).
"""

from __future__ import annotations
import random
from typing import Dict, List, Optional

from .board import Board, HexCoord
from .game_models import GamePhase, GameState, Glyphling, Player
from .rules.api import GLYPHLINGS_PER_PLAYER, HAND_SIZE, draw_tile

# Standard distribution, 120 tiles in total
LETTER_DISTRIBUTION: Dict[str, int] = {
    "A": 9, "B": 2, "C": 2, "D": 4, "E": 12, "F": 2,
    "G": 3, "H": 2, "I": 9, "J": 1, "K": 1, "L": 4,
    "M": 2, "N": 6, "O": 8, "P": 2, "Q": 1, "R": 6,
    "S": 4, "T": 6, "U": 4, "V": 2, "W": 2, "X": 1,
    "Y": 2, "Z": 1,
}


def build_tile_bag(rng: random.Random) -> List[str]:
    bag = [letter for letter, n in LETTER_DISTRIBUTION.items() for _ in range(n)]
    rng.shuffle(bag)
    return bag


def starting_positions(board: Board) -> Dict[Player, List[HexCoord]]:
    """Mirrored opening hexes on the ring halfway to the edge."""
    a = max(1, board.radius // 2)
    return {
        Player.YELLOW: [HexCoord(a, -a), HexCoord(-a, a)],
        Player.BLUE: [HexCoord(0, -a), HexCoord(0, a)],
    }


def deal_opening_hands(state: GameState) -> None:
    for _ in range(HAND_SIZE):
        for player in (Player.YELLOW, Player.BLUE):
            draw_tile(state, player)


def new_game(
    seed: Optional[int] = None,
    size: str = "medium",
    draft: bool = False,
    rng: Optional[random.Random] = None,
) -> GameState:
    rng = rng or random.Random(seed)
    board = Board.of_size(size)
    state = GameState(board=board, tile_bag=build_tile_bag(rng))
    if draft:
        for player in (Player.YELLOW, Player.BLUE):
            for i in range(GLYPHLINGS_PER_PLAYER):
                state.glyphlings.append(Glyphling(player, i, None))
        state.phase = GamePhase.DRAFT
        return state

    for player, positions in starting_positions(board).items():
        for i, pos in enumerate(positions[:GLYPHLINGS_PER_PLAYER]):
            state.glyphlings.append(Glyphling(player, i, pos))
    deal_opening_hands(state)
    state.phase = GamePhase.PLAY
    return state


__all__ = [
    "LETTER_DISTRIBUTION",
    "build_tile_bag",
    "starting_positions",
    "deal_opening_hands",
    "new_game",
]
