"""
Future-word potential of a placement, used by the Build goal.

Evaluated on a state that already holds the new tile. Four signals:
productive gaps (an empty hex on one of the tile's leylines that sits before
another tile and could complete a word), extension paths (an empty neighbour
opposite a tile), leyline crossings (axes with a tile on either side) and a
spacing bonus that prefers loose, growable shapes over clumps.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Set

from ..board import AXES, HexCoord, opposite
from ..game_models import GameState
from ..words import Lexicon, find_words_at

TRIAL_LETTERS = "EARIOTNSLC"
MAX_GAP_WALK = 10


@dataclass(frozen=True)
class SetupEvaluation:
    gaps: int
    extension_paths: int
    crossings: int
    spacing_bonus: float

    @property
    def gap_value(self) -> float:
        return self.gaps * 3.0

    @property
    def extension_value(self) -> float:
        return self.extension_paths * 2.0

    @property
    def crossing_value(self) -> float:
        if self.crossings >= 3:
            return 5.0
        if self.crossings >= 2:
            return 3.0
        return 0.0

    @property
    def total(self) -> float:
        return self.gap_value + self.extension_value + self.crossing_value + self.spacing_bonus


def could_complete_word(state: GameState, lexicon: Lexicon, pos: HexCoord) -> bool:
    if not any(n in state.tiles for n in pos.neighbors()):
        return False
    return any(find_words_at(state, lexicon, pos, letter) for letter in TRIAL_LETTERS)


def productive_gaps(state: GameState, lexicon: Lexicon, cast_position: HexCoord) -> int:
    gaps: Set[HexCoord] = set()
    for direction in range(6):
        for i, pos in enumerate(state.board.leyline(cast_position, direction)):
            if i >= MAX_GAP_WALK:
                break
            if pos in state.tiles:
                continue
            nxt = pos.neighbor(direction)
            if nxt in state.tiles and pos not in gaps and could_complete_word(state, lexicon, pos):
                gaps.add(pos)
    return len(gaps)


def extension_paths(state: GameState, cast_position: HexCoord) -> int:
    paths = 0
    for direction in range(6):
        n = cast_position.neighbor(direction)
        if state.board.is_board_hex(n) and n not in state.tiles:
            if cast_position.neighbor(opposite(direction)) in state.tiles:
                paths += 1
    return paths


def leyline_crossings(state: GameState, cast_position: HexCoord) -> int:
    return sum(
        1
        for d in AXES
        if cast_position.neighbor(d) in state.tiles or cast_position.neighbor(opposite(d)) in state.tiles
    )


def spacing_bonus(state: GameState, cast_position: HexCoord) -> float:
    empty = 0
    tiles = 0
    for n in cast_position.neighbors():
        if not state.board.is_board_hex(n):
            continue
        if n in state.tiles:
            tiles += 1
        else:
            empty += 1
    if tiles == 0:
        return 0.0
    if tiles >= 3:
        return -2.0
    if tiles == 1 and empty >= 4:
        return 4.0
    if tiles == 2 and empty >= 3:
        return 3.0
    if empty >= 4:
        return 2.0
    if empty >= 3:
        return 1.0
    return 0.0


def evaluate_setup(state: GameState, lexicon: Lexicon, cast_position: HexCoord) -> SetupEvaluation:
    return SetupEvaluation(
        gaps=productive_gaps(state, lexicon, cast_position),
        extension_paths=extension_paths(state, cast_position),
        crossings=leyline_crossings(state, cast_position),
        spacing_bonus=spacing_bonus(state, cast_position),
    )


__all__ = [
    "SetupEvaluation",
    "evaluate_setup",
    "could_complete_word",
    "productive_gaps",
    "extension_paths",
    "leyline_crossings",
    "spacing_bonus",
]
