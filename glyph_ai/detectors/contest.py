"""Contested positions: empty hexes the opponent could cast on next turn that set up words."""
from __future__ import annotations
import string
from dataclasses import dataclass
from typing import Set

from ..board import HexCoord
from ..game_models import GameState, Player
from ..rules.api import legal_cast_positions, legal_destinations, relocated
from ..words import Lexicon, find_words_at


@dataclass(frozen=True)
class ContestedPosition:
    position: HexCoord
    potential_word_count: int = 0
    best_word_length: int = 0
    adjacent_tiles: int = 0
    denial_value: float = 0.0


def enemy_cast_reach(state: GameState, player: Player) -> Set[HexCoord]:
    """Every hex some enemy glyphling could cast onto after one slide (or staying put).

    Tangled glyphlings cannot act and reach nothing.
    """
    reach: Set[HexCoord] = set()
    for g in state.glyphlings:
        if g.owner == player or not g.is_placed:
            continue
        slides = legal_destinations(state, g)
        if not slides:
            continue
        for dest in [g.position] + slides:
            with relocated(state, g.key, dest) as moved:
                if moved is None:
                    continue
                reach.update(legal_cast_positions(moved, moved.find_glyphling(g.key)))
    return reach


def is_contested(state: GameState, position: HexCoord, player: Player) -> bool:
    return position in enemy_cast_reach(state, player)


def evaluate_position(state: GameState, lexicon: Lexicon, position: HexCoord) -> ContestedPosition:
    """Word potential of an empty hex for whoever casts there next."""
    if position in state.tiles:
        return ContestedPosition(position)
    adjacent = sum(1 for n in position.neighbors() if n in state.tiles)
    if adjacent == 0:
        return ContestedPosition(position)

    words: Set[str] = set()
    best = 0
    for letter in string.ascii_uppercase:
        for w in find_words_at(state, lexicon, position, letter):
            if w.letters not in words:
                words.add(w.letters)
                best = max(best, len(w.letters))
    if not words:
        return ContestedPosition(position, adjacent_tiles=adjacent)

    value = float(len(words))
    if best >= 5:
        value += 4.0
    elif best >= 4:
        value += 2.0
    if adjacent >= 3:
        value *= 2.5
    elif adjacent >= 2:
        value *= 2.0
    else:
        value *= 1.3
    return ContestedPosition(position, len(words), best, adjacent, value)


def denial_value(state: GameState, lexicon: Lexicon, position: HexCoord, reach: Set[HexCoord]) -> float:
    """Denial value of taking ``position``; zero unless the opponent can reach it."""
    if position not in reach:
        return 0.0
    return evaluate_position(state, lexicon, position).denial_value


__all__ = [
    "ContestedPosition",
    "enemy_cast_reach",
    "is_contested",
    "evaluate_position",
    "denial_value",
]
