"""
Candidate move generation.

One candidate per (owned placed glyphling, destination, cast position,
distinct hand letter). Staying in place counts as a destination. Cast
positions for a destination are read from a relocated clone of the state, so
the caller's state is never touched.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..board import HexCoord
from ..game_models import GameState, GlyphlingKey, Player
from ..rules.api import legal_cast_positions, legal_destinations, relocated

MAX_CANDIDATES = 300


@dataclass(frozen=True)
class AIMove:
    glyphling: GlyphlingKey
    destination: HexCoord
    cast_position: HexCoord
    letter: str

    @property
    def owner(self) -> Player:
        return self.glyphling[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "glyphling": {"owner": self.glyphling[0].value, "index": self.glyphling[1]},
            "destination": self.destination.to_list(),
            "cast_position": self.cast_position.to_list(),
            "letter": self.letter,
        }

    def __str__(self) -> str:
        owner, index = self.glyphling
        return f"{owner.value}#{index} -> {self.destination} cast {self.letter}@{self.cast_position}"


def _distinct_letters(hand: List[str]) -> List[str]:
    seen: List[str] = []
    for letter in hand:
        if letter not in seen:
            seen.append(letter)
    return seen


def generate_candidates(
    state: GameState,
    player: Player,
    rng: Optional[random.Random] = None,
    cap: int = MAX_CANDIDATES,
) -> List[AIMove]:
    """All candidate moves for ``player``, sampled down to ``cap`` if needed.

    Tangled glyphlings (no legal slides) cannot act and contribute nothing.
    """
    letters = _distinct_letters(state.hands.get(player, []))
    if not letters:
        return []

    candidates: List[AIMove] = []
    for g in state.player_glyphlings(player):
        if not g.is_placed:
            continue
        slides = legal_destinations(state, g)
        if not slides:
            continue
        for dest in [g.position] + slides:
            with relocated(state, g.key, dest) as moved:
                if moved is None:
                    continue
                casts = legal_cast_positions(moved, moved.find_glyphling(g.key))
            for cast in casts:
                for letter in letters:
                    candidates.append(AIMove(g.key, dest, cast, letter))

    if len(candidates) > cap:
        rng = rng or random.Random()
        candidates = rng.sample(candidates, cap)
    return candidates


__all__ = ["AIMove", "MAX_CANDIDATES", "generate_candidates"]
