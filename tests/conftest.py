"""Shared fixtures: a tiny lexicon, a hand-built state factory and a rigged rng."""
import random

import pytest

from glyph_ai.board import Board, HexCoord
from glyph_ai.game_models import GameState, Glyphling, Player, Tile
from glyph_ai.words import Lexicon

WORDS = [
    "AT,5.5",
    "TA,2.5",
    "CAT,5.0",
    "ACT,4.8",
    "EAT,5.0",
    "TEA,4.5",
    "ATE,4.0",
    "RAT,4.6",
    "ART,5.0",
    "TAR,3.8",
    "STAR,5.0",
    "RATE,4.9",
    "CATS,4.5",
    "SCAT,2.2",
    "QAT,1.5",
]


def make_state(radius=4, tiles=(), glyphlings=(), hands=None, current=Player.YELLOW):
    """tiles: (q, r, letter, owner); glyphlings: (owner, index, (q, r) or None)."""
    state = GameState(board=Board(radius))
    for q, r, letter, owner in tiles:
        pos = HexCoord(q, r)
        state.tiles[pos] = Tile(letter, owner, pos)
    for owner, index, pos in glyphlings:
        state.glyphlings.append(Glyphling(owner, index, HexCoord(*pos) if pos is not None else None))
    for player, letters in (hands or {}).items():
        state.hands[player] = list(letters)
    state.current_player = current
    return state


@pytest.fixture
def lexicon():
    return Lexicon.from_lines(WORDS)


@pytest.fixture
def state_factory():
    return make_state


class RiggedRandom(random.Random):
    """Every uniform draw is 0.0 and every randint lands on ``d100`` (clamped to its bounds)."""

    def __init__(self, d100=100, seed=0):
        self.d100 = d100
        super().__init__(seed)

    def random(self):
        return 0.0

    def getrandbits(self, k):
        # keeps sample()/shuffle() on the real generator
        return super().getrandbits(k)

    def randint(self, a, b):
        return max(a, min(b, self.d100))


@pytest.fixture
def rigged_rng():
    """Factory: ``rigged_rng(1)`` passes every cascade roll, ``rigged_rng(100)`` fails them."""
    return RiggedRandom
