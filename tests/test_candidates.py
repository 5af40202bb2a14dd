import random

from glyph_ai.action_gen import AIMove, generate_candidates
from glyph_ai.board import HexCoord
from glyph_ai.game_models import Player
from glyph_ai.game_setup import new_game
from glyph_ai.rules import legal_cast_positions, legal_destinations, relocated

Y, B = Player.YELLOW, Player.BLUE
RING = [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)]


def _expected_count(state, player):
    letters = len(set(state.hands[player]))
    total = 0
    for g in state.player_glyphlings(player):
        slides = legal_destinations(state, g)
        if not slides:
            continue
        for dest in [g.position] + slides:
            with relocated(state, g.key, dest) as moved:
                total += len(legal_cast_positions(moved, moved.find_glyphling(g.key))) * letters
    return total


def test_candidates_cover_stay_and_slides(state_factory):
    state = state_factory(glyphlings=[(Y, 0, (0, 0)), (B, 0, (3, -3))], hands={Y: "EEA"})
    moves = generate_candidates(state, Y, cap=10_000)
    assert len(moves) == _expected_count(state, Y)
    assert {m.letter for m in moves} == {"E", "A"}
    assert any(m.destination == HexCoord(0, 0) for m in moves)
    assert all(m.cast_position != m.destination for m in moves)


def test_tangled_glyphling_cannot_act(state_factory):
    state = state_factory(
        tiles=[(q, r, "E", B) for q, r in RING],
        glyphlings=[(Y, 0, (0, 0)), (Y, 1, (3, -3)), (B, 0, (-3, 3))],
        hands={Y: "A"},
    )
    moves = generate_candidates(state, Y)
    assert moves
    assert all(m.glyphling == (Y, 1) for m in moves)


def test_no_hand_means_no_candidates(state_factory):
    state = state_factory(glyphlings=[(Y, 0, (0, 0))])
    assert generate_candidates(state, Y) == []


def test_cap_samples_deterministically():
    state = new_game(seed=9)
    full = generate_candidates(state, Y, cap=100_000)
    assert len(full) > 300
    a = generate_candidates(state, Y, random.Random(5))
    b = generate_candidates(state, Y, random.Random(5))
    assert len(a) == 300 and a == b
    assert set(a) <= set(full)


def test_generation_leaves_state_untouched():
    state = new_game(seed=4)
    before = state.to_dict()
    generate_candidates(state, Y, random.Random(0))
    assert state.to_dict() == before


def test_move_serialisation():
    m = AIMove((Y, 1), HexCoord(1, -1), HexCoord(3, -1), "Q")
    assert m.owner is Y
    assert m.to_dict() == {
        "glyphling": {"owner": "yellow", "index": 1},
        "destination": [1, -1],
        "cast_position": [3, -1],
        "letter": "Q",
    }
    assert "Q@(3,-1)" in str(m)
