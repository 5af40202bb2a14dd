import random

import pytest

from glyph_ai.game_models import Player
from glyph_ai.perception import (
    Perception,
    ScorePerception,
    assess_hand_quality,
    assess_letter_junk,
    assess_pressure,
)
from glyph_ai.tuning import AITuning

Y, B = Player.YELLOW, Player.BLUE


def test_hand_quality_bounds():
    assert assess_hand_quality([]) == 0.0
    good = assess_hand_quality(list("EATRSNLI"))
    bad = assess_hand_quality(list("QXZJVQKW"))
    assert 0.0 <= bad < 5.0 < good <= 10.0


def test_letter_junk():
    hand = list("QEATRSNX")
    assert assess_letter_junk("Q", hand) == 7.0
    assert assess_letter_junk("E", hand) == 0.0
    assert assess_letter_junk("T", list("TTTBCDGH")) == 6.0
    assert assess_letter_junk("A", []) == 0.0


def test_pressure_tangled_is_max(state_factory):
    ring = [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)]
    state = state_factory(tiles=[(q, r, "E", B) for q, r in ring], glyphlings=[(Y, 0, (0, 0))])
    assert assess_pressure(state, state.find_glyphling((Y, 0))) == 10.0


def test_pressure_counts_only_enemy_neighbours(state_factory):
    alone = state_factory(glyphlings=[(Y, 0, (0, 0))])
    friend = state_factory(glyphlings=[(Y, 0, (0, 0)), (Y, 1, (3, 0))])
    enemy = state_factory(glyphlings=[(Y, 0, (0, 0)), (B, 0, (3, 0))])
    p = lambda s: assess_pressure(s, s.find_glyphling((Y, 0)))
    assert p(alone) == 0.0
    assert p(friend) == p(alone)
    assert p(enemy) == p(alone)  # distance 3 adds nothing
    near = state_factory(glyphlings=[(Y, 0, (0, 0)), (B, 0, (2, -1))])
    assert p(near) == pytest.approx(0.5)


def test_confidence_grows_and_decays():
    sp = ScorePerception(random.Random(0))
    assert sp.confidence == 0.5
    sp.observe_my_score(5)
    sp.observe_opponent_score(5)
    assert sp.confidence == pytest.approx(0.68)
    for _ in range(30):
        sp.end_turn()
    assert sp.confidence == pytest.approx(0.1)


def test_exact_lead_when_confident_and_accurate():
    sp = ScorePerception(random.Random(1), self_accuracy=100, opponent_accuracy=100)
    for _ in range(6):
        sp.observe_my_score(4)
    sp.observe_opponent_score(9)
    assert sp.confidence == 1.0
    assert sp.perceived_lead() == pytest.approx(15.0)


def test_perceived_lead_is_noisy_at_low_confidence():
    sp = ScorePerception(random.Random(2), self_accuracy=100, opponent_accuracy=100)
    sp.observe_my_score(10)
    leads = {round(sp.perceived_lead(), 6) for _ in range(10)}
    assert len(leads) > 1
    assert all(abs(lead - 10.0) <= 20.0 * 0.4 + 1e-9 for lead in leads)


def test_momentum_is_clamped():
    sp = ScorePerception(random.Random(0), AITuning(momentum_cap=2.0))
    for _ in range(5):
        sp.observe_my_score(30)
    assert sp.momentum() == 2.0
    sp2 = ScorePerception(random.Random(0))
    sp2.observe_opponent_score(20)
    assert sp2.momentum() == -2.0


def test_perception_update_snapshot(state_factory):
    state = state_factory(glyphlings=[(Y, 0, (0, 0)), (B, 0, (2, -1))], hands={Y: "EATRSNLI"})
    snap = Perception(Y, random.Random(0)).update(state)
    assert snap.board_fill == 0.0
    assert snap.hand_quality > 5.0
    assert snap.my_max_pressure > 0.0
    assert set(snap.to_dict()) >= {"perceived_lead", "momentum", "hand_quality"}
