import random

import pytest

from glyph_ai.action_gen import AIMove
from glyph_ai.board import HexCoord
from glyph_ai.evaluators import GoalEvaluationResult
from glyph_ai.game_models import Player
from glyph_ai.selection import build_pool, select_move, selection_threshold, weighted_choice
from glyph_ai.traits import Goal
from glyph_ai.tuning import AITuning


def _results(*scores):
    return [
        GoalEvaluationResult(AIMove((Player.YELLOW, 0), HexCoord(0, 0), HexCoord(i + 1, 0), "E"), Goal.SCORE, s)
        for i, s in enumerate(scores)
    ]


def test_threshold_scales_with_flexibility():
    assert selection_threshold(10.0, 0.5) == pytest.approx(8.25)
    assert selection_threshold(10.0, 1.0) == pytest.approx(7.0)
    assert selection_threshold(10.0, 0.0) == pytest.approx(9.5)


def test_threshold_for_non_positive_best():
    assert selection_threshold(-2.0, 0.5) == pytest.approx(-5.0)
    assert selection_threshold(0.0, 0.9) == pytest.approx(-3.0)


def test_pool_is_capped_and_above_threshold():
    results = _results(*[10.0] * 12, 1.0)
    pool = build_pool(results, 0.5)
    assert len(pool.pool) == 8
    assert not pool.used_fallback
    assert all(r.score >= pool.threshold for r in pool.pool)


def test_choice_stays_inside_pool_over_many_draws():
    results = _results(10.0, 9.0, 8.5, 3.0, 1.0, -4.0)
    allowed = {id(r) for r in build_pool(results, 0.5).pool}
    rng = random.Random(11)
    for _ in range(300):
        chosen = select_move(results, 0.5, rng)
        assert id(chosen) in allowed
        assert chosen.score >= 8.25


def test_fallback_pool_when_nothing_clears_threshold():
    results = _results(5.0, 4.0, 3.0)
    pool = build_pool(results, 0.0, AITuning(flex_base=2.0))
    assert pool.used_fallback
    assert [r.score for r in pool.pool] == [5.0, 4.0, 3.0]


def test_empty_input_selects_nothing():
    assert select_move([], 0.5, random.Random(0)) is None


def test_weights_favour_higher_scores():
    results = _results(20.0, 10.0)
    rng = random.Random(3)
    picks = [weighted_choice(results, 10.0, rng).score for _ in range(2000)]
    assert picks.count(20.0) > picks.count(10.0) * 5
