"""Trait range invariants and the goal priority cascade."""
import random

import pytest

from glyph_ai.goals import select_goal
from glyph_ai.traits import GOAL_TRAIT, Goal, Trait, TraitRange


class TestTraitRange:
    def test_construction_clamps_and_orders(self):
        r = TraitRange(120, -5)
        assert (r.min, r.max) == (0.0, 100.0)
        r = TraitRange(70, 30)
        assert (r.min, r.max) == (30.0, 70.0)

    def test_random_mutations_keep_invariant(self):
        rng = random.Random(1234)
        for _ in range(200):
            r = TraitRange(rng.uniform(-50, 150), rng.uniform(-50, 150))
            for _ in range(25):
                op = rng.choice(["shift", "shift_min", "shift_max", "narrow", "widen"])
                if op in ("narrow", "widen"):
                    getattr(r, op)(rng.uniform(0, 2))
                else:
                    getattr(r, op)(rng.uniform(-150, 150))
                assert 0.0 <= r.min <= r.max <= 100.0

    def test_shift_min_past_max_collapses(self):
        r = TraitRange(40, 60).shift_min(50)
        assert r.min == r.max == 60.0

    def test_narrow_and_widen_keep_centre(self):
        r = TraitRange(40, 60).narrow(0.5)
        assert (r.min, r.max) == (45.0, 55.0)
        r = TraitRange(40, 60).widen(1.0)
        assert (r.min, r.max) == (30.0, 70.0)

    def test_roll_stays_inside(self):
        rng = random.Random(7)
        r = TraitRange(20, 35)
        assert all(20.0 <= r.roll(rng) <= 35.0 for _ in range(100))


def test_every_goal_has_one_trait():
    assert set(GOAL_TRAIT) == set(Goal)
    assert set(GOAL_TRAIT.values()) == set(Trait)


def _ranges(lo, hi):
    return {t: TraitRange(lo, hi) for t in Trait}


def test_cascade_falls_back_to_primary_when_every_roll_fails(rigged_rng):
    priority = [Goal.BUILD, Goal.SCORE, Goal.TRAP]
    sel = select_goal(priority, _ranges(0, 50), rigged_rng(100))
    assert sel.goal is Goal.BUILD
    assert sel.was_fallback
    assert [a[0] for a in sel.attempts] == priority


def test_cascade_first_activation_wins():
    ranges = _ranges(0, 0)
    ranges[Trait.AGGRESSION] = TraitRange(100, 100)
    sel = select_goal([Goal.SCORE, Goal.TRAP, Goal.DUMP], ranges, random.Random(3))
    assert sel.goal is Goal.TRAP
    assert not sel.was_fallback
    assert len(sel.attempts) == 2


def test_empty_priority_defaults_to_score():
    sel = select_goal([], _ranges(0, 100), random.Random(0))
    assert sel.goal is Goal.SCORE and sel.was_fallback


@pytest.mark.parametrize("seed", range(20))
def test_cascade_always_returns_a_listed_goal(seed):
    rng = random.Random(seed)
    priority = rng.sample(list(Goal), 4)
    sel = select_goal(priority, _ranges(rng.uniform(0, 100), rng.uniform(0, 100)), rng)
    assert sel.goal in priority


def test_every_goal_maps_to_its_own_trait():
    assert {g.trait for g in Goal} == set(Trait)
    assert all(GOAL_TRAIT[g] is g.trait for g in Goal)
