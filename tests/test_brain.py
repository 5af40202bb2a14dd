from dataclasses import replace

from glyph_ai.brain import GlyphAI
from glyph_ai.game_models import Player
from glyph_ai.game_setup import new_game
from glyph_ai.personality import load_personality
from glyph_ai.rules import cycle_hand, valid_draft_placements
from glyph_ai.traits import Goal, Trait

Y, B = Player.YELLOW, Player.BLUE


def test_no_hand_means_no_move(state_factory, lexicon):
    state = state_factory(glyphlings=[(Y, 0, (0, 0)), (B, 0, (3, -3))])
    ai = GlyphAI(Y, "balanced", lexicon=lexicon, seed=1)
    assert ai.choose_move(state) is None
    assert ai.last_decision is not None
    assert ai.last_decision.chosen is None


def test_same_seed_same_move_and_state_untouched():
    state = new_game(seed=3)
    before = state.to_dict()
    ai = GlyphAI(Y, "bully", seed=7)
    first = ai.choose_move(state)
    ai.reseed(7)
    second = ai.choose_move(state)
    assert first is not None
    assert first == second
    assert GlyphAI(Y, "bully", seed=7).choose_move(state) == first
    assert state.to_dict() == before


def test_chosen_move_is_a_legal_candidate():
    state = new_game(seed=5)
    ai = GlyphAI(B, "scholar", seed=2)
    move = ai.choose_move(state)
    assert move.owner is B
    assert move.letter in state.hands[B]
    assert move.cast_position not in state.tiles
    report = ai.last_decision
    assert report.candidate_count > 0
    assert report.chosen["move"] == str(move)


def test_single_goal_personality_always_picks_it():
    base = load_personality("balanced")
    ranges = tuple(
        (t, 100.0, 100.0) if t is Trait.AGGRESSION else (t, lo, hi) for t, lo, hi in base.ranges
    )
    hunter = replace(base, name="Hunter", ranges=ranges, goal_priority=(Goal.TRAP,))
    ai = GlyphAI(Y, hunter, seed=4)
    state = new_game(seed=4)
    for seed in range(5):
        ai.reseed(seed)
        ai.choose_move(state)
        assert ai.last_goal_selection.goal is Goal.TRAP
        assert ai.last_decision.goal == "trap"


def test_unknown_personality_name_falls_back():
    assert GlyphAI(Y, "gremlin").personality.name == "Balanced"


def test_discards_junk_first(state_factory, lexicon):
    state = state_factory(glyphlings=[(Y, 0, (0, 0))], hands={Y: "QXZJVQKW"})
    ai = GlyphAI(Y, "balanced", lexicon=lexicon, seed=0)
    assert ai.max_discards(8) == 5
    assert ai.choose_discards(state) == ["Q", "Q", "X", "Z", "J"]


def test_repeated_discards_each_return_one_copy(state_factory, lexicon):
    state = state_factory(glyphlings=[(Y, 0, (0, 0))], hands={Y: "QXZJVQKW"})
    state.tile_bag = list("EAEAE")
    discards = GlyphAI(Y, "balanced", lexicon=lexicon, seed=0).choose_discards(state)
    returned = cycle_hand(state, Y, discards)
    assert returned == ["Q", "Q", "X", "Z", "J"]
    assert "Q" not in state.hands[Y]
    assert sorted(state.hands[Y]) == sorted("VKW" + "EAEAE")
    assert state.tile_bag == ["Q", "Q", "X", "Z", "J"]


def test_good_hand_is_kept(state_factory, lexicon):
    state = state_factory(glyphlings=[(Y, 0, (0, 0))], hands={Y: "EATRSNLI"})
    assert GlyphAI(Y, "balanced", lexicon=lexicon).choose_discards(state) == []


def test_discard_cap_respects_hand_size():
    ai = GlyphAI(Y, "scholar")
    assert ai.max_discards(3) == 2
    assert ai.max_discards(1) == 0


def test_draft_position_is_valid():
    state = new_game(seed=8, draft=True)
    ai = GlyphAI(Y, "bully", seed=8)
    pos = ai.choose_draft_position(state)
    assert pos in valid_draft_placements(state)
    assert ai.choose_draft_position(state, []) is None


def test_package_exports_resolve_lazily():
    import glyph_ai

    assert glyph_ai.GlyphAI is GlyphAI
    assert glyph_ai.new_game is new_game
    assert "play_game" in dir(glyph_ai)


# Hexes around (-2, 2); filling them with tiles tangles whatever stands there.
CAGE = [(-1, 2), (-1, 1), (-2, 1), (-3, 2), (-3, 3), (-2, 3)]


def test_bully_commits_to_trap_even_with_nothing_to_trap(state_factory, lexicon, rigged_rng):
    state = state_factory(
        tiles=[(q, r, "E", Y) for q, r in CAGE],
        glyphlings=[(B, 0, (-2, 2)), (Y, 0, (2, -1))],
        hands={Y: "EEATRSQX"},
    )
    ai = GlyphAI(Y, "bully", lexicon=lexicon, rng=rigged_rng(1))
    move = ai.choose_move(state)
    selection = ai.last_goal_selection
    assert selection.goal is Goal.TRAP
    assert not selection.was_fallback
    assert len(selection.attempts) == 1
    assert move is not None
    assert ai.last_decision.chosen["reasoning"] == "no trap value"
    assert all(c.reasoning == "no trap value" for c in ai.last_decision.top_candidates)


def test_bully_trap_turn_restricts_a_reachable_enemy(state_factory, lexicon, rigged_rng):
    state = state_factory(
        glyphlings=[(B, 0, (0, 0)), (Y, 0, (2, -1))],
        hands={Y: "EEATRSQX"},
    )
    ai = GlyphAI(Y, "bully", lexicon=lexicon, rng=rigged_rng(1))
    ai.choose_move(state)
    assert ai.last_goal_selection.goal is Goal.TRAP
    chosen = ai.last_decision.chosen
    assert chosen["score"] > 0
    assert chosen["reasoning"] != "no trap value"
