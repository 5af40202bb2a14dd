import json

from glyph_ai.brain import GlyphAI
from glyph_ai.game_models import Player
from glyph_ai.game_setup import new_game


def _report():
    ai = GlyphAI(Player.YELLOW, "strategist", seed=12)
    ai.choose_move(new_game(seed=12))
    return ai.last_decision


def test_report_json_roundtrips():
    report = _report()
    data = json.loads(report.to_json())
    assert data["player"] == "yellow"
    assert data["personality"] == "Strategist"
    if not data["goal_fallback"]:
        assert data["cascade"][-1] == {**data["cascade"][-1], "goal": data["goal"], "activated": True}
    assert len(data["top_candidates"]) <= 10
    assert set(data["trait_ranges"]) == {
        "aggression", "greed", "spite", "caution", "patience", "opportunism", "pragmatism",
    }


def test_report_markdown_mentions_goal_and_choice():
    report = _report()
    md = report.to_markdown()
    assert md.startswith("# Glyphtender AI Decision (Strategist, yellow)")
    assert f"**Goal:** {report.goal}" in md
    assert report.chosen["move"] in md
