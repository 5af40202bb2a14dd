import json

from glyph_ai.cli import main


def test_personalities_listing(capsys):
    assert main(["personalities"]) == 0
    out = capsys.readouterr().out
    assert "bully" in out and "vulture" in out


def test_personality_show(capsys):
    assert main(["personalities", "--show", "scholar"]) == 0
    assert "SCHOLAR" in capsys.readouterr().out
    assert main(["personalities", "--show", "gremlin"]) == 1


def test_decide_writes_report(tmp_path, capsys):
    report = tmp_path / "decision.json"
    rc = main(["decide", "--size", "small", "--seed", "3", "--personality", "builder", "--report", str(report)])
    assert rc == 0
    data = json.loads(report.read_text())
    assert data["personality"] == "Builder"
    assert data["chosen"]["move"] in capsys.readouterr().out


def test_decide_from_state_file(tmp_path, capsys):
    from glyph_ai.game_setup import new_game

    state_file = tmp_path / "state.json"
    state_file.write_text(json.dumps(new_game(seed=6, size="small").to_dict()))
    assert main(["decide", "--state", str(state_file), "--player", "blue", "--print-md"]) == 0
    assert "# Glyphtender AI Decision (Balanced, blue)" in capsys.readouterr().out


def test_bench_summary(tmp_path, capsys):
    out = tmp_path / "bench.json"
    rc = main(["bench", "--games", "2", "--size", "small", "--max-turns", "4", "--yellow", "bully", "--out", str(out)])
    assert rc == 0
    data = json.loads(out.read_text())
    assert data["games"] == 2
    assert sum(data["wins"].values()) == 2
    assert sum(data["end_reasons"].values()) == 2
