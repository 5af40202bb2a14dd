import pytest

from glyph_ai.config import _deep_merge, env_overrides, load_tuning, resolve_config
from glyph_ai.tuning import AITuning

def test_deep_merge_simple():
    a = {"tuning": {"pool_size": 8, "kill_bonus": 50}, "lexicon": {"path": "a.csv"}}
    b = {"tuning": {"kill_bonus": 80}, "lexicon": {"zipf": 2.0}}
    c = _deep_merge(a, b)
    assert c["tuning"]["pool_size"] == 8 and c["tuning"]["kill_bonus"] == 80
    assert c["lexicon"]["path"] == "a.csv" and c["lexicon"]["zipf"] == 2.0

def test_env_overrides_parsing(monkeypatch):
    monkeypatch.setenv("GLYPH_AI__TUNING__POOL_SIZE", "12")
    monkeypatch.setenv("GLYPH_AI__TUNING__TRAP_GEOMETRY", "false")
    monkeypatch.setenv("GLYPH_AI__TUNING__FLEX_BASE", "0.6")
    d = env_overrides()
    assert d["tuning"]["pool_size"] == 12
    assert d["tuning"]["trap_geometry"] is False
    assert d["tuning"]["flex_base"] == 0.6

def test_load_tuning_file_then_env(tmp_path, monkeypatch):
    cfg = tmp_path / "ai.yaml"
    cfg.write_text("tuning:\n  kill_bonus: 80\n  pool_size: 4\n")
    monkeypatch.setenv("GLYPH_AI__TUNING__POOL_SIZE", "6")
    t = load_tuning([str(cfg)])
    assert t.kill_bonus == 80.0
    assert t.pool_size == 6
    assert load_tuning([str(cfg)], env_prefix=None).pool_size == 4

def test_json_config(tmp_path):
    cfg = tmp_path / "ai.json"
    cfg.write_text('{"tuning": {"candidate_cap": 50}}')
    assert resolve_config([str(cfg)], env_prefix=None)["tuning"]["candidate_cap"] == 50

def test_unknown_tuning_key_rejected(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("tuning:\n  kill_bonsu: 80\n")
    with pytest.raises(ValueError, match="kill_bonsu"):
        load_tuning([str(cfg)], env_prefix=None)

def test_non_mapping_file_rejected(tmp_path):
    cfg = tmp_path / "list.yaml"
    cfg.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError, match="mapping"):
        load_tuning([str(cfg)], env_prefix=None)

def test_boolean_tuning_accepts_strings(tmp_path):
    assert AITuning.from_dict({"trap_geometry": "false"}).trap_geometry is False
    assert AITuning.from_dict({"trap_geometry": "True"}).trap_geometry is True
    cfg = tmp_path / "quoted.yaml"
    cfg.write_text('tuning:\n  trap_geometry: "false"\n')
    assert load_tuning([str(cfg)], env_prefix=None).trap_geometry is False
    with pytest.raises(ValueError, match="trap_geometry"):
        AITuning.from_dict({"trap_geometry": "maybe"})

def test_public_names_resolve():
    import glyph_ai.config as config
    import glyph_ai.traits as traits

    for module in (config, traits):
        for name in module.__all__:
            assert hasattr(module, name), name
    assert set(traits.__all__) == {"Trait", "Goal", "GOAL_TRAIT", "TraitRange"}
