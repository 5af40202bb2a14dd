from __future__ import annotations
from typing import Any, Dict, Iterable
import json
import logging
import os

import yaml

from .tuning import AITuning

logger = logging.getLogger(__name__)

ENV_PREFIX = "GLYPH_AI__"


def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_one(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    if path.endswith(".json"):
        data = json.loads(text)
    else:
        # YAML is a superset of JSON, so this also covers extensionless files
        data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_configs(paths: Iterable[str] | None) -> Dict[str, Any]:
    cfg: Dict[str, Any] = {}
    for p in (paths or []):
        cfg = _deep_merge(cfg, _load_one(p))
    return cfg


def env_overrides(prefix: str = ENV_PREFIX) -> Dict[str, Any]:
    # Nested via double underscores: GLYPH_AI__TUNING__CANDIDATE_CAP=120
    out: Dict[str, Any] = {}
    for k, v in os.environ.items():
        if not k.startswith(prefix):
            continue
        parts = k[len(prefix):].split("__")
        cur = out
        for i, part in enumerate(parts):
            key = part.lower()
            if i == len(parts) - 1:
                cur[key] = _coerce(v)
            else:
                cur = cur.setdefault(key, {})
    return out


def _coerce(s: str) -> Any:
    t = s.strip().lower()
    if t in ("true", "false"):
        return t == "true"
    try:
        if "." in t:
            return float(t)
        return int(t)
    except ValueError:
        return s


def resolve_config(paths: Iterable[str] | None = None, env_prefix: str | None = ENV_PREFIX) -> Dict[str, Any]:
    """Files merged in order, then environment overrides on top."""
    cfg = load_configs(paths)
    if env_prefix:
        cfg = _deep_merge(cfg, env_overrides(env_prefix))
    return cfg


def load_tuning(paths: Iterable[str] | None = None, env_prefix: str | None = ENV_PREFIX) -> AITuning:
    cfg = resolve_config(paths, env_prefix)
    section = cfg.get("tuning") or {}
    if not isinstance(section, dict):
        raise ValueError("'tuning' config section must be a mapping")
    tuning = AITuning.from_dict(section)
    if section:
        logger.debug("Tuning overrides applied: %s", sorted(section))
    return tuning


__all__ = [
    "ENV_PREFIX",
    "load_configs",
    "env_overrides",
    "resolve_config",
    "load_tuning",
    "_deep_merge",
]
