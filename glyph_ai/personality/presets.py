"""
Personality preset management.

Presets are data: ``personalities.yaml`` maps a lower-case key to one
personality table (ranges, priority, meta, sub, shifts). Extra YAML files with
the same shape can be layered on top, e.g. for tuning experiments.
"""

from __future__ import annotations
import logging
import os
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional

import yaml

from ..traits import Trait
from .types import Personality

logger = logging.getLogger(__name__)

PRESETS_PATH = os.path.join(os.path.dirname(__file__), "personalities.yaml")
DEFAULT_PERSONALITY = "balanced"


@lru_cache(maxsize=1)
def _bundled_tables() -> Dict[str, Dict[str, Any]]:
    with open(PRESETS_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _read_tables(path: str) -> Dict[str, Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Personality file {path} must contain a mapping of presets")
    return data


def load_all_personalities(extra_paths: Optional[Iterable[str]] = None) -> Dict[str, Personality]:
    """All presets keyed by lower-case name; later files override earlier ones.

    Built fresh on every call so callers can never share mutable state.
    """
    tables: Dict[str, Dict[str, Any]] = dict(_bundled_tables())
    for path in (extra_paths or []):
        for key, table in _read_tables(path).items():
            tables[str(key).lower()] = table
    return {str(key).lower(): Personality.from_dict(str(key), table) for key, table in tables.items()}


def get_available_personalities(extra_paths: Optional[Iterable[str]] = None) -> List[str]:
    """Get list of available personality names."""
    return sorted(load_all_personalities(extra_paths).keys())


def load_personality(name: str, extra_paths: Optional[Iterable[str]] = None) -> Personality:
    """
    Load a specific personality preset.

    Args:
        name: Preset name, case-insensitive (e.g. "bully", "Scholar")
        extra_paths: Optional YAML files layered over the bundled presets

    Returns:
        The immutable Personality

    Raises:
        ValueError: If the name doesn't exist
    """
    presets = load_all_personalities(extra_paths)
    key = name.strip().lower()
    if key not in presets:
        available = ", ".join(sorted(presets))
        raise ValueError(
            f"Personality '{name}' not found. "
            f"Available personalities: {available}"
        )
    return presets[key]


def get_personality(name: Optional[str]) -> Personality:
    """Like ``load_personality`` but falls back to Balanced for unknown names."""
    if not name:
        return load_personality(DEFAULT_PERSONALITY)
    try:
        return load_personality(name)
    except ValueError:
        logger.warning("Unknown personality %r, using %s", name, DEFAULT_PERSONALITY)
        return load_personality(DEFAULT_PERSONALITY)


def get_personality_info(name: str) -> Dict[str, Any]:
    p = load_personality(name)
    ranges = p.base_ranges()
    dominant = max(Trait, key=lambda t: ranges[t].center)
    return {
        "name": p.name,
        "description": p.description,
        "primary_goal": p.goal_priority[0].value if p.goal_priority else None,
        "dominant_trait": dominant.value,
        "flexibility": p.sub.flexibility,
        "vocabulary_modifier": p.meta.vocabulary_modifier,
        "ranges": {t.value: ranges[t].to_list() for t in Trait},
    }


def print_personality_summary(name: str) -> None:
    """Print a human-readable summary of a preset."""
    info = get_personality_info(name)
    print(f"\n=== {info['name'].upper()} ===")
    print(info["description"])
    print(f"Primary goal: {info['primary_goal']}  |  Dominant trait: {info['dominant_trait']}")
    print(f"Flexibility: {info['flexibility']}  |  Vocabulary modifier: {info['vocabulary_modifier']:+.1f}")
    print("\nTrait ranges:")
    for trait, (lo, hi) in info["ranges"].items():
        print(f"  {trait:12s} {lo:5.1f} - {hi:5.1f}")


def list_personalities() -> None:
    """Print all available presets with their one-line descriptions."""
    print("\n=== Available Personalities ===\n")
    for key, p in sorted(load_all_personalities().items()):
        print(f"  {key:12s} - {p.description}")
    print()


__all__ = [
    "PRESETS_PATH",
    "DEFAULT_PERSONALITY",
    "load_all_personalities",
    "get_available_personalities",
    "load_personality",
    "get_personality",
    "get_personality_info",
    "print_personality_summary",
    "list_personalities",
]
