from __future__ import annotations
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from ..traits import Goal, Trait, TraitRange


class Difficulty(Enum):
    APPRENTICE = "apprentice"
    FIRST_CLASS = "first_class"
    ARCHMAGE = "archmage"

    @classmethod
    def parse(cls, value: Any) -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        if key == "firstclass":
            key = "first_class"
        try:
            return cls(key)
        except ValueError:
            available = ", ".join(d.value for d in cls)
            raise ValueError(f"Difficulty '{value}' not found. Available: {available}") from None


# Minimum Zipf frequency a word needs before the AI "knows" it
ZIPF_BY_DIFFICULTY: Dict[Difficulty, float] = {
    Difficulty.APPRENTICE: 3.0,
    Difficulty.FIRST_CLASS: 2.0,
    Difficulty.ARCHMAGE: 0.0,
}


@dataclass(frozen=True)
class MetaTraits:
    vocabulary_modifier: float = 0.0
    self_score_accuracy: float = 50.0
    opponent_score_accuracy: float = 50.0
    morale_response: float = 50.0


@dataclass(frozen=True)
class SubTraits:
    endgame: float = 50.0
    desperation: float = 50.0
    momentum: float = 50.0
    pressure: float = 50.0
    opportunity: float = 50.0
    hand_quality: float = 50.0
    flexibility: float = 0.5


@dataclass(frozen=True)
class TraitShiftConfig:
    endgame: Mapping[Trait, float] = field(default_factory=dict)
    desperation: Mapping[Trait, float] = field(default_factory=dict)


@dataclass(frozen=True)
class Personality:
    """Immutable preset. ``base_ranges`` hands out fresh copies every call."""

    name: str
    description: str
    ranges: Tuple[Tuple[Trait, float, float], ...]
    goal_priority: Tuple[Goal, ...]
    meta: MetaTraits = field(default_factory=MetaTraits)
    sub: SubTraits = field(default_factory=SubTraits)
    shifts: TraitShiftConfig = field(default_factory=TraitShiftConfig)

    def base_ranges(self) -> Dict[Trait, TraitRange]:
        return {t: TraitRange(lo, hi) for t, lo, hi in self.ranges}

    def base_center(self, trait: Trait, default: float = 50.0) -> float:
        for t, lo, hi in self.ranges:
            if t is trait:
                return (lo + hi) / 2.0
        return default

    def zipf_threshold(self, difficulty: Difficulty) -> float:
        base = ZIPF_BY_DIFFICULTY.get(difficulty, 2.0)
        return max(0.0, base + self.meta.vocabulary_modifier)

    @classmethod
    def from_dict(cls, key: str, data: Mapping[str, Any]) -> "Personality":
        """Build a preset from its YAML mapping; ValueError on a malformed entry."""
        ranges_raw = data.get("ranges") or {}
        ranges = []
        for trait in Trait:
            bounds = ranges_raw.get(trait.value)
            if bounds is None:
                raise ValueError(f"Personality '{key}' has no range for trait '{trait.value}'")
            if len(bounds) != 2:
                raise ValueError(f"Personality '{key}' range for '{trait.value}' must be [min, max]")
            r = TraitRange(float(bounds[0]), float(bounds[1]))
            ranges.append((trait, r.min, r.max))

        try:
            priority = tuple(Goal(str(g).lower()) for g in (data.get("priority") or []))
        except ValueError as exc:
            raise ValueError(f"Personality '{key}' has an unknown goal in its priority: {exc}") from None

        shifts_raw = data.get("shifts") or {}
        shifts = TraitShiftConfig(
            endgame={Trait(k): float(v) for k, v in (shifts_raw.get("endgame") or {}).items()},
            desperation={Trait(k): float(v) for k, v in (shifts_raw.get("desperation") or {}).items()},
        )
        return cls(
            name=str(data.get("name", key.title())),
            description=str(data.get("description", "")),
            ranges=tuple(ranges),
            goal_priority=priority,
            meta=_scalars(MetaTraits, key, "meta", data.get("meta")),
            sub=_scalars(SubTraits, key, "sub", data.get("sub")),
            shifts=shifts,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "ranges": {t.value: [lo, hi] for t, lo, hi in self.ranges},
            "priority": [g.value for g in self.goal_priority],
            "meta": dict(self.meta.__dict__),
            "sub": dict(self.sub.__dict__),
            "shifts": {
                "endgame": {t.value: v for t, v in self.shifts.endgame.items()},
                "desperation": {t.value: v for t, v in self.shifts.desperation.items()},
            },
        }


def _scalars(cls, key: str, section: str, raw: Any):
    known = {f.name for f in fields(cls)}
    values = {}
    for k, v in (raw or {}).items():
        if k not in known:
            raise ValueError(f"Personality '{key}' has unknown {section} key '{k}'")
        values[k] = float(v)
    return cls(**values)


__all__ = [
    "Difficulty",
    "ZIPF_BY_DIFFICULTY",
    "MetaTraits",
    "SubTraits",
    "TraitShiftConfig",
    "Personality",
]
