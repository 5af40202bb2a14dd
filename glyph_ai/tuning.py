"""
Tuned constants of the AI core.

Every number the perception layer, shift engine, evaluators and move selector
use lives here so it can be overridden from a config file or the environment
(see ``config.load_tuning``). Defaults are the shipped balance.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class AITuning:
    # Score perception
    confidence_start: float = 0.5
    confidence_min: float = 0.1
    confidence_max: float = 1.0
    confidence_gain_self: float = 0.1
    confidence_gain_opponent: float = 0.08
    confidence_decay: float = 0.05
    drift_range: float = 3.0
    lead_noise: float = 20.0
    momentum_window: int = 5
    momentum_divisor: float = 10.0
    momentum_cap: float = 5.0
    accuracy_noise: float = 0.5

    # Situational shifts
    morale_minor: int = 8
    morale_full: int = 12
    morale_amplified: int = 17
    morale_shift: float = 15.0
    endgame_start: float = 0.4
    endgame_full: float = 0.8
    desperation_start: float = -5.0
    desperation_full: float = -25.0
    pressure_threshold: float = 5.0
    pressure_shift: float = 20.0
    hand_bad: float = 4.0
    hand_good: float = 7.0
    hand_bad_shift: float = 15.0
    hand_good_shift: float = 10.0
    momentum_hot: float = 2.0
    momentum_cold: float = -2.0
    momentum_shift: float = 10.0

    # Candidate generation and selection
    candidate_cap: int = 300
    pool_size: int = 8
    fallback_pool: int = 5
    flex_base: float = 0.7
    flex_span: float = 0.25
    negative_margin: float = 3.0

    # Trap
    trap_per_move: float = 5.0
    kill_bonus: float = 50.0
    kill_adjacency: float = 3.0
    near_kill_max: int = 2
    near_kill_bonus: float = 15.0
    trap_geometry: bool = True
    self_tangle_fill: float = 0.8
    self_tangle_lead: float = 15.0
    self_tangle_adjacency_cost: float = 3.0
    self_tangle_base: float = 30.0
    self_tangle_min_net: float = 0.0

    # Score
    length_bonus_from: int = 5
    length_bonus: float = 2.0
    multi_word_bonus: float = 3.0

    # Deny
    leyline_reach: int = 10
    deny_leyline: float = 3.0
    deny_proximity: float = 2.0
    deny_proximity_range: int = 2
    deny_junk_min: float = 3.0

    # Escape
    escape_improvement: float = 5.0
    escape_route: float = 2.0
    escape_direction: float = 3.0
    escape_open_routes: int = 4
    escape_risky_routes: int = 2
    escape_risky_penalty: float = 10.0
    escape_danger: float = 3.0

    # Build
    build_chain: float = 1.5
    build_chain_range: int = 2

    # Steal
    steal_full_rate: float = 3.0
    steal_partial_rate: float = 1.5

    # Dump
    dump_safe_distance: int = 3
    dump_safe_bonus: float = 3.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "AITuning":
        return cls().with_overrides(data or {})

    def with_overrides(self, overrides: Mapping[str, Any]) -> "AITuning":
        from .config import _coerce  # config imports this module

        known = {f.name: f for f in fields(self)}
        updates: Dict[str, Any] = {}
        for key, value in overrides.items():
            name = str(key).lower()
            if name not in known:
                raise ValueError(f"Unknown tuning key '{key}'")
            default = getattr(self, name)
            if isinstance(default, bool):
                if isinstance(value, str):
                    value = _coerce(value)
                if not isinstance(value, (bool, int)):
                    raise ValueError(f"Tuning key '{key}' expects true or false, got {value!r}")
                updates[name] = bool(value)
            elif isinstance(default, int):
                updates[name] = int(value)
            else:
                updates[name] = float(value)
        return replace(self, **updates)


DEFAULT_TUNING = AITuning()

__all__ = ["AITuning", "DEFAULT_TUNING"]
