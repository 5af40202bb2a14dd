"""
Situational shift engine.

``shifted_ranges`` copies a personality's base ranges and applies, in order:
difficulty, morale, endgame, desperation, own pressure, opponent pressure,
hand quality and momentum. Every step is an additive shift on range bounds
(difficulty also rescales width). The result only feeds the goal cascade.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Mapping

from ..traits import Trait, TraitRange
from ..tuning import DEFAULT_TUNING, AITuning
from .types import Difficulty, Personality


@dataclass(frozen=True)
class Situation:
    perceived_lead: float = 0.0
    my_max_pressure: float = 0.0
    opponent_max_pressure: float = 0.0
    hand_quality: float = 5.0
    momentum: float = 0.0
    board_fill: float = 0.0
    last_opponent_score: int = 0
    difficulty: Difficulty = Difficulty.FIRST_CLASS


def _shift(ranges: Dict[Trait, TraitRange], trait: Trait, delta: float) -> None:
    if delta and trait in ranges:
        ranges[trait].shift(delta)


def apply_difficulty(ranges: Dict[Trait, TraitRange], difficulty: Difficulty) -> None:
    for r in ranges.values():
        if difficulty is Difficulty.APPRENTICE:
            r.widen(0.3)
            r.shift(-10.0)
        elif difficulty is Difficulty.ARCHMAGE:
            r.narrow(0.3)
            r.shift(10.0)


def morale_multiplier(last_opponent_score: int, tuning: AITuning = DEFAULT_TUNING) -> float:
    if last_opponent_score >= tuning.morale_amplified:
        return 1.5
    if last_opponent_score >= tuning.morale_full:
        return 1.0
    if last_opponent_score >= tuning.morale_minor:
        return 0.5
    return 0.0


def apply_morale(
    ranges: Dict[Trait, TraitRange],
    personality: Personality,
    last_opponent_score: int,
    tuning: AITuning = DEFAULT_TUNING,
) -> None:
    mult = morale_multiplier(last_opponent_score, tuning)
    if mult == 0.0:
        return
    # > 50 rallies after a big opponent turn, < 50 is demoralised
    direction = (personality.meta.morale_response - 50.0) / 50.0
    shift = mult * tuning.morale_shift * direction
    for r in ranges.values():
        r.shift(shift)


def _apply_table(ranges: Dict[Trait, TraitRange], table: Mapping[Trait, float], multiplier: float) -> None:
    for trait in Trait:
        _shift(ranges, trait, table.get(trait, 0.0) * multiplier)


def endgame_intensity(board_fill: float, tuning: AITuning = DEFAULT_TUNING) -> float:
    if board_fill < tuning.endgame_start:
        return 0.0
    span = tuning.endgame_full - tuning.endgame_start
    return min(1.0, (board_fill - tuning.endgame_start) / span)


def desperation_intensity(perceived_lead: float, tuning: AITuning = DEFAULT_TUNING) -> float:
    if perceived_lead >= tuning.desperation_start:
        return 0.0
    span = tuning.desperation_start - tuning.desperation_full
    return min(1.0, (tuning.desperation_start - perceived_lead) / span)


def _pressure_shift(pressure: float, sensitivity: float, tuning: AITuning) -> float:
    if pressure < tuning.pressure_threshold:
        return 0.0
    intensity = min(1.0, (pressure - tuning.pressure_threshold) / tuning.pressure_threshold)
    return intensity * (sensitivity / 100.0) * tuning.pressure_shift


def shifted_ranges(
    personality: Personality,
    situation: Situation,
    tuning: AITuning = DEFAULT_TUNING,
) -> Dict[Trait, TraitRange]:
    """Fresh per-turn ranges; the personality itself is never mutated."""
    ranges = personality.base_ranges()
    sub = personality.sub

    apply_difficulty(ranges, situation.difficulty)
    apply_morale(ranges, personality, situation.last_opponent_score, tuning)

    endgame = endgame_intensity(situation.board_fill, tuning)
    if endgame > 0.0:
        _apply_table(ranges, personality.shifts.endgame, endgame * sub.endgame / 100.0)

    desperation = desperation_intensity(situation.perceived_lead, tuning)
    if desperation > 0.0:
        _apply_table(ranges, personality.shifts.desperation, desperation * sub.desperation / 100.0)

    own = _pressure_shift(situation.my_max_pressure, sub.pressure, tuning)
    if own:
        _shift(ranges, Trait.CAUTION, own)
        _shift(ranges, Trait.AGGRESSION, -own / 2.0)

    opp = _pressure_shift(situation.opponent_max_pressure, sub.opportunity, tuning)
    if opp:
        _shift(ranges, Trait.AGGRESSION, opp)
        _shift(ranges, Trait.OPPORTUNISM, opp)

    hq = situation.hand_quality
    hand_sens = sub.hand_quality / 100.0
    if hq < tuning.hand_bad:
        s = (tuning.hand_bad - hq) / tuning.hand_bad * hand_sens * tuning.hand_bad_shift
        _shift(ranges, Trait.PRAGMATISM, s)
        _shift(ranges, Trait.GREED, -s)
    elif hq > tuning.hand_good:
        s = (hq - tuning.hand_good) / (10.0 - tuning.hand_good) * hand_sens * tuning.hand_good_shift
        _shift(ranges, Trait.GREED, s)
        _shift(ranges, Trait.PRAGMATISM, -s)

    m = situation.momentum
    mom_sens = sub.momentum / 100.0
    if m > tuning.momentum_hot:
        _shift(ranges, Trait.AGGRESSION, (m - tuning.momentum_hot) / 3.0 * mom_sens * tuning.momentum_shift)
    elif m < tuning.momentum_cold:
        _shift(ranges, Trait.CAUTION, (tuning.momentum_cold - m) / 3.0 * mom_sens * tuning.momentum_shift)

    return ranges


__all__ = [
    "Situation",
    "apply_difficulty",
    "apply_morale",
    "morale_multiplier",
    "endgame_intensity",
    "desperation_intensity",
    "shifted_ranges",
]
