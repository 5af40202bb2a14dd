"""
Deliberately imperfect perception for an AI seat.

``ScorePerception`` tracks fuzzy estimates of both scores; the other assessors
are deterministic reads of the hand and board. Everything random here draws
from the seat's single ``random.Random``.
"""

from __future__ import annotations
import random
from collections import Counter, deque
from dataclasses import dataclass
from typing import Deque, Dict, Sequence

from .board import direction_between
from .game_models import GameState, Glyphling, Player
from .rules.api import legal_destinations
from .tuning import DEFAULT_TUNING, AITuning

VOWELS = frozenset("AEIOU")
COMMON_LETTERS = frozenset("ETAOINSRL")
HARD_LETTERS = frozenset("QXZJV")
WORD_STARTERS = frozenset("STCPBMD")
WORD_ENDERS = frozenset("SEDTNRY")

MAX_ASSESSMENT = 10.0


class ScorePerception:
    """Noisy running estimate of my score and the opponent's score."""

    def __init__(
        self,
        rng: random.Random,
        tuning: AITuning = DEFAULT_TUNING,
        self_accuracy: float = 100.0,
        opponent_accuracy: float = 100.0,
    ) -> None:
        self.rng = rng
        self.tuning = tuning
        self.self_accuracy = self_accuracy
        self.opponent_accuracy = opponent_accuracy
        self.reset()

    def reset(self) -> None:
        self.my_estimate = 0.0
        self.opponent_estimate = 0.0
        self.confidence = self.tuning.confidence_start
        self.last_opponent_score = 0
        self._mine: Deque[int] = deque(maxlen=self.tuning.momentum_window)
        self._theirs: Deque[int] = deque(maxlen=self.tuning.momentum_window)

    def _misread(self, points: int, accuracy: float) -> float:
        error = 1.0 - max(0.0, min(100.0, accuracy)) / 100.0
        if error <= 0.0 or points == 0:
            return float(points)
        return points + self.rng.uniform(-1.0, 1.0) * points * error * self.tuning.accuracy_noise

    def observe_my_score(self, points: int) -> None:
        self.my_estimate += self._misread(points, self.self_accuracy)
        self._mine.append(points)
        self.confidence = min(self.tuning.confidence_max, self.confidence + self.tuning.confidence_gain_self)

    def observe_opponent_score(self, points: int) -> None:
        self.opponent_estimate += self._misread(points, self.opponent_accuracy)
        self.last_opponent_score = points
        self._theirs.append(points)
        self.confidence = min(self.tuning.confidence_max, self.confidence + self.tuning.confidence_gain_opponent)

    def end_turn(self) -> None:
        t = self.tuning
        self.confidence = max(t.confidence_min, self.confidence - t.confidence_decay)
        drift = self.rng.uniform(-1.0, 1.0) * t.drift_range * (1.0 - self.confidence)
        self.my_estimate = max(0.0, self.my_estimate + drift * 0.5)
        self.opponent_estimate = max(0.0, self.opponent_estimate + drift * 0.5)

    def perceived_lead(self) -> float:
        noise_range = self.tuning.lead_noise * (1.0 - self.confidence)
        return (self.my_estimate - self.opponent_estimate) + self.rng.uniform(-1.0, 1.0) * noise_range

    def momentum(self) -> float:
        diff = sum(self._mine) - sum(self._theirs)
        cap = self.tuning.momentum_cap
        return max(-cap, min(cap, diff / self.tuning.momentum_divisor))


def assess_hand_quality(hand: Sequence[str]) -> float:
    """Score a hand in [0, 10]; 5 is an unremarkable hand."""
    if not hand:
        return 0.0
    letters = [c.upper() for c in hand]
    vowels = sum(1 for c in letters if c in VOWELS)
    consonants = len(letters) - vowels
    score = 5.0

    if vowels < 2:
        score -= 1.5
    elif vowels > 4:
        score -= 1.0
    if consonants < 3:
        score -= 1.5

    score += 0.25 * sum(1 for c in letters if c in COMMON_LETTERS)
    for count in Counter(letters).values():
        if count >= 3:
            score -= 1.0
        elif count == 2:
            score -= 0.3
    score -= 0.4 * sum(1 for c in letters if c in HARD_LETTERS)
    score += 0.15 * sum(1 for c in letters if c in WORD_STARTERS)
    score += 0.15 * sum(1 for c in letters if c in WORD_ENDERS)
    return max(0.0, min(MAX_ASSESSMENT, score))


def assess_letter_junk(letter: str, hand: Sequence[str]) -> float:
    """How much ``letter`` hurts ``hand``, in [0, 10]; higher is junkier."""
    if not hand:
        return 0.0
    letters = [c.upper() for c in hand]
    upper = letter.upper()
    junk = 0.0

    if upper in HARD_LETTERS:
        junk += 3.0
        if upper == "Q" and "U" not in letters:
            junk += 4.0

    copies = letters.count(upper)
    if copies >= 3:
        junk += 3.0
    elif copies >= 2:
        junk += 1.0

    vowels = sum(1 for c in letters if c in VOWELS)
    if upper in VOWELS:
        if vowels >= 5:
            junk += 2.0
    elif vowels == 0:
        junk += 3.0
    elif vowels <= 1:
        junk += 1.5

    return min(MAX_ASSESSMENT, junk)


def assess_pressure(state: GameState, glyphling: Glyphling) -> float:
    """How cornered a glyphling is, in [0, 10]; 10 means already tangled.

    Enemy glyphlings are those owned by anyone other than ``glyphling.owner``.
    """
    if not glyphling.is_placed:
        return 0.0
    moves = legal_destinations(state, glyphling)
    if not moves:
        return MAX_ASSESSMENT

    open_dirs = {direction_between(glyphling.position, m) for m in moves}
    open_dirs.discard(None)
    pressure = (6 - len(open_dirs)) * 1.5
    if len(open_dirs) <= 1:
        pressure += 2.0
    elif len(open_dirs) <= 2:
        pressure += 1.0

    for other in state.glyphlings:
        if other.owner == glyphling.owner or not other.is_placed:
            continue
        d = glyphling.position.distance_to(other.position)
        if d == 1:
            pressure += 1.5
        elif d == 2:
            pressure += 0.5
    return min(MAX_ASSESSMENT, pressure)


@dataclass(frozen=True)
class PerceptionSnapshot:
    perceived_lead: float
    momentum: float
    confidence: float
    hand_quality: float
    my_max_pressure: float
    opponent_max_pressure: float
    board_fill: float
    last_opponent_score: int

    def to_dict(self) -> Dict[str, float]:
        return {
            "perceived_lead": round(self.perceived_lead, 3),
            "momentum": round(self.momentum, 3),
            "confidence": round(self.confidence, 3),
            "hand_quality": round(self.hand_quality, 3),
            "my_max_pressure": round(self.my_max_pressure, 3),
            "opponent_max_pressure": round(self.opponent_max_pressure, 3),
            "board_fill": round(self.board_fill, 3),
            "last_opponent_score": float(self.last_opponent_score),
        }


class Perception:
    """Everything one AI seat believes about the game."""

    def __init__(
        self,
        player: Player,
        rng: random.Random,
        tuning: AITuning = DEFAULT_TUNING,
        self_accuracy: float = 100.0,
        opponent_accuracy: float = 100.0,
    ) -> None:
        self.player = player
        self.scores = ScorePerception(rng, tuning, self_accuracy, opponent_accuracy)
        self.hand_quality = 5.0
        self.my_max_pressure = 0.0
        self.opponent_max_pressure = 0.0

    def update(self, state: GameState) -> PerceptionSnapshot:
        self.hand_quality = assess_hand_quality(state.hands.get(self.player, []))
        self.my_max_pressure = 0.0
        self.opponent_max_pressure = 0.0
        for g in state.glyphlings:
            if not g.is_placed:
                continue
            p = assess_pressure(state, g)
            if g.owner == self.player:
                self.my_max_pressure = max(self.my_max_pressure, p)
            else:
                self.opponent_max_pressure = max(self.opponent_max_pressure, p)
        return PerceptionSnapshot(
            perceived_lead=self.scores.perceived_lead(),
            momentum=self.scores.momentum(),
            confidence=self.scores.confidence,
            hand_quality=self.hand_quality,
            my_max_pressure=self.my_max_pressure,
            opponent_max_pressure=self.opponent_max_pressure,
            board_fill=state.fill_percent,
            last_opponent_score=self.scores.last_opponent_score,
        )

    def reset(self) -> None:
        self.scores.reset()
        self.hand_quality = 5.0
        self.my_max_pressure = 0.0
        self.opponent_max_pressure = 0.0


__all__ = [
    "ScorePerception",
    "Perception",
    "PerceptionSnapshot",
    "assess_hand_quality",
    "assess_letter_junk",
    "assess_pressure",
]
