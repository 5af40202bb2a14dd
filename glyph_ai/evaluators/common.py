"""Shared plumbing for the seven goal evaluators."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple

from ..action_gen import AIMove
from ..board import HexCoord
from ..detectors import denial_value, enemy_cast_reach
from ..game_models import GameState, Glyphling, GlyphlingKey, Player
from ..rules.api import count_moves, place_simulated
from ..traits import Goal
from ..tuning import DEFAULT_TUNING, AITuning
from ..words import Lexicon, WordResult, find_words_at

# Sentinel score for moves that cannot be evaluated; finite so selection arithmetic stays sane.
MIN_SCORE = -1e9


@dataclass
class EvalContext:
    """Per-decision inputs plus caches shared across every candidate of one turn."""

    state: GameState
    player: Player
    lexicon: Lexicon
    zipf_threshold: float = 0.0
    perceived_lead: float = 0.0
    board_fill: float = 0.0
    tuning: AITuning = DEFAULT_TUNING
    _enemy_reach: Optional[Set[HexCoord]] = field(default=None, repr=False)
    _denial: Dict[HexCoord, float] = field(default_factory=dict, repr=False)
    _moves_before: Dict[GlyphlingKey, int] = field(default_factory=dict, repr=False)

    @property
    def opponent(self) -> Player:
        return self.player.opponent

    def enemy_reach(self) -> Set[HexCoord]:
        if self._enemy_reach is None:
            self._enemy_reach = enemy_cast_reach(self.state, self.player)
        return self._enemy_reach

    def denial_value(self, pos: HexCoord) -> float:
        if pos not in self._denial:
            self._denial[pos] = denial_value(self.state, self.lexicon, pos, self.enemy_reach())
        return self._denial[pos]

    def moves_before(self, glyphling: Glyphling) -> int:
        if glyphling.key not in self._moves_before:
            self._moves_before[glyphling.key] = count_moves(self.state, glyphling)
        return self._moves_before[glyphling.key]

    def allowed_words(self, sim: GameState, move: AIMove) -> List[WordResult]:
        """Words the move forms that this seat's vocabulary would recognise."""
        return [
            w
            for w in find_words_at(sim, self.lexicon, move.cast_position, move.letter)
            if self.lexicon.is_word_above_frequency_threshold(w.letters, self.zipf_threshold)
        ]


@dataclass
class GoalEvaluationResult:
    move: AIMove
    goal: Goal
    score: float
    tags: Tuple[str, ...] = ()
    details: Dict[str, Any] = field(default_factory=dict)
    is_kill_shot: bool = False
    is_self_tangle: bool = False

    @property
    def reasoning(self) -> str:
        return ", ".join(self.tags)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "move": self.move.to_dict(),
            "goal": self.goal.value,
            "score": round(self.score, 3),
            "reasoning": self.reasoning,
            "kill_shot": self.is_kill_shot,
            "self_tangle": self.is_self_tangle,
        }


def simulate(ctx: EvalContext, move: AIMove) -> Optional[GameState]:
    """Clone, move and cast; None when the moving glyphling is not ours or not on the board."""
    g = ctx.state.find_glyphling(move.glyphling)
    if g is None or g.owner != ctx.player:
        return None
    return place_simulated(ctx.state, move.glyphling, move.destination, move.cast_position, move.letter)


def invalid(move: AIMove, goal: Goal) -> GoalEvaluationResult:
    return GoalEvaluationResult(move, goal, MIN_SCORE, ("Invalid glyphling",))


def fmt(value: float) -> str:
    """Compact number for reasoning tags: ints stay ints, floats keep one decimal."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


__all__ = ["MIN_SCORE", "EvalContext", "GoalEvaluationResult", "simulate", "invalid", "fmt"]
