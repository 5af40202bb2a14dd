"""Score: points from words formed this turn, with bonuses for long words and multiple words."""
from __future__ import annotations

from ..action_gen import AIMove
from ..traits import Goal
from ..words import score_word_for_player
from .common import EvalContext, GoalEvaluationResult, invalid, simulate


def evaluate_score(move: AIMove, ctx: EvalContext) -> GoalEvaluationResult:
    sim = simulate(ctx, move)
    if sim is None:
        return invalid(move, Goal.SCORE)
    t = ctx.tuning
    words = ctx.allowed_words(sim, move)
    if not words:
        return GoalEvaluationResult(move, Goal.SCORE, 0.0, ("no words",))

    points = sum(score_word_for_player(w, sim, ctx.player) for w in words)
    longest = max(len(w.letters) for w in words)
    value = float(points)
    if longest >= t.length_bonus_from:
        value += (longest - (t.length_bonus_from - 1)) * t.length_bonus
    if len(words) > 1:
        value += (len(words) - 1) * t.multi_word_bonus
    return GoalEvaluationResult(
        move,
        Goal.SCORE,
        value,
        (f"WORD({points})",),
        {"points": points, "words": [w.letters for w in words], "longest": longest},
    )


__all__ = ["evaluate_score"]
