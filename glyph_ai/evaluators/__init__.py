"""
Goal evaluators.

Each evaluator scores a candidate move for one goal on a private simulated
copy of the state; the real state is never touched. Results carry a score and
short reasoning tags (``KILL(2adj)``, ``WORD(7)``, ``safe-dump`` ...).
"""

from __future__ import annotations
from typing import Callable, Dict

from ..action_gen import AIMove
from ..traits import Goal
from .build import evaluate_build
from .common import MIN_SCORE, EvalContext, GoalEvaluationResult, simulate
from .deny import evaluate_deny
from .dump import evaluate_dump
from .escape import evaluate_escape
from .score import evaluate_score
from .steal import evaluate_steal
from .trap import evaluate_trap

Evaluator = Callable[[AIMove, EvalContext], GoalEvaluationResult]

EVALUATORS: Dict[Goal, Evaluator] = {
    Goal.TRAP: evaluate_trap,
    Goal.SCORE: evaluate_score,
    Goal.DENY: evaluate_deny,
    Goal.ESCAPE: evaluate_escape,
    Goal.BUILD: evaluate_build,
    Goal.STEAL: evaluate_steal,
    Goal.DUMP: evaluate_dump,
}


def evaluate(move: AIMove, goal: Goal, ctx: EvalContext) -> GoalEvaluationResult:
    return EVALUATORS[goal](move, ctx)


__all__ = [
    "MIN_SCORE",
    "EVALUATORS",
    "EvalContext",
    "GoalEvaluationResult",
    "evaluate",
    "simulate",
    "evaluate_trap",
    "evaluate_score",
    "evaluate_deny",
    "evaluate_escape",
    "evaluate_build",
    "evaluate_steal",
    "evaluate_dump",
]
