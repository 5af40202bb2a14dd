from __future__ import annotations
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional, Sequence, Tuple
from datetime import datetime, timezone
import json

from ..evaluators import GoalEvaluationResult
from ..goals import GoalSelection
from ..traits import Trait, TraitRange


@dataclass
class CandidateDiag:
    move: str
    score: float
    reasoning: str
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CascadeStep:
    goal: str
    threshold: float
    roll: int
    activated: bool


@dataclass
class DecisionReport:
    timestamp: str
    player: str
    personality: str
    difficulty: str
    goal: str
    goal_fallback: bool
    cascade: List[CascadeStep]
    zipf_threshold: float
    candidate_count: int
    threshold: float
    pool_size: int
    used_fallback_pool: bool
    chosen: Optional[Dict[str, Any]]
    top_candidates: List[CandidateDiag]
    perception: Dict[str, float]
    trait_ranges: Dict[str, Tuple[float, float]]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, sort_keys=False)

    def to_markdown(self) -> str:
        lines = []
        lines.append(f"# Glyphtender AI Decision ({self.personality}, {self.player})")
        lines.append(f"- **Timestamp:** {self.timestamp}")
        lines.append(f"- **Difficulty:** {self.difficulty}  |  **Zipf threshold:** {self.zipf_threshold:.2f}")
        fallback = " (fallback)" if self.goal_fallback else ""
        lines.append(f"- **Goal:** {self.goal}{fallback}  |  **Candidates:** {self.candidate_count}")
        lines.append("\n## Goal Cascade")
        for step in self.cascade:
            mark = "activated" if step.activated else "missed"
            lines.append(f"- {step.goal}: d100={step.roll} vs {step.threshold:.0f} ({mark})")
        lines.append("\n## Selection")
        lines.append(f"- threshold: {self.threshold:.2f} | pool: {self.pool_size} | fallback pool: {self.used_fallback_pool}")
        if self.chosen:
            lines.append(f"- chosen: `{self.chosen['move']}` score={self.chosen['score']:.2f} ({self.chosen['reasoning']})")
        else:
            lines.append("- chosen: none (no legal candidates)")
        if self.top_candidates:
            lines.append("\n## Top Candidates")
            for i, c in enumerate(self.top_candidates, 1):
                lines.append(f"{i}. `{c.move}`  | score={c.score:.2f}  | {c.reasoning}")
        if self.perception:
            lines.append("\n## Perception")
            for k, v in sorted(self.perception.items()):
                lines.append(f"- {k}: {v:.3f}")
        if self.trait_ranges:
            lines.append("\n## Shifted Trait Ranges")
            for k, (lo, hi) in self.trait_ranges.items():
                lines.append(f"- {k}: {lo:.1f}-{hi:.1f}")
        return "\n".join(lines)


def build_decision_report(
    player: str,
    personality: str,
    difficulty: str,
    selection: GoalSelection,
    zipf_threshold: float,
    candidate_count: int,
    ranked: Sequence[GoalEvaluationResult],
    threshold: float,
    pool_size: int,
    used_fallback_pool: bool,
    chosen: Optional[GoalEvaluationResult],
    perception: Optional[Dict[str, float]],
    ranges: Dict[Trait, TraitRange],
    top_n: int = 10,
) -> DecisionReport:
    timestamp = datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")
    cascade = [
        CascadeStep(goal=g.value, threshold=float(thr), roll=int(roll), activated=roll <= thr)
        for g, thr, roll in selection.attempts
    ]
    top = [
        CandidateDiag(move=str(r.move), score=float(r.score), reasoning=r.reasoning, details=dict(r.details))
        for r in list(ranked)[:top_n]
    ]
    chosen_d = None
    if chosen is not None:
        chosen_d = {"move": str(chosen.move), "score": float(chosen.score), "reasoning": chosen.reasoning}
        chosen_d.update(chosen.move.to_dict())
    return DecisionReport(
        timestamp=timestamp,
        player=player,
        personality=personality,
        difficulty=difficulty,
        goal=selection.goal.value,
        goal_fallback=selection.was_fallback,
        cascade=cascade,
        zipf_threshold=float(zipf_threshold),
        candidate_count=int(candidate_count),
        threshold=float(threshold),
        pool_size=int(pool_size),
        used_fallback_pool=bool(used_fallback_pool),
        chosen=chosen_d,
        top_candidates=top,
        perception=perception or {},
        trait_ranges={t.value: (r.min, r.max) for t, r in ranges.items()},
    )


__all__ = ["DecisionReport", "CandidateDiag", "CascadeStep", "build_decision_report"]
