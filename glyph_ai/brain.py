"""
One AI seat.

``GlyphAI.choose_move`` runs the whole decision pipeline synchronously:
perception update, situational trait shifts, the goal cascade, candidate
generation, evaluation of every candidate for the chosen goal only, then
weighted-random selection. The seat owns one ``random.Random`` that every
probabilistic step draws from, so a fixed seed replays the same game.
"""

from __future__ import annotations
import logging
import random
from typing import List, Optional, Sequence

from .action_gen import AIMove, generate_candidates
from .board import HexCoord
from .evaluators import EvalContext, GoalEvaluationResult, evaluate
from .game_models import GameState, Player
from .goals import GoalSelection, select_goal
from .perception import Perception, PerceptionSnapshot, assess_hand_quality, assess_letter_junk
from .personality import Difficulty, Personality, Situation, get_personality, shifted_ranges
from .reports import DecisionReport, build_decision_report
from .rules.api import valid_draft_placements
from .selection import build_pool, weighted_choice
from .traits import Trait
from .tuning import DEFAULT_TUNING, AITuning
from .words import Lexicon, default_lexicon

logger = logging.getLogger(__name__)


class GlyphAI:
    def __init__(
        self,
        player: Player,
        personality: Personality | str = "balanced",
        lexicon: Optional[Lexicon] = None,
        difficulty: Difficulty = Difficulty.FIRST_CLASS,
        seed: Optional[int] = None,
        tuning: AITuning = DEFAULT_TUNING,
        rng: Optional[random.Random] = None,
    ) -> None:
        if isinstance(personality, str):
            personality = get_personality(personality)
        self.player = Player.parse(player)
        self.personality = personality
        self.lexicon = lexicon or default_lexicon()
        self.difficulty = Difficulty.parse(difficulty)
        self.tuning = tuning
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.perception = Perception(
            self.player,
            self.rng,
            tuning,
            personality.meta.self_score_accuracy,
            personality.meta.opponent_score_accuracy,
        )
        self.last_goal_selection: Optional[GoalSelection] = None
        self.last_decision: Optional[DecisionReport] = None

    # -- perception lifecycle -------------------------------------------------

    def notify_scored(self, points: int) -> None:
        self.perception.scores.observe_my_score(points)

    def notify_opponent_scored(self, points: int) -> None:
        self.perception.scores.observe_opponent_score(points)

    def end_turn(self) -> None:
        self.perception.scores.end_turn()

    def reset(self) -> None:
        self.perception.reset()
        self.last_goal_selection = None
        self.last_decision = None

    def reseed(self, seed: Optional[int]) -> None:
        """Re-seed in place; perception shares the same generator."""
        self.seed = seed
        self.rng.seed(seed)

    # -- decisions -------------------------------------------------------------

    @property
    def zipf_threshold(self) -> float:
        return self.personality.zipf_threshold(self.difficulty)

    def _situation(self, snap: PerceptionSnapshot) -> Situation:
        return Situation(
            perceived_lead=snap.perceived_lead,
            my_max_pressure=snap.my_max_pressure,
            opponent_max_pressure=snap.opponent_max_pressure,
            hand_quality=snap.hand_quality,
            momentum=snap.momentum,
            board_fill=snap.board_fill,
            last_opponent_score=snap.last_opponent_score,
            difficulty=self.difficulty,
        )

    def choose_move(self, state: GameState) -> Optional[AIMove]:
        """Pick this seat's move, or None when it has no legal candidate."""
        snap = self.perception.update(state)
        ranges = shifted_ranges(self.personality, self._situation(snap), self.tuning)
        selection = select_goal(self.personality.goal_priority, ranges, self.rng)
        self.last_goal_selection = selection
        logger.debug("%s (%s): %s", self.player.value, self.personality.name, selection.reasoning)

        candidates = generate_candidates(state, self.player, self.rng, self.tuning.candidate_cap)
        ctx = EvalContext(
            state=state,
            player=self.player,
            lexicon=self.lexicon,
            zipf_threshold=self.zipf_threshold,
            perceived_lead=snap.perceived_lead,
            board_fill=snap.board_fill,
            tuning=self.tuning,
        )
        results = [evaluate(move, selection.goal, ctx) for move in candidates]
        pool = build_pool(results, self.personality.sub.flexibility, self.tuning)
        chosen: Optional[GoalEvaluationResult] = None
        if pool.pool:
            chosen = weighted_choice(pool.pool, pool.threshold, self.rng)

        self.last_decision = build_decision_report(
            player=self.player.value,
            personality=self.personality.name,
            difficulty=self.difficulty.value,
            selection=selection,
            zipf_threshold=ctx.zipf_threshold,
            candidate_count=len(candidates),
            ranked=pool.ranked,
            threshold=pool.threshold,
            pool_size=len(pool.pool),
            used_fallback_pool=pool.used_fallback,
            chosen=chosen,
            perception=snap.to_dict(),
            ranges=ranges,
        )
        if chosen is None:
            logger.debug("%s has no legal candidates", self.player.value)
            return None
        logger.debug(
            "%s chose %s [%s %.1f: %s]",
            self.player.value, chosen.move, selection.goal.value, chosen.score, chosen.reasoning,
        )
        return chosen.move

    def max_discards(self, hand_size: int) -> int:
        patience = self.personality.base_center(Trait.PATIENCE)
        return max(0, min(3 + int(round(3 * patience / 100.0)), hand_size - 1))

    def choose_discards(self, state: GameState) -> List[str]:
        """Letters to cycle back into the bag, junkiest first; empty when the hand is good enough.

        A letter held more than once may appear more than once: each entry is
        one copy going back, matching how ``rules.api.cycle_hand`` consumes it.
        """
        hand = list(state.hands.get(self.player, []))
        if not hand:
            return []
        threshold = 5.0 - self.personality.base_center(Trait.PRAGMATISM) / 25.0
        if assess_hand_quality(hand) >= threshold:
            return []
        scored = sorted(
            ((assess_letter_junk(letter, hand), letter) for letter in hand),
            key=lambda pair: pair[0],
            reverse=True,
        )
        return [letter for junk, letter in scored if junk >= 3.0][: self.max_discards(len(hand))]

    def choose_draft_position(
        self, state: GameState, valid_positions: Optional[Sequence[HexCoord]] = None
    ) -> Optional[HexCoord]:
        positions = list(valid_positions) if valid_positions is not None else valid_draft_placements(state)
        if not positions:
            return None
        board = state.board
        aggression = self.personality.base_center(Trait.AGGRESSION) / 100.0
        caution = self.personality.base_center(Trait.CAUTION) / 100.0
        own = [g.position for g in state.player_glyphlings(self.player) if g.is_placed]
        enemy = [g.position for g in state.glyphlings if g.owner != self.player and g.is_placed]

        scored = []
        for pos in positions:
            centre = (board.radius - pos.distance_to(board.center)) / board.radius
            score = centre * 5.0
            if enemy:
                nearest = min(pos.distance_to(e) for e in enemy)
                score += (10 - nearest) * aggression * 0.5
                score += nearest * caution * 0.3
            mobility = sum(
                1
                for n in pos.neighbors()
                if board.is_board_hex(n) and not board.is_perimeter_hex(n) and not state.has_glyphling(n)
            )
            score += mobility * 1.5
            if own:
                score += min(pos.distance_to(o) for o in own) * (1.0 - aggression) * 0.3
            score += self.rng.random() * 2.0
            scored.append((score, pos))

        scored.sort(key=lambda pair: pair[0], reverse=True)
        top = scored[:3]
        return top[self.rng.randint(0, len(top) - 1)][1]

    def __repr__(self) -> str:
        return f"GlyphAI({self.player.value}, {self.personality.name}, {self.difficulty.value})"


__all__ = ["GlyphAI"]
