"""
Turn orchestration between AI seats, for benchmarks and the CLI.

Plays the role of the game's turn manager: it asks the current seat for a
move, applies it to the real state, scores the words it formed (full
dictionary, no vocabulary filter) and any new tangles, feeds the perception
hooks of both seats, cycles the mover's hand when no word was formed, and
advances the turn.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .brain import GlyphAI
from .game_models import GamePhase, GameState, Player
from .rules.api import cycle_hand, end_turn, execute_move, place_draft_glyphling
from .rules.tangles import score_new_tangles, should_end_game
from .words import find_words_at, score_word_for_player

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 200


@dataclass
class TurnRecord:
    turn: int
    player: str
    move: Optional[Dict[str, Any]]
    goal: Optional[str]
    reasoning: str = ""
    words: List[str] = field(default_factory=list)
    points: int = 0
    tangle_points: Dict[str, int] = field(default_factory=dict)
    discarded: List[str] = field(default_factory=list)


@dataclass
class GameResult:
    scores: Dict[str, int]
    winner: Optional[str]
    turns: int
    end_reason: str
    history: List[TurnRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scores": dict(self.scores),
            "winner": self.winner,
            "turns": self.turns,
            "end_reason": self.end_reason,
            "history": [vars(t) for t in self.history],
        }


def run_draft(seats: Mapping[Player, GlyphAI], state: GameState) -> None:
    """Alternate draft picks until every glyphling is on the board."""
    order = [Player.YELLOW, Player.BLUE]
    i = 0
    while state.phase is GamePhase.DRAFT:
        player = order[i % 2]
        i += 1
        if all(g.is_placed for g in state.player_glyphlings(player)):
            continue
        pos = seats[player].choose_draft_position(state)
        if pos is None:
            raise ValueError(f"No valid draft placement left for {player.value}")
        place_draft_glyphling(state, player, pos)
        logger.debug("%s drafted %s", player.value, pos)


def play_turn(seats: Mapping[Player, GlyphAI], state: GameState) -> TurnRecord:
    player = state.current_player
    seat = seats[player]
    record = TurnRecord(turn=state.turn_number, player=player.value, move=None, goal=None)
    before = dict(state.scores)

    move = seat.choose_move(state)
    if move is None:
        record.reasoning = "pass"
    else:
        record.move = move.to_dict()
        if seat.last_goal_selection is not None:
            record.goal = seat.last_goal_selection.goal.value
        if seat.last_decision is not None and seat.last_decision.chosen:
            record.reasoning = seat.last_decision.chosen["reasoning"]
        execute_move(state, move.glyphling, move.destination, move.cast_position, move.letter)
        words = find_words_at(state, seat.lexicon, move.cast_position, move.letter)
        for word in words:
            points = score_word_for_player(word, state, player)
            state.scores[player] += points
            record.words.append(word.letters)
            record.points += points
        if record.points:
            seat.notify_scored(record.points)
            for other_player, other in seats.items():
                if other_player != player:
                    other.notify_opponent_scored(record.points)
        elif state.tile_bag:
            discards = seat.choose_discards(state)
            if discards:
                record.discarded = cycle_hand(state, player, discards)

    score_new_tangles(state)
    for p, seat_p in seats.items():
        gained = state.scores[p] - before[p] - (record.points if p == player else 0)
        if gained > 0:
            record.tangle_points[p.value] = gained
            seat_p.notify_scored(gained)
            for other_player, other in seats.items():
                if other_player != p:
                    other.notify_opponent_scored(gained)

    for s in seats.values():
        s.end_turn()
    end_turn(state)
    return record


def play_game(
    seats: Mapping[Player, GlyphAI],
    state: GameState,
    max_turns: int = DEFAULT_MAX_TURNS,
) -> GameResult:
    """Play ``state`` to completion; ``state`` is mutated in place."""
    if state.phase is GamePhase.DRAFT:
        run_draft(seats, state)

    history: List[TurnRecord] = []
    passes = 0
    reason = "turn limit"
    for _ in range(max_turns):
        if should_end_game(state):
            reason = "tangled"
            break
        if not state.tile_bag and not any(state.hands.values()):
            reason = "out of tiles"
            break
        record = play_turn(seats, state)
        history.append(record)
        passes = passes + 1 if record.move is None else 0
        if passes >= 2:
            reason = "no moves"
            break
    else:
        if should_end_game(state):
            reason = "tangled"

    state.phase = GamePhase.OVER
    yellow, blue = state.scores[Player.YELLOW], state.scores[Player.BLUE]
    winner = None
    if yellow != blue:
        winner = (Player.YELLOW if yellow > blue else Player.BLUE).value
    logger.info("game over after %d turns (%s): yellow %d, blue %d", len(history), reason, yellow, blue)
    return GameResult(
        scores={p.value: s for p, s in state.scores.items()},
        winner=winner,
        turns=len(history),
        end_reason=reason,
        history=history,
    )


__all__ = ["TurnRecord", "GameResult", "run_draft", "play_turn", "play_game", "DEFAULT_MAX_TURNS"]
