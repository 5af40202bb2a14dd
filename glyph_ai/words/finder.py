"""Find the words a tile placement would form, and score them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..board import AXES, HexCoord, opposite
from ..game_models import GameState, Player
from .lexicon import Lexicon


@dataclass(frozen=True)
class WordResult:
    letters: str
    positions: Tuple[HexCoord, ...]

    @property
    def start(self) -> HexCoord:
        return self.positions[0]

    @property
    def end(self) -> HexCoord:
        return self.positions[-1]


def _letter_at(state: GameState, pos: HexCoord, placed: HexCoord, letter: str) -> Optional[str]:
    if pos == placed:
        return letter
    tile = state.tiles.get(pos)
    return tile.letter if tile is not None else None


def _line_through(
    state: GameState, position: HexCoord, letter: str, direction: int
) -> Tuple[str, List[HexCoord]]:
    """Contiguous run of letters through ``position`` read along ``direction``."""
    start = position
    back = opposite(direction)
    while True:
        prev = start.neighbor(back)
        if not state.board.is_board_hex(prev) or _letter_at(state, prev, position, letter) is None:
            break
        start = prev
    letters: List[str] = []
    positions: List[HexCoord] = []
    current = start
    while state.board.is_board_hex(current):
        ch = _letter_at(state, current, position, letter)
        if ch is None:
            break
        letters.append(ch)
        positions.append(current)
        current = current.neighbor(direction)
    return "".join(letters), positions


def _words_in_line(
    lexicon: Lexicon, letters: str, placed_index: int
) -> List[Tuple[int, int]]:
    """(start, end) index pairs of dictionary words covering ``placed_index``.

    Words wholly contained in a longer found word are dropped.
    """
    spans: List[Tuple[int, int]] = []
    limit = lexicon.max_length
    for start in range(0, placed_index + 1):
        for end in range(placed_index, len(letters)):
            length = end - start + 1
            if length < 2 or length > limit:
                continue
            if lexicon.is_valid_word(letters[start:end + 1]):
                spans.append((start, end))
    kept = []
    for s, e in spans:
        contained = any(
            (o_start, o_end) != (s, e) and (o_end - o_start) > (e - s) and o_start <= s and e <= o_end
            for o_start, o_end in spans
        )
        if not contained:
            kept.append((s, e))
    return kept


def find_words_at(state: GameState, lexicon: Lexicon, position: HexCoord, letter: str) -> List[WordResult]:
    """All dictionary words formed through ``position`` if ``letter`` were placed there.

    Reads each of the three leyline axes in its forward direction. ``state`` is
    not modified; the placed letter is overlaid on lookup.
    """
    letter = letter.upper()
    results: List[WordResult] = []
    seen: Set[Tuple[str, HexCoord, HexCoord]] = set()
    for direction in AXES:
        letters, positions = _line_through(state, position, letter, direction)
        if len(letters) < 2:
            continue
        placed_index = positions.index(position)
        for s, e in _words_in_line(lexicon, letters, placed_index):
            word = WordResult(letters[s:e + 1], tuple(positions[s:e + 1]))
            key = (word.letters, word.start, word.end)
            if key in seen:
                continue
            seen.add(key)
            results.append(word)
    return results


def score_word_for_player(word: WordResult, state: GameState, player: Player) -> int:
    """One point per letter plus one per tile in the word owned by ``player``."""
    score = len(word.letters)
    for pos in word.positions:
        tile = state.tiles.get(pos)
        if tile is not None and tile.owner == player:
            score += 1
    return score


__all__ = ["WordResult", "find_words_at", "score_word_for_player"]
