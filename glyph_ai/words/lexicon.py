"""
Dictionary and word-frequency lookup.

Dictionary files are plain ``WORD,ZIPF`` lines. Words shorter than two letters
are ignored; a word with no (or an unparsable) Zipf column gets frequency 0.
Lookups are case-insensitive and never raise for unknown words.
"""

from __future__ import annotations
import os
from functools import lru_cache
from typing import Dict, Iterable, Mapping, Optional

DEFAULT_LEXICON_PATH = os.path.join(os.path.dirname(__file__), "data", "lexicon.csv")


class Lexicon:
    def __init__(self, frequencies: Optional[Mapping[str, float]] = None) -> None:
        self._freq: Dict[str, float] = {}
        self.max_length = 0
        for word, zipf in (frequencies or {}).items():
            self.add(word, zipf)

    def add(self, word: str, zipf: float = 0.0) -> None:
        w = word.strip().upper()
        if len(w) < 2:
            return
        self._freq[w] = float(zipf)
        self.max_length = max(self.max_length, len(w))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Lexicon":
        lex = cls()
        for line in lines:
            if not line.strip():
                continue
            parts = line.split(",")
            try:
                zipf = float(parts[1]) if len(parts) > 1 else 0.0
            except ValueError:
                zipf = 0.0
            lex.add(parts[0], zipf)
        return lex

    @classmethod
    def from_csv(cls, path: str) -> "Lexicon":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_lines(f)

    def is_valid_word(self, word: str) -> bool:
        return word.upper() in self._freq

    def frequency(self, word: str) -> float:
        """Zipf frequency, 0.0 for unknown words."""
        return self._freq.get(word.upper(), 0.0)

    def is_word_above_frequency_threshold(self, word: str, threshold: float) -> bool:
        """True for dictionary words whose Zipf frequency is >= threshold."""
        w = word.upper()
        if w not in self._freq:
            return False
        return self._freq[w] >= threshold

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self._freq)


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    """Bundled dictionary, loaded once per process."""
    return Lexicon.from_csv(DEFAULT_LEXICON_PATH)


__all__ = ["Lexicon", "default_lexicon", "DEFAULT_LEXICON_PATH"]
