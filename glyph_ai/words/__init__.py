from .finder import WordResult, find_words_at, score_word_for_player
from .lexicon import DEFAULT_LEXICON_PATH, Lexicon, default_lexicon

__all__ = [
    "WordResult",
    "find_words_at",
    "score_word_for_player",
    "Lexicon",
    "default_lexicon",
    "DEFAULT_LEXICON_PATH",
]
