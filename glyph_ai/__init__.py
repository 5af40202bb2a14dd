"""Glyphtender AI: personality-driven seats that pick a goal, then the move that best serves it."""

from importlib import import_module
from typing import Any

__version__ = "0.1.0"
__all__ = [
    "GlyphAI",
    "AIMove",
    "AITuning",
    "Board",
    "HexCoord",
    "GameState",
    "Player",
    "Tile",
    "Glyphling",
    "Goal",
    "Trait",
    "TraitRange",
    "Difficulty",
    "Personality",
    "Lexicon",
    "DecisionReport",
    "new_game",
    "play_game",
    "load_personality",
    "get_personality",
    "load_tuning",
    "__version__",
]

_EXPORTS = {
    "GlyphAI": ("brain", "GlyphAI"),
    "AIMove": ("action_gen", "AIMove"),
    "AITuning": ("tuning", "AITuning"),
    "Board": ("board", "Board"),
    "HexCoord": ("board", "HexCoord"),
    "GameState": ("game_models", "GameState"),
    "Player": ("game_models", "Player"),
    "Tile": ("game_models", "Tile"),
    "Glyphling": ("game_models", "Glyphling"),
    "Goal": ("traits", "Goal"),
    "Trait": ("traits", "Trait"),
    "TraitRange": ("traits", "TraitRange"),
    "Difficulty": ("personality", "Difficulty"),
    "Personality": ("personality", "Personality"),
    "Lexicon": ("words", "Lexicon"),
    "DecisionReport": ("reports", "DecisionReport"),
    "new_game": ("game_setup", "new_game"),
    "play_game": ("selfplay", "play_game"),
    "load_personality": ("personality", "load_personality"),
    "get_personality": ("personality", "get_personality"),
    "load_tuning": ("config", "load_tuning"),
}


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        module_name, attr_name = _EXPORTS[name]
        module = import_module(f".{module_name}", __name__)
        attr = getattr(module, attr_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> list:
    return sorted(set(list(globals().keys()) + list(__all__)))
