from .presets import (
    get_available_personalities,
    get_personality,
    get_personality_info,
    list_personalities,
    load_all_personalities,
    load_personality,
    print_personality_summary,
)
from .shifts import Situation, shifted_ranges
from .types import Difficulty, MetaTraits, Personality, SubTraits, TraitShiftConfig

__all__ = [
    "Difficulty",
    "MetaTraits",
    "SubTraits",
    "TraitShiftConfig",
    "Personality",
    "Situation",
    "shifted_ranges",
    "get_available_personalities",
    "get_personality",
    "get_personality_info",
    "list_personalities",
    "load_all_personalities",
    "load_personality",
    "print_personality_summary",
]
