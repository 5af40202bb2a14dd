from .contest import ContestedPosition, denial_value, enemy_cast_reach, evaluate_position, is_contested
from .setup import SetupEvaluation, evaluate_setup
from .trap import TrapResult, adjacency, analyze_target

__all__ = [
    "ContestedPosition",
    "denial_value",
    "enemy_cast_reach",
    "evaluate_position",
    "is_contested",
    "SetupEvaluation",
    "evaluate_setup",
    "TrapResult",
    "adjacency",
    "analyze_target",
]
