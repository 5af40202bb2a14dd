from .board import BOARD_SIZES, Board
from .coordinates import (
    AXES,
    AXIAL_DIRECTIONS,
    HexCoord,
    axial_distance,
    direction_between,
    opposite,
    ring_radius,
)

__all__ = [
    "Board",
    "BOARD_SIZES",
    "AXES",
    "AXIAL_DIRECTIONS",
    "HexCoord",
    "axial_distance",
    "direction_between",
    "opposite",
    "ring_radius",
]
