"""Hexagonal Glyphtender board."""
from __future__ import annotations

from typing import Dict, FrozenSet, Iterator, List

from .coordinates import HexCoord, ring_radius

# Board radius per named size; hex count is 3r(r+1)+1.
BOARD_SIZES: Dict[str, int] = {
    "small": 4,   # 61 hexes
    "medium": 5,  # 91 hexes
    "large": 6,   # 127 hexes
}


class Board:
    """Immutable set of playable hexes within ``radius`` of the centre."""

    def __init__(self, radius: int = 5) -> None:
        if radius < 2:
            raise ValueError(f"Board radius must be >= 2, got {radius}")
        self.radius = radius
        hexes: List[HexCoord] = []
        for q in range(-radius, radius + 1):
            for r in range(-radius, radius + 1):
                if ring_radius(q, r) <= radius:
                    hexes.append(HexCoord(q, r))
        self._ordered = sorted(hexes)
        self._hexes: FrozenSet[HexCoord] = frozenset(hexes)

    @classmethod
    def of_size(cls, size: str) -> "Board":
        key = size.lower()
        if key not in BOARD_SIZES:
            available = ", ".join(sorted(BOARD_SIZES))
            raise ValueError(f"Board size '{size}' not found. Available sizes: {available}")
        return cls(BOARD_SIZES[key])

    @property
    def hexes(self) -> List[HexCoord]:
        return list(self._ordered)

    @property
    def hex_count(self) -> int:
        return len(self._ordered)

    @property
    def center(self) -> HexCoord:
        return HexCoord(0, 0)

    def is_board_hex(self, pos: HexCoord) -> bool:
        return pos in self._hexes

    def is_perimeter_hex(self, pos: HexCoord) -> bool:
        return pos in self._hexes and ring_radius(pos.q, pos.r) == self.radius

    @property
    def interior_hexes(self) -> List[HexCoord]:
        return [h for h in self._ordered if ring_radius(h.q, h.r) < self.radius]

    def leyline(self, origin: HexCoord, direction: int) -> Iterator[HexCoord]:
        """Yield on-board hexes from origin (exclusive) until the edge."""
        for pos in origin.ray(direction):
            if pos not in self._hexes:
                return
            yield pos

    def __contains__(self, pos: object) -> bool:
        return pos in self._hexes

    def __repr__(self) -> str:
        return f"Board(radius={self.radius}, hexes={self.hex_count})"


__all__ = ["Board", "BOARD_SIZES"]
