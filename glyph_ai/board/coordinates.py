"""Axial coordinate system for the Glyphtender hex board.

Coordinate System:
    - Axial coordinates (q, r); the third cube coordinate is s = -(q + r)
    - Board centre at (0, 0)
    - Ring radius = max(|q|, |r|, |s|)

Leyline directions (clockwise from East):
    0 = East     : (+1,  0)
    1 = Northeast: (+1, -1)
    2 = Northwest: ( 0, -1)
    3 = West     : (-1,  0)
    4 = Southwest: (-1, +1)
    5 = Southeast: ( 0, +1)

Directions d and d + 3 lie on the same leyline axis, so the three axes are
covered by directions 0, 1 and 2.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

AXIAL_DIRECTIONS: List[Tuple[int, int]] = [
    (+1,  0),  # 0: East
    (+1, -1),  # 1: Northeast
    ( 0, -1),  # 2: Northwest
    (-1,  0),  # 3: West
    (-1, +1),  # 4: Southwest
    ( 0, +1),  # 5: Southeast
]

AXES: Tuple[int, int, int] = (0, 1, 2)


def opposite(direction: int) -> int:
    return (direction + 3) % 6


@dataclass(frozen=True, order=True)
class HexCoord:
    q: int
    r: int

    @property
    def s(self) -> int:
        return -(self.q + self.r)

    def neighbor(self, direction: int) -> "HexCoord":
        dq, dr = AXIAL_DIRECTIONS[direction % 6]
        return HexCoord(self.q + dq, self.r + dr)

    def neighbors(self) -> List["HexCoord"]:
        return [self.neighbor(d) for d in range(6)]

    def distance_to(self, other: "HexCoord") -> int:
        return axial_distance(self.q, self.r, other.q, other.r)

    def ray(self, direction: int) -> Iterator["HexCoord"]:
        """Yield hexes outward from this one along a leyline (unbounded)."""
        current = self
        while True:
            current = current.neighbor(direction)
            yield current

    def to_list(self) -> List[int]:
        return [self.q, self.r]

    @classmethod
    def from_seq(cls, seq) -> "HexCoord":
        q, r = seq
        return cls(int(q), int(r))

    def __str__(self) -> str:
        return f"({self.q},{self.r})"


def ring_radius(q: int, r: int) -> int:
    """Ring distance from the board centre."""
    s = -(q + r)
    return max(abs(q), abs(r), abs(s))


def axial_distance(q1: int, r1: int, q2: int, r2: int) -> int:
    """Calculate the distance between two hexes in axial coordinates.

    distance = max(|dq|, |dr|, |ds|)

    Args:
        q1, r1: First hex coordinates
        q2, r2: Second hex coordinates

    Returns:
        Number of steps between the two positions
    """
    dq = q1 - q2
    dr = r1 - r2
    ds = -(dq + dr)
    return max(abs(dq), abs(dr), abs(ds))


def direction_between(origin: HexCoord, target: HexCoord) -> Optional[int]:
    """Return the leyline direction from origin that reaches target.

    None when the two hexes are equal or not on a common leyline.
    """
    dq = target.q - origin.q
    dr = target.r - origin.r
    if dq == 0 and dr == 0:
        return None
    steps = max(abs(dq), abs(dr), abs(dq + dr))
    for d, (uq, ur) in enumerate(AXIAL_DIRECTIONS):
        if uq * steps == dq and ur * steps == dr:
            return d
    return None


__all__ = [
    "AXIAL_DIRECTIONS",
    "AXES",
    "HexCoord",
    "opposite",
    "ring_radius",
    "axial_distance",
    "direction_between",
]
