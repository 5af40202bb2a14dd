"""
Movement-restriction analysis for the Trap goal.

``analyze_target`` compares an enemy glyphling's legal-move count before and
after a simulated move and adds three geometric tie-breakers: how many of the
new blockers sit on the target's leylines, how many board edges already hem
the target in, and whether the cast tile and our glyphling close two
different leylines (a "triangle").
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..board import Board, HexCoord, direction_between
from ..game_models import GameState, GlyphlingKey, Player
from ..rules.api import count_moves


@dataclass(frozen=True)
class TrapResult:
    target: GlyphlingKey
    moves_before: int
    moves_after: int
    leyline_blocks: int = 0
    wall_synergy: float = 0.0
    triangle_bonus: float = 0.0

    @property
    def moves_restricted(self) -> int:
        return self.moves_before - self.moves_after

    @property
    def is_kill_shot(self) -> bool:
        return self.moves_after == 0

    def is_near_kill_shot(self, near_max: int = 2) -> bool:
        return 0 < self.moves_after <= near_max

    @property
    def geometry_bonus(self) -> float:
        return self.leyline_blocks * 0.5 + self.wall_synergy + self.triangle_bonus


def leyline_blocks(target: HexCoord, cast_position: HexCoord, destination: HexCoord) -> int:
    return sum(1 for p in (cast_position, destination) if direction_between(target, p) is not None)


def wall_synergy(board: Board, target: HexCoord) -> float:
    walls = sum(1 for n in target.neighbors() if not board.is_board_hex(n))
    if walls >= 3:
        return 2.0
    if walls >= 2:
        return 1.0
    if walls >= 1:
        return 0.5
    return 0.0


def triangle_bonus(target: HexCoord, cast_position: HexCoord, destination: HexCoord) -> float:
    d_cast = direction_between(target, cast_position)
    d_dest = direction_between(target, destination)
    if d_cast is None or d_dest is None or d_cast == d_dest:
        return 0.0
    diff = abs(d_cast - d_dest)
    # adjacent leylines make the tighter trap
    return 2.0 if diff in (1, 5) else 1.5


def analyze_target(
    before: GameState,
    after: GameState,
    target: GlyphlingKey,
    cast_position: HexCoord,
    destination: HexCoord,
    moves_before: Optional[int] = None,
) -> Optional[TrapResult]:
    """Trap analysis of one enemy glyphling; None if it is not on the board."""
    g_before = before.find_glyphling(target)
    g_after = after.find_glyphling(target)
    if g_before is None or g_after is None or not g_after.is_placed:
        return None
    if moves_before is None:
        moves_before = count_moves(before, g_before)
    pos = g_after.position
    return TrapResult(
        target=target,
        moves_before=moves_before,
        moves_after=count_moves(after, g_after),
        leyline_blocks=leyline_blocks(pos, cast_position, destination),
        wall_synergy=wall_synergy(after.board, pos),
        triangle_bonus=triangle_bonus(pos, cast_position, destination),
    )


def adjacency(state: GameState, pos: HexCoord, player: Player) -> int:
    """Tiles plus glyphlings of ``player`` touching ``pos``."""
    count = 0
    for n in pos.neighbors():
        tile = state.tiles.get(n)
        if tile is not None and tile.owner == player:
            count += 1
        for g in state.glyphlings:
            if g.owner == player and g.position == n:
                count += 1
    return count


__all__ = [
    "TrapResult",
    "analyze_target",
    "adjacency",
    "leyline_blocks",
    "wall_synergy",
    "triangle_bonus",
]
