"""
Central rules API for Glyphtender.

The AI core, the self-play harness, the CLI and the tests should use ONLY this
module to:
1. enumerate legal destinations and cast positions for a glyphling
2. copy a state for simulation
3. apply a move (or a simulated placement) to a state

Every query here is read-only; mutation happens only in ``execute_move`` and
the hand/draft helpers, which the turn orchestrator calls on the real state.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

from ..board import HexCoord
from ..game_models import GamePhase, GameState, Glyphling, GlyphlingKey, Player, Tile

HAND_SIZE = 8
GLYPHLINGS_PER_PLAYER = 2


def legal_destinations(state: GameState, glyphling: Glyphling) -> List[HexCoord]:
    """Hexes the glyphling can slide to along its six leylines.

    A slide stops at the board edge, at any tile and at any other glyphling.
    The glyphling's own hex is not a destination.
    """
    if not glyphling.is_placed:
        return []
    out: List[HexCoord] = []
    for direction in range(6):
        for pos in state.board.leyline(glyphling.position, direction):
            if pos in state.tiles:
                break
            other = state.glyphling_at(pos)
            if other is not None and other is not glyphling:
                break
            out.append(pos)
    return out


def legal_cast_positions(state: GameState, glyphling: Glyphling) -> List[HexCoord]:
    """Empty hexes the glyphling can cast a tile onto from where it stands.

    Opponent tiles and glyphlings end a leyline; the owner's own tiles and
    glyphlings can be cast past but not onto.
    """
    if not glyphling.is_placed:
        return []
    out: List[HexCoord] = []
    for direction in range(6):
        for pos in state.board.leyline(glyphling.position, direction):
            tile = state.tiles.get(pos)
            if tile is not None:
                if tile.owner != glyphling.owner:
                    break
                continue
            other = state.glyphling_at(pos)
            if other is not None:
                if other.owner != glyphling.owner:
                    break
                continue
            out.append(pos)
    return out


def count_moves(state: GameState, glyphling: Glyphling) -> int:
    return len(legal_destinations(state, glyphling))


def clone_state(state: GameState) -> GameState:
    return state.clone()


def owner_of(state: GameState, pos: HexCoord) -> Optional[Player]:
    """Owner of the tile (or, failing that, the glyphling) at ``pos``."""
    tile = state.tiles.get(pos)
    if tile is not None:
        return tile.owner
    g = state.glyphling_at(pos)
    return g.owner if g is not None else None


def position_of(state: GameState, key: GlyphlingKey) -> Optional[HexCoord]:
    g = state.find_glyphling(key)
    return g.position if g is not None else None


def is_occupied(state: GameState, pos: HexCoord) -> bool:
    return pos in state.tiles or state.has_glyphling(pos)


@contextmanager
def relocated(state: GameState, key: GlyphlingKey, destination: HexCoord) -> Iterator[Optional[GameState]]:
    """Scoped simulation handle: a clone with one glyphling moved.

    Yields None when the glyphling is not present in ``state``. The caller's
    state is never touched, so nothing needs restoring on exit.
    """
    sim = clone_state(state)
    g = sim.find_glyphling(key)
    if g is None:
        yield None
        return
    g.position = destination
    yield sim


def place_simulated(
    state: GameState,
    key: GlyphlingKey,
    destination: HexCoord,
    cast_position: HexCoord,
    letter: str,
) -> Optional[GameState]:
    """Clone ``state``, move the glyphling and drop the tile. No legality checks."""
    sim = clone_state(state)
    g = sim.find_glyphling(key)
    if g is None or not g.is_placed:
        return None
    g.position = destination
    sim.tiles[cast_position] = Tile(letter, g.owner, cast_position)
    return sim


def execute_move(
    state: GameState,
    key: GlyphlingKey,
    destination: HexCoord,
    cast_position: HexCoord,
    letter: str,
) -> Tile:
    """Apply a full turn to the real state: move, cast, draw a replacement.

    Staying in place is allowed. Raises ValueError for an illegal move.
    """
    g = state.find_glyphling(key)
    if g is None or not g.is_placed:
        raise ValueError(f"Glyphling {key} is not on the board")
    if g.owner != state.current_player:
        raise ValueError(f"It is {state.current_player.value}'s turn, not {g.owner.value}'s")
    if destination != g.position and destination not in legal_destinations(state, g):
        raise ValueError(f"Illegal destination {destination} for glyphling {key}")
    hand = state.hands[g.owner]
    if letter not in hand:
        raise ValueError(f"Letter '{letter}' is not in {g.owner.value}'s hand")
    original = g.position
    g.position = destination
    if cast_position not in legal_cast_positions(state, g):
        g.position = original
        raise ValueError(f"Illegal cast position {cast_position} from {destination}")
    hand.remove(letter)
    tile = Tile(letter, g.owner, cast_position)
    state.tiles[cast_position] = tile
    draw_tile(state, g.owner)
    return tile


def draw_tile(state: GameState, player: Player) -> bool:
    if not state.tile_bag:
        return False
    state.hands[player].append(state.tile_bag.pop())
    return True


def fill_hand(state: GameState, player: Player) -> None:
    while len(state.hands[player]) < HAND_SIZE and draw_tile(state, player):
        pass


def cycle_hand(state: GameState, player: Player, letters: Iterable[str]) -> List[str]:
    """Return ``letters`` to the bottom of the bag and draw replacements."""
    hand = state.hands[player]
    returned: List[str] = []
    for letter in letters:
        if letter in hand:
            hand.remove(letter)
            returned.append(letter)
    state.tile_bag[:0] = returned
    fill_hand(state, player)
    return returned


def end_turn(state: GameState) -> None:
    state.current_player = state.current_player.opponent
    if state.current_player is Player.YELLOW:
        state.turn_number += 1


def valid_draft_placements(state: GameState) -> List[HexCoord]:
    """Interior hexes that are empty and not adjacent to any glyphling."""
    out: List[HexCoord] = []
    for pos in state.board.interior_hexes:
        if state.has_glyphling(pos):
            continue
        if any(state.has_glyphling(n) for n in pos.neighbors()):
            continue
        out.append(pos)
    return out


def place_draft_glyphling(state: GameState, player: Player, position: HexCoord) -> Glyphling:
    if state.phase is not GamePhase.DRAFT:
        raise ValueError("Draft placement outside the draft phase")
    if position not in valid_draft_placements(state):
        raise ValueError(f"Invalid draft placement {position}")
    for g in state.player_glyphlings(player):
        if not g.is_placed:
            g.position = position
            break
    else:
        raise ValueError(f"{player.value} has no unplaced glyphlings")
    if all(g.is_placed for g in state.glyphlings):
        for p in (Player.YELLOW, Player.BLUE):
            fill_hand(state, p)
        state.phase = GamePhase.PLAY
        state.current_player = Player.YELLOW
    return g


__all__ = [
    "HAND_SIZE",
    "GLYPHLINGS_PER_PLAYER",
    "legal_destinations",
    "legal_cast_positions",
    "count_moves",
    "clone_state",
    "owner_of",
    "position_of",
    "is_occupied",
    "relocated",
    "place_simulated",
    "execute_move",
    "draw_tile",
    "fill_hand",
    "cycle_hand",
    "end_turn",
    "valid_draft_placements",
    "place_draft_glyphling",
]
