from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set, Tuple

from .board import Board, HexCoord


class Player(Enum):
    YELLOW = "yellow"
    BLUE = "blue"

    @property
    def opponent(self) -> "Player":
        return Player.BLUE if self is Player.YELLOW else Player.YELLOW

    @classmethod
    def parse(cls, value: Any) -> "Player":
        if isinstance(value, Player):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown player '{value}'. Expected one of: yellow, blue") from None


class GamePhase(Enum):
    DRAFT = "draft"
    PLAY = "play"
    OVER = "over"


GlyphlingKey = Tuple[Player, int]


@dataclass(frozen=True)
class Tile:
    letter: str
    owner: Player
    position: HexCoord


@dataclass
class Glyphling:
    owner: Player
    index: int
    position: Optional[HexCoord] = None

    @property
    def key(self) -> GlyphlingKey:
        return (self.owner, self.index)

    @property
    def is_placed(self) -> bool:
        return self.position is not None


@dataclass
class GameState:
    board: Board
    tiles: Dict[HexCoord, Tile] = field(default_factory=dict)
    glyphlings: List[Glyphling] = field(default_factory=list)
    hands: Dict[Player, List[str]] = field(default_factory=lambda: {p: [] for p in Player})
    scores: Dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player})
    tile_bag: List[str] = field(default_factory=list)
    current_player: Player = Player.YELLOW
    turn_number: int = 1
    phase: GamePhase = GamePhase.PLAY
    tangled: Set[GlyphlingKey] = field(default_factory=set)

    # -- queries -----------------------------------------------------------
    def has_tile(self, pos: HexCoord) -> bool:
        return pos in self.tiles

    def glyphling_at(self, pos: HexCoord) -> Optional[Glyphling]:
        for g in self.glyphlings:
            if g.position == pos:
                return g
        return None

    def has_glyphling(self, pos: HexCoord) -> bool:
        return self.glyphling_at(pos) is not None

    def find_glyphling(self, key: GlyphlingKey) -> Optional[Glyphling]:
        for g in self.glyphlings:
            if g.key == key:
                return g
        return None

    def player_glyphlings(self, player: Player) -> List[Glyphling]:
        return [g for g in self.glyphlings if g.owner == player]

    @property
    def fill_percent(self) -> float:
        return len(self.tiles) / float(self.board.hex_count)

    # -- copying -----------------------------------------------------------
    def clone(self) -> "GameState":
        """Independent copy; the board is immutable and shared."""
        return GameState(
            board=self.board,
            tiles=dict(self.tiles),
            glyphlings=[Glyphling(g.owner, g.index, g.position) for g in self.glyphlings],
            hands={p: list(h) for p, h in self.hands.items()},
            scores=dict(self.scores),
            tile_bag=list(self.tile_bag),
            current_player=self.current_player,
            turn_number=self.turn_number,
            phase=self.phase,
            tangled=set(self.tangled),
        )

    # -- serialisation -----------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "board_radius": self.board.radius,
            "current_player": self.current_player.value,
            "turn_number": self.turn_number,
            "phase": self.phase.value,
            "tiles": [
                {"q": pos.q, "r": pos.r, "letter": t.letter, "owner": t.owner.value}
                for pos, t in sorted(self.tiles.items())
            ],
            "glyphlings": [
                {
                    "owner": g.owner.value,
                    "index": g.index,
                    "position": g.position.to_list() if g.position is not None else None,
                }
                for g in self.glyphlings
            ],
            "hands": {p.value: "".join(h) for p, h in self.hands.items()},
            "scores": {p.value: s for p, s in self.scores.items()},
            "tile_bag": "".join(self.tile_bag),
            "tangled": [
                {"owner": owner.value, "index": index}
                for owner, index in sorted(self.tangled, key=lambda k: (k[0].value, k[1]))
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        board = Board(int(data.get("board_radius", 5)))
        tiles: Dict[HexCoord, Tile] = {}
        for t in data.get("tiles", []):
            pos = HexCoord(int(t["q"]), int(t["r"]))
            if not board.is_board_hex(pos):
                raise ValueError(f"Tile at {pos} is off the board")
            tiles[pos] = Tile(str(t["letter"]).upper(), Player.parse(t["owner"]), pos)
        glyphlings = []
        for g in data.get("glyphlings", []):
            raw = g.get("position")
            pos = HexCoord.from_seq(raw) if raw is not None else None
            glyphlings.append(Glyphling(Player.parse(g["owner"]), int(g.get("index", 0)), pos))
        hands = {p: [] for p in Player}
        for k, v in (data.get("hands") or {}).items():
            hands[Player.parse(k)] = [ch.upper() for ch in v]
        scores = {p: 0 for p in Player}
        for k, v in (data.get("scores") or {}).items():
            scores[Player.parse(k)] = int(v)
        return cls(
            board=board,
            tiles=tiles,
            glyphlings=glyphlings,
            hands=hands,
            scores=scores,
            tile_bag=[ch.upper() for ch in data.get("tile_bag", "")],
            current_player=Player.parse(data.get("current_player", "yellow")),
            turn_number=int(data.get("turn_number", 1)),
            phase=GamePhase(data.get("phase", "play")),
            tangled={(Player.parse(k["owner"]), int(k.get("index", 0))) for k in data.get("tangled", [])},
        )


__all__ = ["Player", "GamePhase", "GlyphlingKey", "Tile", "Glyphling", "GameState"]
