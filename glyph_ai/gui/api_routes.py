"""API routes for the Glyphtender AI debugging service."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from glyph_ai.brain import GlyphAI
from glyph_ai.game_models import GameState, Player
from glyph_ai.game_setup import new_game
from glyph_ai.personality import Difficulty, get_available_personalities, get_personality_info, load_personality
from glyph_ai.tuning import AITuning

logger = logging.getLogger(__name__)

router = APIRouter()


# Request models
class DecideRequest(BaseModel):
    state: Dict[str, Any]
    player: Optional[str] = None
    personality: str = "balanced"
    difficulty: str = "first_class"
    seed: Optional[int] = None
    tuning: Dict[str, Any] = {}


class NewGameRequest(BaseModel):
    seed: Optional[int] = None
    size: str = "medium"
    draft: bool = False


# ============================================================================
# Personalities
# ============================================================================

@router.get("/personalities")
async def list_personalities() -> List[Dict[str, Any]]:
    """All presets with their summary info."""
    return [get_personality_info(name) for name in get_available_personalities()]


@router.get("/personalities/{name}")
async def personality_detail(name: str) -> Dict[str, Any]:
    try:
        return load_personality(name).to_dict()
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


# ============================================================================
# Games and decisions
# ============================================================================

@router.post("/new-game")
async def create_game(request: NewGameRequest) -> Dict[str, Any]:
    try:
        state = new_game(seed=request.seed, size=request.size, draft=request.draft)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return state.to_dict()


@router.post("/decide")
async def decide(request: DecideRequest) -> Dict[str, Any]:
    """Run one AI decision on the posted state and return the move and its report."""
    try:
        state = GameState.from_dict(request.state)
        player = Player.parse(request.player) if request.player else state.current_player
        personality = load_personality(request.personality)
        seat = GlyphAI(
            player,
            personality,
            difficulty=Difficulty.parse(request.difficulty),
            seed=request.seed,
            tuning=AITuning.from_dict(request.tuning),
        )
    except (KeyError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    move = seat.choose_move(state)
    logger.info("decide: %s/%s -> %s", player.value, personality.name, move)
    return {
        "move": move.to_dict() if move is not None else None,
        "report": seat.last_decision.to_dict() if seat.last_decision is not None else None,
    }
