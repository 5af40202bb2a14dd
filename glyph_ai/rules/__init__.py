from .api import (
    GLYPHLINGS_PER_PLAYER,
    HAND_SIZE,
    clone_state,
    count_moves,
    cycle_hand,
    draw_tile,
    end_turn,
    execute_move,
    fill_hand,
    is_occupied,
    legal_cast_positions,
    legal_destinations,
    owner_of,
    place_draft_glyphling,
    place_simulated,
    position_of,
    relocated,
    valid_draft_placements,
)
from .tangles import TANGLE_BONUS, all_tangled, is_tangled, score_new_tangles, should_end_game

__all__ = [
    "GLYPHLINGS_PER_PLAYER",
    "HAND_SIZE",
    "TANGLE_BONUS",
    "clone_state",
    "count_moves",
    "cycle_hand",
    "draw_tile",
    "end_turn",
    "execute_move",
    "fill_hand",
    "is_occupied",
    "legal_cast_positions",
    "legal_destinations",
    "owner_of",
    "place_draft_glyphling",
    "place_simulated",
    "position_of",
    "relocated",
    "valid_draft_placements",
    "all_tangled",
    "is_tangled",
    "score_new_tangles",
    "should_end_game",
]
