from .candidates import MAX_CANDIDATES, AIMove, generate_candidates

__all__ = ["AIMove", "MAX_CANDIDATES", "generate_candidates"]
