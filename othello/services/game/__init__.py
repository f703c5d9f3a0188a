"""Game service module.

Provides:
- Game initialization (start_game.py)
- Game engine processing (engine/)
"""

# Re-export from engine for convenience
from .engine import (
    ProcessResult,
    ValidationErrorCode,
    ValidationResult,
    evolve,
    get_legal_moves,
    process_move,
    render_state,
    replay,
    validate_move,
)
from .start_game import initialize_game, validate_game

__all__ = [
    # Initialization
    "initialize_game",
    "validate_game",
    # Engine
    "ProcessResult",
    "ValidationResult",
    "ValidationErrorCode",
    "validate_move",
    "evolve",
    "process_move",
    "replay",
    "get_legal_moves",
    "render_state",
]
