"""Game engine module - pure functional game logic.

This module provides the core game engine with:
- A dense board view projected from the sparse piece sets
- Flanking capture detection shared by validation and evolution
- ValidationResult / ProcessResult pattern for error handling
- Event types describing what each move did

Usage:
    from othello.services.game.engine import (
        evolve,
        process_move,
        validate_move,
    )

    # Validate, then apply
    validation = validate_move(game, state, move)
    if validation.is_valid:
        new_state = evolve(state, game, move, is_last_move=True)
    else:
        print(f"Error: {validation.error_code} - {validation.error_message}")

    # Or both at once, with events
    result = process_move(game, state, move)
"""

# Board view
from .board import Board, project

# Capture scanning
from .captures import DIRECTIONS, can_capture, find_captures, scan_direction

# Events - describe each processed move
from .events import (
    AnyGameEvent,
    GameEnded,
    GameEvent,
    PiecePlaced,
    PiecesCaptured,
    PlayerPassed,
    PlayerResigned,
)

# Legal moves
from .legal_moves import get_legal_moves, has_any_legal_moves

# Main processing
from .process import check_win_condition, evolve, piece_counts, process_move, replay

# Rendering
from .render import render_state

# Result types
from .validation import (
    ProcessResult,
    ValidationErrorCode,
    ValidationResult,
    validate_move,
)

__all__ = [
    # Board
    "Board",
    "project",
    # Captures
    "DIRECTIONS",
    "scan_direction",
    "can_capture",
    "find_captures",
    # Events
    "GameEvent",
    "AnyGameEvent",
    "PiecePlaced",
    "PiecesCaptured",
    "PlayerPassed",
    "PlayerResigned",
    "GameEnded",
    # Processing
    "evolve",
    "process_move",
    "replay",
    "check_win_condition",
    "piece_counts",
    # Rendering
    "render_state",
    # Validation
    "ProcessResult",
    "ValidationResult",
    "ValidationErrorCode",
    "validate_move",
    # Legal moves
    "get_legal_moves",
    "has_any_legal_moves",
]
