"""Validation layer for moves and ProcessResult pattern.

Separates validation from processing logic:
- validate_move() checks if a move is valid given the game and current state
- ProcessResult replaces exceptions for control flow
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID

logger = logging.getLogger(__name__)

from othello.schemas.game_engine import BOARD_SIZE, Game, GameState, PlayerNumber
from othello.schemas.moves import Move, PassMove, PlaceMove, ResignMove

from .board import project
from .captures import can_capture
from .events import AnyGameEvent


class ValidationErrorCode(str, Enum):
    GAME_ALREADY_OVER = "GAME_ALREADY_OVER"
    NOT_PLAYERS_TURN = "NOT_PLAYERS_TURN"
    UNKNOWN_PLAYER = "UNKNOWN_PLAYER"
    INVALID_GAME = "INVALID_GAME"
    POSITION_OUT_OF_BOUNDS = "POSITION_OUT_OF_BOUNDS"
    POSITION_OCCUPIED = "POSITION_OCCUPIED"
    NO_CAPTURE_AVAILABLE = "NO_CAPTURE_AVAILABLE"


@dataclass
class ProcessResult:
    """Result of processing a move.

    Replaces exceptions for control flow, providing explicit success/failure
    with error codes suitable for client localization.
    """

    state: GameState | None = None
    events: list[AnyGameEvent] = field(default_factory=list)
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(
        cls,
        state: GameState,
        events: list[AnyGameEvent] | None = None,
    ) -> "ProcessResult":
        """Create a successful result with new state and events."""
        return cls(
            state=state,
            events=events or [],
            success=True,
        )

    @classmethod
    def failure(cls, code: str, message: str) -> "ProcessResult":
        """Create a failure result with error details."""
        return cls(
            state=None,
            events=[],
            success=False,
            error_code=code,
            error_message=message,
        )


@dataclass
class ValidationResult:
    """Result of validating a move before it is applied."""

    is_valid: bool = True
    error_code: ValidationErrorCode | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True)

    @classmethod
    def error(cls, code: ValidationErrorCode, message: str) -> "ValidationResult":
        """Create a validation failure with error details."""
        return cls(
            is_valid=False,
            error_code=code,
            error_message=message,
        )


def validate_turn(game: Game, state: GameState, player_id: UUID) -> ValidationResult:
    """Check that the game is still running and that it is this player's turn.

    Turns strictly alternate. On an empty history only player 2 may move.
    A game whose two sides are the same identity accepts no moves.
    """
    if game.player_1 == game.player_2:
        logger.warning("Validation failed: INVALID_GAME, player=%s", str(game.player_1)[:8])
        return ValidationResult.error(
            ValidationErrorCode.INVALID_GAME,
            "Both sides of this game are the same player",
        )

    if state.game_over:
        logger.warning("Validation failed: GAME_ALREADY_OVER")
        return ValidationResult.error(
            ValidationErrorCode.GAME_ALREADY_OVER,
            "This game has ended",
        )

    last_move = state.last_move
    if last_move is None:
        if player_id != game.player_2:
            logger.warning(
                "Validation failed: NOT_PLAYERS_TURN (first move), attempted=%s",
                str(player_id)[:8],
            )
            return ValidationResult.error(
                ValidationErrorCode.NOT_PLAYERS_TURN,
                "Player 2 must make the first move",
            )
        return ValidationResult.ok()

    if last_move.author == player_id:
        logger.warning(
            "Validation failed: NOT_PLAYERS_TURN, last_mover=%s",
            str(player_id)[:8],
        )
        return ValidationResult.error(
            ValidationErrorCode.NOT_PLAYERS_TURN,
            "It is not this player's turn",
        )

    if game.player_number(player_id) == PlayerNumber.EMPTY:
        logger.warning("Validation failed: UNKNOWN_PLAYER, attempted=%s", str(player_id)[:8])
        return ValidationResult.error(
            ValidationErrorCode.UNKNOWN_PLAYER,
            "This player is not part of the game",
        )

    return ValidationResult.ok()


def validate_placement(
    game: Game,
    state: GameState,
    player_id: UUID,
    placement: PlaceMove,
) -> ValidationResult:
    """Check bounds, occupancy and capture for a placement."""
    x, y = placement.x, placement.y

    if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
        logger.warning("Validation failed: POSITION_OUT_OF_BOUNDS, at=(%d,%d)", x, y)
        return ValidationResult.error(
            ValidationErrorCode.POSITION_OUT_OF_BOUNDS,
            f"Position ({x}, {y}) is not in bounds",
        )

    position = placement.position
    if position in state.player_1_pieces or position in state.player_2_pieces:
        logger.warning("Validation failed: POSITION_OCCUPIED, at=(%d,%d)", x, y)
        return ValidationResult.error(
            ValidationErrorCode.POSITION_OCCUPIED,
            f"Position ({x}, {y}) is not empty",
        )

    player = game.player_number(player_id)
    if not can_capture(project(state), x, y, player):
        logger.warning(
            "Validation failed: NO_CAPTURE_AVAILABLE, player=%d, at=(%d,%d)",
            player,
            x,
            y,
        )
        return ValidationResult.error(
            ValidationErrorCode.NO_CAPTURE_AVAILABLE,
            f"Placing at ({x}, {y}) does not capture any pieces",
        )

    return ValidationResult.ok()


def validate_move(game: Game, state: GameState, move: Move) -> ValidationResult:
    """Validate a move before it is applied.

    Checks:
    - The game is not over
    - It's the author's turn (player 2 opens)
    - For placements: in bounds, unoccupied, and captures at least one piece

    Args:
        game: The two participants.
        state: Current game state.
        move: The candidate move.

    Returns:
        ValidationResult indicating success or failure with error details.
    """
    move_kind = move.move_type.move_kind
    logger.debug(
        "Validating move: kind=%s, author=%s, history=%d",
        move_kind,
        str(move.author)[:8],
        len(state.moves),
    )

    turn = validate_turn(game, state, move.author)
    if not turn.is_valid:
        return turn

    move_type = move.move_type
    if isinstance(move_type, PlaceMove):
        result = validate_placement(game, state, move.author, move_type)
        if not result.is_valid:
            return result

    elif isinstance(move_type, (PassMove, ResignMove)):
        # No geometric precondition beyond the turn check
        pass

    logger.debug("Move validated successfully: kind=%s", move_kind)
    return ValidationResult.ok()
