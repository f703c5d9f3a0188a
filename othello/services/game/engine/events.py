"""Game event types - emitted when a move is processed.

Events describe what a move did, so a caller can:
- Update a client without resending the whole board
- Animate flips (know exactly which cells changed hands)
- Keep an audit log next to the move history
"""

from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, Field

from othello.schemas.game_engine import Position


class GameEvent(BaseModel):
    """Base class for all game events."""

    event_type: str
    move_index: int = 0  # Position in the move history of the move that produced it


class PiecePlaced(GameEvent):
    """A player claimed an empty cell."""

    event_type: Literal["piece_placed"] = "piece_placed"
    player_id: UUID
    position: Position


class PiecesCaptured(GameEvent):
    """Opponent pieces were flipped by a placement."""

    event_type: Literal["pieces_captured"] = "pieces_captured"
    capturing_player_id: UUID
    captured_player_id: UUID
    positions: list[Position] = Field(..., description="Flipped cells, sorted by (y, x)")


class PlayerPassed(GameEvent):
    """A player forfeited their turn."""

    event_type: Literal["player_passed"] = "player_passed"
    player_id: UUID
    consecutive: bool = Field(
        ..., description="True if the previous move was also a pass (ends the game)"
    )


class PlayerResigned(GameEvent):
    """A player conceded the game."""

    event_type: Literal["player_resigned"] = "player_resigned"
    player_id: UUID


class GameEnded(GameEvent):
    """The game has finished."""

    event_type: Literal["game_ended"] = "game_ended"
    winner_id: UUID | None = Field(None, description="None when the piece counts tie")
    reason: str = Field(..., description="Why the game ended: 'double_pass', 'resignation'")
    player_1_count: int
    player_2_count: int


# Union of all event types for type checking
AnyGameEvent = Annotated[
    PiecePlaced | PiecesCaptured | PlayerPassed | PlayerResigned | GameEnded,
    Field(discriminator="event_type"),
]
