"""Move types - explicit player inputs appended to a game's history."""

from typing import TYPE_CHECKING, Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from othello.schemas.game_engine import Game, GameState
    from othello.services.game.engine.validation import ValidationResult


class Position(BaseModel):
    """A board cell. Hashable, so it can live in a piece set."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class PlaceMove(BaseModel):
    """Player claims an empty cell."""

    model_config = ConfigDict(frozen=True)

    move_kind: Literal["place"] = "place"
    x: int = Field(..., description="Column of the cell to claim")
    y: int = Field(..., description="Row of the cell to claim")

    @property
    def position(self) -> Position:
        return Position(x=self.x, y=self.y)


class PassMove(BaseModel):
    """Player forfeits this turn."""

    model_config = ConfigDict(frozen=True)

    move_kind: Literal["pass"] = "pass"


class ResignMove(BaseModel):
    """Player concedes the game."""

    model_config = ConfigDict(frozen=True)

    move_kind: Literal["resign"] = "resign"


# Union type for all move kinds
MoveType = Annotated[
    PlaceMove | PassMove | ResignMove,
    Field(discriminator="move_kind"),
]


class Move(BaseModel):
    """A single authored entry in the move history."""

    model_config = ConfigDict(frozen=True)

    author: UUID
    move_type: MoveType

    def is_valid(self, game: "Game", state: "GameState") -> "ValidationResult":
        """Check this move against the rules for the given game and state."""
        from othello.services.game.engine.validation import validate_move

        return validate_move(game, state, self)


def build_move_from_payload(payload: dict) -> MoveType:
    """Build a typed move from a raw payload dict.

    Args:
        payload: Dict with 'move_kind' key and move-specific fields.

    Returns:
        The appropriate MoveType variant.

    Raises:
        ValueError: If move_kind is missing or unknown.
    """
    move_kind = payload.get("move_kind")

    if move_kind == "place":
        return PlaceMove.model_validate(payload)
    elif move_kind == "pass":
        return PassMove.model_validate(payload)
    elif move_kind == "resign":
        return ResignMove.model_validate(payload)
    else:
        raise ValueError(f"Unknown move kind: {move_kind}")
