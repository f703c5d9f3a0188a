from enum import IntEnum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, model_validator

from othello.schemas.moves import Move, Position

# Fixed board dimension
BOARD_SIZE = 8


# Cell values in the dense board view
class PlayerNumber(IntEnum):
    EMPTY = 0
    PLAYER_1 = 1
    PLAYER_2 = 2

    @property
    def opponent(self) -> "PlayerNumber":
        if self == PlayerNumber.PLAYER_1:
            return PlayerNumber.PLAYER_2
        if self == PlayerNumber.PLAYER_2:
            return PlayerNumber.PLAYER_1
        return PlayerNumber.EMPTY


# Supplied by session management, fixed for the lifetime of a match
class Game(BaseModel):
    model_config = ConfigDict(frozen=True)

    player_1: UUID
    player_2: UUID

    def player_number(self, player_id: UUID) -> PlayerNumber:
        """Map an identity to its side, EMPTY if it is not a participant."""
        if player_id == self.player_1:
            return PlayerNumber.PLAYER_1
        if player_id == self.player_2:
            return PlayerNumber.PLAYER_2
        return PlayerNumber.EMPTY

    def opponent_of(self, player_id: UUID) -> UUID:
        return self.player_2 if player_id == self.player_1 else self.player_1


# Starting pattern: player 1 on one diagonal of the centre, player 2 on the other
INITIAL_PLAYER_1_PIECES = frozenset({Position(x=3, y=4), Position(x=4, y=3)})
INITIAL_PLAYER_2_PIECES = frozenset({Position(x=3, y=3), Position(x=4, y=4)})


class GameState(BaseModel):
    """Immutable snapshot of a match.

    The dense board is never stored here; it is derived on demand from the
    two piece sets (see ``othello.services.game.engine.board``). Every transition
    produces a new instance via ``evolve``.
    """

    model_config = ConfigDict(frozen=True)

    moves: tuple[Move, ...] = ()
    player_1_pieces: frozenset[Position] = frozenset()
    player_2_pieces: frozenset[Position] = frozenset()
    winner: UUID | None = None
    game_over: bool = False

    @model_validator(mode="after")
    def check_pieces_disjoint(self) -> "GameState":
        overlap = self.player_1_pieces & self.player_2_pieces
        if overlap:
            raise ValueError(f"Cells owned by both players: {sorted((p.x, p.y) for p in overlap)}")
        return self

    @model_validator(mode="after")
    def check_pieces_in_bounds(self) -> "GameState":
        outside = [
            (p.x, p.y)
            for p in self.player_1_pieces | self.player_2_pieces
            if not (0 <= p.x < BOARD_SIZE and 0 <= p.y < BOARD_SIZE)
        ]
        if outside:
            raise ValueError(f"Cells outside the {BOARD_SIZE}x{BOARD_SIZE} board: {sorted(outside)}")
        return self

    @classmethod
    def initial(cls) -> "GameState":
        return cls(
            player_1_pieces=INITIAL_PLAYER_1_PIECES,
            player_2_pieces=INITIAL_PLAYER_2_PIECES,
        )

    def pieces_for(self, player: PlayerNumber) -> frozenset[Position]:
        if player == PlayerNumber.PLAYER_1:
            return self.player_1_pieces
        if player == PlayerNumber.PLAYER_2:
            return self.player_2_pieces
        return frozenset()

    @property
    def last_move(self) -> Move | None:
        return self.moves[-1] if self.moves else None

    def evolve(self, game: Game, move: Move, is_last_move: bool = True) -> "GameState":
        """Apply an already validated move and return the next snapshot."""
        from othello.services.game.engine.process import evolve

        return evolve(self, game, move, is_last_move)

    def render(self, viewer: UUID) -> str:
        from othello.services.game.engine.render import render_state

        return render_state(self, viewer)
