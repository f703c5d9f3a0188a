"""Shared fixtures for game engine tests."""

from uuid import UUID

import pytest

from othello.schemas.game_engine import Game, GameState, Position
from othello.schemas.moves import Move, PassMove, PlaceMove, ResignMove

# Fixed UUIDs for deterministic testing
PLAYER_1_ID = UUID("00000000-0000-0000-0000-000000000001")
PLAYER_2_ID = UUID("00000000-0000-0000-0000-000000000002")
OUTSIDER_ID = UUID("00000000-0000-0000-0000-000000000003")


def positions(*cells: tuple[int, int]) -> frozenset[Position]:
    """Helper to build a piece set from (x, y) pairs."""
    return frozenset(Position(x=x, y=y) for x, y in cells)


def place(author: UUID, x: int, y: int) -> Move:
    """Helper to create a placement move."""
    return Move(author=author, move_type=PlaceMove(x=x, y=y))


def pass_move(author: UUID) -> Move:
    """Helper to create a pass move."""
    return Move(author=author, move_type=PassMove())


def resign(author: UUID) -> Move:
    """Helper to create a resignation."""
    return Move(author=author, move_type=ResignMove())


def create_state(
    player_1_cells: list[tuple[int, int]] | None = None,
    player_2_cells: list[tuple[int, int]] | None = None,
    moves: list[Move] | None = None,
    winner: UUID | None = None,
    game_over: bool = False,
) -> GameState:
    """Helper to create a state with an arbitrary board."""
    return GameState(
        moves=tuple(moves or []),
        player_1_pieces=positions(*(player_1_cells or [])),
        player_2_pieces=positions(*(player_2_cells or [])),
        winner=winner,
        game_over=game_over,
    )


@pytest.fixture
def game() -> Game:
    """Standard two-player game."""
    return Game(player_1=PLAYER_1_ID, player_2=PLAYER_2_ID)


@pytest.fixture
def initial_state() -> GameState:
    """Opening position, no moves yet."""
    return GameState.initial()


@pytest.fixture
def player_1_to_move() -> GameState:
    """Player 1 to move with a horizontal run of player 2 pieces to bracket.

    Row 3: . X X O . . . .   (O = player 1 at (3,3), X = player 2)
    """
    return create_state(
        player_1_cells=[(3, 3)],
        player_2_cells=[(1, 3), (2, 3)],
        moves=[place(PLAYER_2_ID, 2, 3)],
    )


@pytest.fixture
def after_player_2_pass() -> GameState:
    """Player 1 holds 5 cells, player 2 holds 3, and player 2 just passed."""
    return create_state(
        player_1_cells=[(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)],
        player_2_cells=[(0, 7), (1, 7), (2, 7)],
        moves=[place(PLAYER_2_ID, 2, 7), place(PLAYER_1_ID, 4, 0), pass_move(PLAYER_2_ID)],
    )
