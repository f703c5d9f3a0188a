"""Legal placement calculation for a player."""

from uuid import UUID

from othello.schemas.game_engine import BOARD_SIZE, Game, GameState, PlayerNumber, Position

from .board import project
from .captures import can_capture


def get_legal_moves(game: Game, state: GameState, player_id: UUID) -> list[Position]:
    """Determine every cell the player could legally claim.

    A placement is legal if:
    - The game is not over
    - The cell is empty
    - It brackets at least one opponent run

    Turn order is not considered; pair with validate_move() for that.

    Args:
        game: The two participants.
        state: Current game state.
        player_id: The player whose placements to check.

    Returns:
        Legal positions ordered by row, then column.
    """
    player = game.player_number(player_id)
    if state.game_over or player == PlayerNumber.EMPTY:
        return []

    board = project(state)
    legal_moves: list[Position] = []
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            if board.is_empty(x, y) and can_capture(board, x, y, player):
                legal_moves.append(Position(x=x, y=y))

    return legal_moves


def has_any_legal_moves(game: Game, state: GameState, player_id: UUID) -> bool:
    """Quick check if the player has any legal placement.

    More efficient than get_legal_moves() when you only need to know if
    a Pass is forced.
    """
    player = game.player_number(player_id)
    if state.game_over or player == PlayerNumber.EMPTY:
        return False

    board = project(state)
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            if board.is_empty(x, y) and can_capture(board, x, y, player):
                return True

    return False
