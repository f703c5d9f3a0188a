"""Plain-text diagnostic dump of a game state."""

from uuid import UUID

from othello.config import Settings, load_settings
from othello.schemas.game_engine import GameState, PlayerNumber

from .board import Board, project


def turn_status(state: GameState, viewer: UUID) -> str:
    """Describe whose turn it is from the viewer's point of view."""
    if state.winner is not None or state.game_over:
        return "This game has finished"

    last_move = state.last_move
    if last_move is None:
        return "Player 2 goes first"
    if last_move.author != viewer:
        return "It is your turn"
    return "It is your opponent's turn"


def render_board(board: Board, settings: Settings) -> str:
    glyphs = {
        PlayerNumber.EMPTY: settings.EMPTY_GLYPH,
        PlayerNumber.PLAYER_1: settings.PLAYER_1_GLYPH,
        PlayerNumber.PLAYER_2: settings.PLAYER_2_GLYPH,
    }
    header = "  x  " + " ".join(str(x) for x in range(board.size))
    lines = [header, "y"]
    for y, row in enumerate(board.cells):
        cells = "".join(f"|{glyphs[cell]}" for cell in row)
        lines.append(f"{y}   {cells}|")
    return "\n".join(lines) + "\n"


def render_state(state: GameState, viewer: UUID, settings: Settings | None = None) -> str:
    """Render the turn line and board for one viewer.

    Purely presentational; validation and evolution never read it.
    """
    settings = settings or load_settings()
    return f"{turn_status(state, viewer)}\n\n{render_board(project(state), settings)}"
