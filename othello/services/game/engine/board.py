"""Dense board view derived from the sparse piece sets of a GameState."""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

from othello.schemas.game_engine import BOARD_SIZE, GameState, PlayerNumber


@dataclass(frozen=True)
class Board:
    """Read-only N x N grid of cell values, indexed ``cells[y][x]``."""

    cells: tuple[tuple[PlayerNumber, ...], ...]

    @property
    def size(self) -> int:
        return len(self.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def at(self, x: int, y: int) -> PlayerNumber:
        return self.cells[y][x]

    def is_empty(self, x: int, y: int) -> bool:
        return self.at(x, y) == PlayerNumber.EMPTY


def project(state: GameState, size: int = BOARD_SIZE) -> Board:
    """Build the dense board for a state.

    Player 1 positions are written first, then player 2 positions. The two
    sets are disjoint, so the order never decides a cell.
    """
    grid = [[PlayerNumber.EMPTY] * size for _ in range(size)]
    for piece in state.player_1_pieces:
        grid[piece.y][piece.x] = PlayerNumber.PLAYER_1
    for piece in state.player_2_pieces:
        grid[piece.y][piece.x] = PlayerNumber.PLAYER_2

    logger.debug(
        "Projected board: player_1=%d, player_2=%d",
        len(state.player_1_pieces),
        len(state.player_2_pieces),
    )
    return Board(cells=tuple(tuple(row) for row in grid))
