"""Flanking capture detection.

A placement captures every contiguous run of opponent pieces that it
brackets against an existing piece of the placing player. Each of the eight
directions is scanned independently with the same run semantics.
"""

import logging

logger = logging.getLogger(__name__)

from othello.schemas.game_engine import PlayerNumber, Position

from .board import Board

# (dx, dy) unit steps: four orthogonal, four diagonal
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
)


def scan_direction(
    board: Board,
    x: int,
    y: int,
    dx: int,
    dy: int,
    player: PlayerNumber,
) -> list[Position]:
    """Return the opponent run captured in one direction from (x, y).

    Walks outward from the cell next to (x, y). The run is captured only if
    it is non-empty and ends on a piece owned by ``player``. Running into an
    empty cell or the board edge captures nothing.

    Args:
        board: Board view before the placement.
        x: Column of the candidate placement.
        y: Row of the candidate placement.
        dx: Column step (-1, 0, 1).
        dy: Row step (-1, 0, 1).
        player: The placing player.

    Returns:
        Captured positions ordered outward from (x, y), or an empty list.
    """
    opponent = player.opponent
    run: list[Position] = []

    cx, cy = x + dx, y + dy
    while board.in_bounds(cx, cy) and board.at(cx, cy) == opponent:
        run.append(Position(x=cx, y=cy))
        cx, cy = cx + dx, cy + dy

    if not run:
        return []

    if board.in_bounds(cx, cy) and board.at(cx, cy) == player:
        logger.debug(
            "Bracket found: origin=(%d,%d), direction=(%d,%d), captured=%d",
            x,
            y,
            dx,
            dy,
            len(run),
        )
        return run

    return []


def can_capture(board: Board, x: int, y: int, player: PlayerNumber) -> bool:
    """Quick check whether a placement at (x, y) brackets any opponent run.

    Stops at the first capturing direction; use find_captures() when the
    captured cells are needed.
    """
    return any(scan_direction(board, x, y, dx, dy, player) for dx, dy in DIRECTIONS)


def find_captures(board: Board, x: int, y: int, player: PlayerNumber) -> frozenset[Position]:
    """Collect every opponent cell captured by a placement at (x, y).

    Args:
        board: Board view before the placement.
        x: Column of the placement.
        y: Row of the placement.
        player: The placing player.

    Returns:
        Union of the captured runs over all eight directions.
    """
    captured: set[Position] = set()
    for dx, dy in DIRECTIONS:
        captured.update(scan_direction(board, x, y, dx, dy, player))

    logger.debug(
        "Captures for placement: player=%d, at=(%d,%d), total=%d",
        player,
        x,
        y,
        len(captured),
    )
    return frozenset(captured)
