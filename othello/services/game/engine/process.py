"""Main entry point for applying moves.

This module provides the primary interface for advancing a game:
- evolve(): Applies an already validated move and returns the next state
- process_move(): Validates, evolves and reports what happened as events
- replay(): Rebuilds a state from a full move history
"""

import logging
from uuid import UUID

logger = logging.getLogger(__name__)

from othello.schemas.game_engine import Game, GameState, PlayerNumber
from othello.schemas.moves import Move, PassMove, PlaceMove, ResignMove

from .board import project
from .captures import find_captures
from .events import (
    AnyGameEvent,
    GameEnded,
    PiecePlaced,
    PiecesCaptured,
    PlayerPassed,
    PlayerResigned,
)
from .validation import ProcessResult, validate_move


def piece_counts(state: GameState) -> tuple[int, int]:
    """Return (player 1 cells, player 2 cells)."""
    return len(state.player_1_pieces), len(state.player_2_pieces)


def check_win_condition(state: GameState, game: Game) -> UUID | None:
    """Decide the winner of a finished board by piece count.

    Args:
        state: Game state whose board is final.
        game: The two participants.

    Returns:
        The player holding strictly more cells, or None on a tie.
    """
    player_1_count, player_2_count = piece_counts(state)
    logger.debug("Win check: player_1=%d, player_2=%d", player_1_count, player_2_count)

    if player_1_count > player_2_count:
        return game.player_1
    if player_2_count > player_1_count:
        return game.player_2
    return None


def evolve(state: GameState, game: Game, move: Move, is_last_move: bool = True) -> GameState:
    """Apply a move to a state and return the next state.

    The move must already have passed validate_move(); nothing is re-checked
    here. Captures are only computed when ``is_last_move`` is set.

    Args:
        state: Current game state.
        game: The two participants.
        move: A validated move.
        is_last_move: Whether this is the newest move (not a replay step).

    Returns:
        A new GameState with the move appended.
    """
    moves = state.moves + (move,)
    winner = state.winner
    game_over = state.game_over
    move_type = move.move_type

    if isinstance(move_type, PlaceMove):
        player = game.player_number(move.author)
        placed = move_type.position
        own = set(state.pieces_for(player))
        opponent = set(state.pieces_for(player.opponent))
        own.add(placed)

        if is_last_move:
            captured = find_captures(project(state), placed.x, placed.y, player)
            own |= captured
            opponent -= captured
            logger.debug(
                "Placement applied: player=%d, at=(%d,%d), captured=%d",
                player,
                placed.x,
                placed.y,
                len(captured),
            )

        if player == PlayerNumber.PLAYER_1:
            player_1_pieces, player_2_pieces = frozenset(own), frozenset(opponent)
        else:
            player_1_pieces, player_2_pieces = frozenset(opponent), frozenset(own)

        return state.model_copy(
            update={
                "moves": moves,
                "player_1_pieces": player_1_pieces,
                "player_2_pieces": player_2_pieces,
            }
        )

    elif isinstance(move_type, PassMove):
        previous = state.last_move
        if previous is not None and isinstance(previous.move_type, PassMove):
            game_over = True
            if winner is None:
                winner = check_win_condition(state, game)
            logger.info("Game ended on consecutive passes: winner=%s", winner)

    elif isinstance(move_type, ResignMove):
        game_over = True
        if winner is None:
            winner = game.opponent_of(move.author)
        logger.info("Player resigned: player=%s, winner=%s", move.author, winner)

    return state.model_copy(
        update={
            "moves": moves,
            "winner": winner,
            "game_over": game_over,
        }
    )


def process_move(game: Game, state: GameState, move: Move) -> ProcessResult:
    """Validate and apply a move, reporting what happened.

    This is the main entry point for a single incoming move. It:
    1. Validates the move against the current state
    2. Evolves the state (the move is always the newest one)
    3. Derives events from the difference between the two states

    Args:
        game: The two participants.
        state: Current game state.
        move: The candidate move.

    Returns:
        ProcessResult containing:
        - success: Whether the move was accepted
        - state: The new game state (if successful)
        - events: What the move did, each tagged with its move_index
        - error_code/error_message: Rejection details (if failed)

    Example:
        >>> result = process_move(game, state, move)
        >>> if result.success:
        ...     save(result.state)
        ... else:
        ...     send_error(result.error_code, result.error_message)
    """
    move_kind = move.move_type.move_kind
    logger.info(
        "Processing move: kind=%s, author=%s, history=%d",
        move_kind,
        move.author,
        len(state.moves),
    )

    validation = validate_move(game, state, move)
    if not validation.is_valid:
        logger.warning(
            "Move validation failed: code=%s, message=%s, author=%s, kind=%s",
            validation.error_code,
            validation.error_message,
            move.author,
            move_kind,
        )
        return ProcessResult.failure(
            validation.error_code.value if validation.error_code else "VALIDATION_ERROR",
            validation.error_message or "Invalid move",
        )

    new_state = evolve(state, game, move, is_last_move=True)
    events = _collect_events(game, state, new_state, move)

    logger.info(
        "Move processed successfully: kind=%s, author=%s, events_generated=%d",
        move_kind,
        move.author,
        len(events),
    )
    logger.debug("Generated events: %s", [type(e).__name__ for e in events])
    return ProcessResult.ok(new_state, events)


def replay(game: Game, moves: list[Move]) -> ProcessResult:
    """Rebuild a game state from a full move history.

    Each move is validated against the state built so far and applied as the
    newest move at that point. Stops at the first rejected move.

    Returns:
        ProcessResult with the final state and every event produced, or the
        failure of the first invalid move.
    """
    state = GameState.initial()
    events: list[AnyGameEvent] = []

    for index, move in enumerate(moves):
        result = process_move(game, state, move)
        if not result.success or result.state is None:
            logger.warning("Replay stopped at move %d: code=%s", index, result.error_code)
            return ProcessResult.failure(
                result.error_code or "VALIDATION_ERROR",
                f"Move {index}: {result.error_message}",
            )
        state = result.state
        events.extend(result.events)

    logger.debug("Replay complete: moves=%d, game_over=%s", len(moves), state.game_over)
    return ProcessResult.ok(state, events)


def _collect_events(
    game: Game,
    before: GameState,
    after: GameState,
    move: Move,
) -> list[AnyGameEvent]:
    """Describe a transition as events, all tagged with the move's index."""
    move_index = len(after.moves) - 1
    move_type = move.move_type
    events: list[AnyGameEvent] = []

    if isinstance(move_type, PlaceMove):
        player = game.player_number(move.author)
        placed = move_type.position
        events.append(PiecePlaced(player_id=move.author, position=placed))

        captured = after.pieces_for(player) - before.pieces_for(player) - {placed}
        if captured:
            events.append(
                PiecesCaptured(
                    capturing_player_id=move.author,
                    captured_player_id=game.opponent_of(move.author),
                    positions=sorted(captured, key=lambda p: (p.y, p.x)),
                )
            )

    elif isinstance(move_type, PassMove):
        events.append(PlayerPassed(player_id=move.author, consecutive=after.game_over))

    elif isinstance(move_type, ResignMove):
        events.append(PlayerResigned(player_id=move.author))

    if after.game_over and not before.game_over:
        player_1_count, player_2_count = piece_counts(after)
        events.append(
            GameEnded(
                winner_id=after.winner,
                reason="resignation" if isinstance(move_type, ResignMove) else "double_pass",
                player_1_count=player_1_count,
                player_2_count=player_2_count,
            )
        )

    for event in events:
        event.move_index = move_index

    return events
