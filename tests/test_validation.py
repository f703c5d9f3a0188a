"""Tests for move validation.

Critical scenarios tested:
- Finished games accept nothing
- Turn validation (strict alternation, player 2 opens)
- Placement bounds, occupancy and capture checks
- Pass and Resign need only the turn check
"""

import pytest

from othello.schemas.game_engine import Game, GameState
from othello.services.game.engine import ValidationErrorCode, validate_move

from .conftest import (
    OUTSIDER_ID,
    PLAYER_1_ID,
    PLAYER_2_ID,
    create_state,
    pass_move,
    place,
    resign,
)


class TestGameOverValidation:
    """Test validation once the game has finished."""

    @pytest.mark.parametrize(
        "move",
        [place(PLAYER_1_ID, 0, 3), pass_move(PLAYER_1_ID), resign(PLAYER_1_ID)],
    )
    def test_no_move_accepted_after_game_over(self, game: Game, move):
        state = create_state(
            player_1_cells=[(3, 3)],
            player_2_cells=[(1, 3), (2, 3)],
            moves=[resign(PLAYER_2_ID)],
            winner=PLAYER_1_ID,
            game_over=True,
        )

        result = validate_move(game, state, move)

        assert not result.is_valid
        assert result.error_code == ValidationErrorCode.GAME_ALREADY_OVER

    def test_drawn_game_is_over_without_winner(self, game: Game):
        state = create_state(
            moves=[pass_move(PLAYER_2_ID), pass_move(PLAYER_1_ID)],
            game_over=True,
        )

        result = validate_move(game, state, pass_move(PLAYER_2_ID))

        assert result.error_code == ValidationErrorCode.GAME_ALREADY_OVER


class TestTurnValidation:
    """Test validation based on turn order."""

    def test_player_1_cannot_open(self, game: Game, initial_state: GameState):
        """Player 2 goes first."""
        result = validate_move(game, initial_state, place(PLAYER_1_ID, 3, 5))

        assert not result.is_valid
        assert result.error_code == ValidationErrorCode.NOT_PLAYERS_TURN
        assert result.error_message == "Player 2 must make the first move"

    def test_player_2_can_open_with_capture(self, game: Game, initial_state: GameState):
        """(4,2) brackets player 1's (4,3) against (4,4)."""
        result = validate_move(game, initial_state, place(PLAYER_2_ID, 4, 2))

        assert result.is_valid
        assert result.error_code is None

    def test_player_1_cannot_pass_first(self, game: Game, initial_state: GameState):
        result = validate_move(game, initial_state, pass_move(PLAYER_1_ID))

        assert result.error_code == ValidationErrorCode.NOT_PLAYERS_TURN

    def test_same_player_cannot_move_twice(self, game: Game, player_1_to_move: GameState):
        """Player 2 made the last move."""
        result = validate_move(game, player_1_to_move, pass_move(PLAYER_2_ID))

        assert not result.is_valid
        assert result.error_code == ValidationErrorCode.NOT_PLAYERS_TURN

    def test_outsider_cannot_open(self, game: Game, initial_state: GameState):
        result = validate_move(game, initial_state, pass_move(OUTSIDER_ID))

        assert result.error_code == ValidationErrorCode.NOT_PLAYERS_TURN

    def test_outsider_cannot_move_later(self, game: Game, player_1_to_move: GameState):
        result = validate_move(game, player_1_to_move, pass_move(OUTSIDER_ID))

        assert result.error_code == ValidationErrorCode.UNKNOWN_PLAYER

    @pytest.mark.parametrize(
        "move",
        [place(PLAYER_2_ID, 4, 2), pass_move(PLAYER_2_ID), resign(PLAYER_2_ID)],
    )
    def test_game_against_self_accepts_nothing(self, initial_state: GameState, move):
        """Without this, the author would always be mapped to player 1."""
        same_player = Game(player_1=PLAYER_2_ID, player_2=PLAYER_2_ID)

        result = validate_move(same_player, initial_state, move)

        assert not result.is_valid
        assert result.error_code == ValidationErrorCode.INVALID_GAME


class TestPlacementValidation:
    """Test the geometric checks for placements."""

    def test_capturing_placement_accepted(self, game: Game, player_1_to_move: GameState):
        result = validate_move(game, player_1_to_move, place(PLAYER_1_ID, 0, 3))

        assert result.is_valid

    @pytest.mark.parametrize("x,y", [(-1, 3), (8, 3), (3, 8), (3, -1), (20, 20)])
    def test_out_of_bounds_rejected(self, game: Game, player_1_to_move: GameState, x, y):
        result = validate_move(game, player_1_to_move, place(PLAYER_1_ID, x, y))

        assert not result.is_valid
        assert result.error_code == ValidationErrorCode.POSITION_OUT_OF_BOUNDS

    def test_own_cell_rejected(self, game: Game, player_1_to_move: GameState):
        result = validate_move(game, player_1_to_move, place(PLAYER_1_ID, 3, 3))

        assert result.error_code == ValidationErrorCode.POSITION_OCCUPIED

    def test_opponent_cell_rejected(self, game: Game, player_1_to_move: GameState):
        result = validate_move(game, player_1_to_move, place(PLAYER_1_ID, 1, 3))

        assert result.error_code == ValidationErrorCode.POSITION_OCCUPIED

    def test_placement_adjacent_to_nothing_rejected(self, game: Game, player_1_to_move: GameState):
        result = validate_move(game, player_1_to_move, place(PLAYER_1_ID, 7, 7))

        assert not result.is_valid
        assert result.error_code == ValidationErrorCode.NO_CAPTURE_AVAILABLE

    def test_unbracketed_run_rejected(self, game: Game):
        """Adjacent opponent run with nothing of ours behind it."""
        state = create_state(
            player_1_cells=[(0, 0)],
            player_2_cells=[(5, 5), (6, 5)],
            moves=[place(PLAYER_2_ID, 6, 5)],
        )

        result = validate_move(game, state, place(PLAYER_1_ID, 4, 5))

        assert result.error_code == ValidationErrorCode.NO_CAPTURE_AVAILABLE

    def test_validation_does_not_mutate_state(self, game: Game, player_1_to_move: GameState):
        before = player_1_to_move.model_copy(deep=True)

        validate_move(game, player_1_to_move, place(PLAYER_1_ID, 0, 3))

        assert player_1_to_move == before


class TestPassAndResignValidation:
    """Pass and Resign carry no geometric precondition."""

    def test_pass_accepted_on_turn(self, game: Game, player_1_to_move: GameState):
        assert validate_move(game, player_1_to_move, pass_move(PLAYER_1_ID)).is_valid

    def test_resign_accepted_on_turn(self, game: Game, player_1_to_move: GameState):
        assert validate_move(game, player_1_to_move, resign(PLAYER_1_ID)).is_valid

    def test_player_2_can_resign_first(self, game: Game, initial_state: GameState):
        assert validate_move(game, initial_state, resign(PLAYER_2_ID)).is_valid

    def test_move_is_valid_method(self, game: Game, player_1_to_move: GameState):
        """Move.is_valid delegates to the validator."""
        assert place(PLAYER_1_ID, 0, 3).is_valid(game, player_1_to_move).is_valid
        result = place(PLAYER_1_ID, 7, 7).is_valid(game, player_1_to_move)
        assert result.error_code == ValidationErrorCode.NO_CAPTURE_AVAILABLE
