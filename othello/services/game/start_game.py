import logging

from othello.schemas.game_engine import Game, GameState

logger = logging.getLogger(__name__)


def validate_game(game: Game) -> None:
    """Validate a game descriptor before starting a match."""
    if game.player_1 == game.player_2:
        raise ValueError(f"A player cannot play against themselves: {game.player_1}")


def initialize_game(game: Game) -> GameState:
    """Validate the participants and return the opening state."""
    validate_game(game)
    state = GameState.initial()
    logger.info(
        "Game initialized: player_1=%s, player_2=%s",
        str(game.player_1)[:8],
        str(game.player_2)[:8],
    )
    return state
