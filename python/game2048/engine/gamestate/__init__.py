from game2048.engine.gamestate.rules import (
    MAX_PIECE,
    at_least_one_move_exists,
    empty_space_exists,
    is_game_over,
    max_tile_exists,
)
from game2048.engine.gamestate.state import GameState

__all__ = [
    "MAX_PIECE",
    "GameState",
    "at_least_one_move_exists",
    "empty_space_exists",
    "is_game_over",
    "max_tile_exists",
]
