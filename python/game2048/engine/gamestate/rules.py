"""Board predicates that decide whether a game is over.

All functions read the board through its current viewing perspective;
callers check with the perspective reset to NORTH.
"""

from __future__ import annotations

from game2048.models.board import Board

MAX_PIECE = 2048


def empty_space_exists(board: Board) -> bool:
    for col in range(board.size):
        for row in range(board.size):
            if board.tile(col, row) is None:
                return True
    return False


def max_tile_exists(board: Board, max_piece: int = MAX_PIECE) -> bool:
    """Return True if any tile has reached *max_piece*."""
    for col in range(board.size):
        for row in range(board.size):
            tile = board.tile(col, row)
            if tile is not None and tile.value == max_piece:
                return True
    return False


def at_least_one_move_exists(board: Board) -> bool:
    """Return True if some tilt could change the board.

    That is the case when a cell is empty, or when two horizontally or
    vertically adjacent tiles hold the same value.
    """
    if empty_space_exists(board):
        return True

    size = board.size
    for col in range(size):
        for row in range(size):
            value = board.tile(col, row).value
            if col + 1 < size and board.tile(col + 1, row).value == value:
                return True
            if row + 1 < size and board.tile(col, row + 1).value == value:
                return True
    return False


def is_game_over(board: Board, max_piece: int = MAX_PIECE) -> bool:
    return max_tile_exists(board, max_piece) or not at_least_one_move_exists(board)
