"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from game2048.engine.gamestate.rules import MAX_PIECE, is_game_over
from game2048.models.board import Board


class GameState:
    """Holds the current board, score, and best score of finished games."""

    def __init__(
        self,
        board: Board,
        score: int = 0,
        max_score: int = 0,
        max_piece: int = MAX_PIECE,
    ) -> None:
        if score < 0 or max_score < 0:
            raise ValueError("Scores must be non-negative.")
        self.board = board
        self.score: int = score
        self.max_score: int = max_score
        self.max_piece: int = max_piece

    # -- scoring --------------------------------------------------------------

    def add_score(self, points: int) -> None:
        self.score += points

    def reset_score(self) -> None:
        self.score = 0

    # -- game over ------------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return is_game_over(self.board, self.max_piece)

    def check_game_over(self) -> bool:
        """Bank the score into ``max_score`` if the game is over.

        ``max_score`` only ever grows, and only here.
        """
        over = self.is_over
        if over:
            self.max_score = max(self.score, self.max_score)
        return over
