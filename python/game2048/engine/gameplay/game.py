"""Core gameplay logic: tilts the board and keeps score."""

from __future__ import annotations

from game2048.engine.gameplay.merges import MergeTable
from game2048.engine.gamestate import MAX_PIECE, GameState
from game2048.models.board import Board
from game2048.models.side import Side
from game2048.models.tile import Tile

DEFAULT_SIZE = 4


class GamePlay:
    """Orchestrates a single game of 2048.

    Tile spawning is left to the caller: new tiles arrive through
    :meth:`add_tile`.
    """

    def __init__(self, size: int = DEFAULT_SIZE, max_piece: int = MAX_PIECE) -> None:
        self.state = GameState(Board.empty(size), max_piece=max_piece)
        self._merges = MergeTable(size)

    @classmethod
    def from_board(
        cls,
        board: Board,
        score: int = 0,
        max_score: int = 0,
        max_piece: int = MAX_PIECE,
    ) -> "GamePlay":
        """Create a game from an existing board (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.state = GameState(board, score, max_score, max_piece)
        obj._merges = MergeTable(board.size)
        return obj

    @classmethod
    def from_rows(
        cls,
        rows: list[list[int]],
        score: int = 0,
        max_score: int = 0,
        max_piece: int = MAX_PIECE,
    ) -> "GamePlay":
        """Create a game from raw values, top row first, ``0`` for empty."""
        return cls.from_board(Board.from_rows(rows), score, max_score, max_piece)

    # -- tilting --------------------------------------------------------------

    def tilt(self, side: Side) -> None:
        """Slide every tile toward *side*, merging equal tiles.

        A tile lands on the cell nearest *side* that is either empty or
        holds an equal tile that has not merged yet this tilt.  Each tile
        takes part in at most one merge per tilt.  When three
        equal tiles line up, the two nearest *side* merge and the third
        stays behind.
        """
        board = self.state.board
        board.set_viewing_perspective(side)
        for col in range(board.size):
            self._tilt_column(col)
        board.reset_viewing_perspective()

        self._merges.reset()
        self.state.check_game_over()

    def _tilt_column(self, col: int) -> None:
        # The top row has nowhere to go.
        for row in range(self.size - 2, -1, -1):
            if self.state.board.tile(col, row) is not None:
                self._tilt_tile(col, row)

    def _tilt_tile(self, col: int, row: int) -> None:
        board = self.state.board
        tile = board.tile(col, row)

        # Try the wall first, then each row back toward the tile.
        dest = None
        for new_row in range(board.size - 1, row, -1):
            target = board.tile(col, new_row)
            if target is None:
                dest = new_row
                break
            if target.value == tile.value and not self._merges.merged(target.col, target.row):
                dest = new_row
                break

        if dest is None:
            return

        if board.move(col, dest, tile):
            merged = board.tile(col, dest)
            self._merges.mark(merged.col, merged.row)
            self.state.add_score(merged.value)

    # -- board access ---------------------------------------------------------

    def tile(self, col: int, row: int) -> Tile | None:
        """Return the tile at ``(col, row)``, or None if the cell is empty."""
        return self.state.board.tile(col, row)

    def add_tile(self, tile: Tile) -> None:
        """Add *tile* to the board.  Its cell must be empty."""
        self.state.board.add_tile(tile)
        self.state.check_game_over()

    def clear(self) -> None:
        """Empty the board and reset the score.  ``max_score`` is kept."""
        self.state.board.clear()
        self.state.reset_score()

    def values(self) -> list[list[int]]:
        return self.state.board.values()

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.state.board.size

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def max_score(self) -> int:
        return self.state.max_score

    @property
    def game_over(self) -> bool:
        return self.state.is_over

    # -- dunder ---------------------------------------------------------------

    def __str__(self) -> str:
        lines = ["", "["]
        for row in self.values():
            lines.append(
                "".join("|    " if v == 0 else f"|{v:4d}" for v in row) + "|"
            )
        status = "over" if self.game_over else "not over"
        lines.append(
            f"] {self.score} (max: {self.max_score}) (game is {status})"
        )
        return "\n".join(lines) + "\n"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GamePlay):
            return NotImplemented
        return str(self) == str(other)
