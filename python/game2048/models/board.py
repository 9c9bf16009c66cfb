"""Board model for the 2048 game."""

from __future__ import annotations

from dataclasses import dataclass, field

from game2048.models.side import Side
from game2048.models.tile import Tile


@dataclass
class Board:
    """Represents the 2048 board.

    Cells are stored column-major as ``cells[col][row]`` in physical
    coordinates, with ``(0, 0)`` the lower-left corner.  ``None`` marks an
    empty cell.  :meth:`tile` and :meth:`move` take *logical* coordinates,
    translated through the current viewing perspective.
    """

    size: int
    cells: list[list[Tile | None]]
    perspective: Side = field(default=Side.NORTH)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, size: int) -> Board:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}.")
        return cls(size=size, cells=[[None] * size for _ in range(size)])

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from raw values, top (north) row first.

        ``0`` is an empty cell.  Example::

            Board.from_rows([
                [0, 0, 0, 0],
                [0, 0, 0, 0],
                [0, 0, 0, 0],
                [2, 2, 2, 2],   # row 0
            ])
        """
        size = len(rows)
        if size == 0 or any(len(r) != size for r in rows):
            raise ValueError("Board must be a non-empty square matrix.")
        board = cls.empty(size)
        for i, values in enumerate(rows):
            row = size - 1 - i
            for col, value in enumerate(values):
                if value < 0:
                    raise ValueError(
                        f"Tile values must be non-negative, got {value} "
                        f"at ({col}, {row})."
                    )
                if value:
                    board.add_tile(Tile.create(value, col, row))
        return board

    # -- viewing perspective --------------------------------------------------

    def set_viewing_perspective(self, side: Side) -> None:
        """View the board so that logical row numbers grow toward *side*."""
        self.perspective = side

    def reset_viewing_perspective(self) -> None:
        self.perspective = Side.NORTH

    # -- queries --------------------------------------------------------------

    def tile(self, col: int, row: int) -> Tile | None:
        """Return the tile at logical ``(col, row)``, or None if empty."""
        self._check_bounds(col, row)
        pcol, prow = self.perspective.to_physical(col, row, self.size)
        return self.cells[pcol][prow]

    def values(self) -> list[list[int]]:
        """Physical tile values, top row first, ``0`` for empty cells."""
        return [
            [
                0 if self.cells[col][row] is None else self.cells[col][row].value
                for col in range(self.size)
            ]
            for row in reversed(range(self.size))
        ]

    def tile_count(self) -> int:
        return sum(t is not None for column in self.cells for t in column)

    # -- mutation -------------------------------------------------------------

    def add_tile(self, tile: Tile) -> None:
        """Place *tile* at its own physical position, which must be empty."""
        self._check_bounds(tile.col, tile.row)
        if self.cells[tile.col][tile.row] is not None:
            raise ValueError(
                f"Cell ({tile.col}, {tile.row}) is already occupied."
            )
        self.cells[tile.col][tile.row] = tile

    def move(self, col: int, row: int, tile: Tile) -> bool:
        """Move *tile* to logical ``(col, row)``, merging with any tile there.

        Returns True if the move was a merge.  Moving a tile onto its own
        cell does nothing.
        """
        self._check_bounds(col, row)
        self._check_bounds(tile.col, tile.row)
        pcol, prow = self.perspective.to_physical(col, row, self.size)
        if (tile.col, tile.row) == (pcol, prow):
            return False
        if self.cells[tile.col][tile.row] != tile:
            raise ValueError(f"{tile} is not on the board.")

        target = self.cells[pcol][prow]
        if target is not None and target.value != tile.value:
            raise ValueError(
                f"Cannot merge {tile.value} into {target.value} "
                f"at ({pcol}, {prow})."
            )

        self.cells[tile.col][tile.row] = None
        if target is None:
            self.cells[pcol][prow] = tile.moved_to(pcol, prow)
            return False
        self.cells[pcol][prow] = tile.merged_into(target)
        return True

    def clear(self) -> None:
        for column in self.cells:
            column[:] = [None] * self.size

    # -- helpers --------------------------------------------------------------

    def _check_bounds(self, col: int, row: int) -> None:
        if not (0 <= col < self.size and 0 <= row < self.size):
            raise IndexError(
                f"Cell ({col}, {row}) is outside a {self.size}x{self.size} board."
            )
