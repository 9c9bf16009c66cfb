"""Board sides and the coordinate frames they define.

Tilting toward any side is computed as a tilt toward NORTH on a rotated
view of the board.  Each side maps a *logical* ``(col, row)``, in which
row grows toward that side, onto the board's physical ``(col, row)``.
"""

from __future__ import annotations

from enum import StrEnum


class Side(StrEnum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    # -- coordinate mapping ---------------------------------------------------

    def col(self, col: int, row: int, size: int) -> int:
        """Physical column of logical ``(col, row)`` viewed from this side."""
        return self.to_physical(col, row, size)[0]

    def row(self, col: int, row: int, size: int) -> int:
        """Physical row of logical ``(col, row)`` viewed from this side."""
        return self.to_physical(col, row, size)[1]

    def to_physical(self, col: int, row: int, size: int) -> tuple[int, int]:
        last = size - 1
        if self is Side.NORTH:
            return col, row
        if self is Side.EAST:
            return row, last - col
        if self is Side.SOUTH:
            return last - col, last - row
        return last - row, col

    def to_logical(self, col: int, row: int, size: int) -> tuple[int, int]:
        """Inverse of :meth:`to_physical`."""
        return self.inverse.to_physical(col, row, size)

    # -- relations ------------------------------------------------------------

    @property
    def inverse(self) -> Side:
        """The side whose mapping undoes this one's."""
        return _INVERSE[self]


_INVERSE: dict[Side, Side] = {
    Side.NORTH: Side.NORTH,
    Side.EAST: Side.WEST,
    Side.SOUTH: Side.SOUTH,
    Side.WEST: Side.EAST,
}
