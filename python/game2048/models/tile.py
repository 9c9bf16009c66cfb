"""Tile value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """A numbered tile at a physical ``(col, row)`` position.

    Tiles never change in place: moving or merging yields a new tile.
    """

    value: int
    col: int
    row: int

    @classmethod
    def create(cls, value: int, col: int, row: int) -> Tile:
        if value <= 0:
            raise ValueError(f"Tile value must be positive, got {value}.")
        return cls(value=value, col=col, row=row)

    def moved_to(self, col: int, row: int) -> Tile:
        return Tile(value=self.value, col=col, row=row)

    def merged_into(self, other: Tile) -> Tile:
        """Return the tile formed when this tile merges into *other*."""
        return Tile(value=self.value + other.value, col=other.col, row=other.row)
