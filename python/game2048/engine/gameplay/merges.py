"""Scratch record of merges made during a single tilt."""

from __future__ import annotations


class MergeTable:
    """Flags the physical cells that have received a merge this tilt.

    A flagged cell accepts no further merge until :meth:`reset`.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self._flags: list[list[bool]] = [[False] * size for _ in range(size)]

    def mark(self, col: int, row: int) -> None:
        self._flags[col][row] = True

    def merged(self, col: int, row: int) -> bool:
        return self._flags[col][row]

    def reset(self) -> None:
        for column in self._flags:
            column[:] = [False] * self.size
