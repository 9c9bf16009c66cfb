"""Shared test fixtures."""

from __future__ import annotations

from typing import Callable

import pytest

from game2048.engine.gameplay.game import GamePlay


@pytest.fixture
def record_merges(monkeypatch: pytest.MonkeyPatch) -> Callable[[GamePlay], list[int]]:
    """Return a function that starts logging the merges made on a game.

    The returned list fills with the value of every tile a merge creates.
    """

    def _record(game: GamePlay) -> list[int]:
        board = game.state.board
        merged: list[int] = []
        move = board.move

        def logging_move(col: int, row: int, tile) -> bool:
            was_merge = move(col, row, tile)
            if was_merge:
                merged.append(board.tile(col, row).value)
            return was_merge

        monkeypatch.setattr(board, "move", logging_move)
        return merged

    return _record
