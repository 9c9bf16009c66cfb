"""Side coordinate frames."""

from __future__ import annotations

import itertools

import pytest

from game2048.models.side import Side

SIZES = [1, 2, 4, 7]


def _cells(size: int) -> list[tuple[int, int]]:
    return list(itertools.product(range(size), repeat=2))


@pytest.mark.parametrize("size", SIZES)
def test_north_is_identity(size: int) -> None:
    for col, row in _cells(size):
        assert Side.NORTH.to_physical(col, row, size) == (col, row)
        assert Side.NORTH.col(col, row, size) == col
        assert Side.NORTH.row(col, row, size) == row


@pytest.mark.parametrize("side", list(Side), ids=str)
@pytest.mark.parametrize("size", SIZES)
def test_mapping_is_a_bijection(side: Side, size: int) -> None:
    physical = {side.to_physical(c, r, size) for c, r in _cells(size)}
    assert physical == set(_cells(size))


@pytest.mark.parametrize("side", list(Side), ids=str)
@pytest.mark.parametrize("size", SIZES)
def test_to_logical_inverts_to_physical(side: Side, size: int) -> None:
    for col, row in _cells(size):
        pcol, prow = side.to_physical(col, row, size)
        assert side.to_logical(pcol, prow, size) == (col, row)


@pytest.mark.parametrize(
    ("side", "step"),
    [
        (Side.NORTH, (0, 1)),
        (Side.EAST, (1, 0)),
        (Side.SOUTH, (0, -1)),
        (Side.WEST, (-1, 0)),
    ],
    ids=str,
)
def test_logical_row_grows_toward_side(side: Side, step: tuple[int, int]) -> None:
    size = 4
    for col in range(size):
        for row in range(size - 1):
            c0, r0 = side.to_physical(col, row, size)
            c1, r1 = side.to_physical(col, row + 1, size)
            assert (c1 - c0, r1 - r0) == step


def test_far_row_is_the_wall() -> None:
    # Logical row size-1 lies along the named edge.
    size = 4
    assert {Side.EAST.col(c, size - 1, size) for c in range(size)} == {3}
    assert {Side.WEST.col(c, size - 1, size) for c in range(size)} == {0}
    assert {Side.SOUTH.row(c, size - 1, size) for c in range(size)} == {0}
    assert {Side.NORTH.row(c, size - 1, size) for c in range(size)} == {3}


def test_side_parses_from_lowercase_name() -> None:
    assert Side("east") is Side.EAST
    with pytest.raises(ValueError):
        Side("up")
