"""Board model tests."""

from __future__ import annotations

import pytest

from backend.models.board import GOAL, Board, InvalidBoardError


def test_goal_layout() -> None:
    assert GOAL.tiles == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert Board.goal() is GOAL
    assert GOAL.is_solved()
    assert GOAL.blank_pos == (2, 2)


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 9],
        [1, 1, 3, 4, 5, 6, 7, 8, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
    ],
    ids=["short", "long", "duplicate", "out-of-range"],
)
def test_from_flat_rejects_invalid(flat: list[int]) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(flat)


@pytest.mark.parametrize(
    "flat",
    [
        [1.9, 2, 3, 4, 5, 6, 7, 8, 0],
        ["1", 2, 3, 4, 5, 6, 7, 8, 0],
        [True, 2, 3, 4, 5, 6, 7, 8, 0],
    ],
    ids=["float", "str", "bool"],
)
def test_from_flat_rejects_non_int_tiles(flat: list) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(flat)


def test_invalid_board_is_value_error() -> None:
    with pytest.raises(ValueError):
        Board.from_flat([])


def test_position_of() -> None:
    board = Board.from_flat([8, 1, 2, 7, 0, 3, 6, 5, 4])
    assert board.position_of(0) == 4
    assert board.position_of(8) == 0
    assert board.position_of(4) == 8
    assert board.blank_index == 4
    assert board.blank_pos == (1, 1)


def test_identity_matches_equality() -> None:
    a = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    b = Board.from_flat((1, 2, 3, 4, 5, 6, 7, 0, 8))
    c = Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8])
    assert a.identity() == b.identity()
    assert a.identity() != c.identity()
    assert a == b and a != c
    assert len({a.identity(), b.identity(), c.identity()}) == 2


def test_identity_orders_like_tiles() -> None:
    boards = [
        Board.from_flat([0, 1, 2, 3, 4, 5, 6, 7, 8]),
        Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8]),
        GOAL,
        Board.from_flat([8, 7, 6, 5, 4, 3, 2, 1, 0]),
    ]
    assert sorted(boards, key=Board.identity) == sorted(boards, key=lambda b: b.tiles)


def test_swap_returns_new_board() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    swapped = board.swap(7, 8)
    assert swapped == GOAL
    assert board.tiles == (1, 2, 3, 4, 5, 6, 7, 0, 8)


def test_rows_and_tiles() -> None:
    board = Board.from_flat([8, 1, 2, 7, 0, 3, 6, 5, 4])
    assert board.rows() == [(8, 1, 2), (7, 0, 3), (6, 5, 4)]
    assert board.get_tile(2, 0) == 6
    assert board.is_tile_correct(5) is False
    assert Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8]).is_tile_correct(0)


def test_coerce_passes_boards_through() -> None:
    assert Board.coerce(GOAL) is GOAL
    assert Board.coerce([1, 2, 3, 4, 5, 6, 7, 8, 0]) == GOAL
