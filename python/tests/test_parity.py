"""Solvability classifier tests."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamemoves import MoveGenerator
from backend.engine.gamesolver import inversion_count, inversion_parity, is_solvable
from backend.models.board import GOAL, Board


@pytest.mark.parametrize(
    ("flat", "inversions"),
    [
        ([1, 2, 3, 4, 5, 6, 7, 8, 0], 0),
        ([0, 1, 2, 3, 4, 5, 6, 7, 8], 0),
        ([2, 1, 3, 4, 5, 6, 7, 8, 0], 1),
        ([8, 1, 2, 7, 0, 3, 6, 5, 4], 14),
        ([8, 7, 6, 5, 4, 3, 2, 1, 0], 28),
    ],
)
def test_inversion_count(flat: list[int], inversions: int) -> None:
    board = Board.from_flat(flat)
    assert inversion_count(board) == inversions
    assert inversion_parity(board) == inversions % 2


def test_goal_is_solvable() -> None:
    assert inversion_parity(GOAL) == 0
    assert is_solvable(GOAL)


def test_single_tile_swap_flips_solvability() -> None:
    assert not is_solvable(GOAL.swap(0, 1))
    assert is_solvable(GOAL.swap(0, 1).swap(2, 3))


def test_solvable_matches_reachable(goal_distances: dict) -> None:
    rng = random.Random(7)
    for _ in range(2000):
        tiles = tuple(rng.sample(range(9), 9))
        assert is_solvable(Board(tiles)) is (tiles in goal_distances)


def test_moves_preserve_solvability() -> None:
    board = Board.from_flat([8, 1, 2, 7, 0, 3, 6, 5, 4])
    for nxt in MoveGenerator.neighbors(board):
        assert is_solvable(nxt)
