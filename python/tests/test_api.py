"""Tests for the plain-sequence functions exported by ``backend``."""

from __future__ import annotations

import random

import pytest

import backend
from backend.models.board import GOAL, InvalidBoardError


def test_exports_accept_sequences() -> None:
    start = [1, 2, 3, 4, 5, 6, 7, 0, 8]
    assert backend.solve(start) == [GOAL]
    assert backend.is_solvable(start)
    assert len(backend.neighbors(start)) == 3
    assert backend.identity(start) == backend.identity(tuple(start))
    assert backend.identity(start) != backend.identity(GOAL)


def test_already_at_goal_by_identity() -> None:
    board = backend.random_solvable_configuration(random.Random(1))
    path = backend.solve(board)
    assert path is not None
    end = path[-1] if path else board
    assert backend.identity(end) == backend.identity(GOAL)


def test_unsolvable_signal() -> None:
    assert backend.solve([1, 2, 3, 4, 5, 6, 8, 7, 0]) is None
    assert not backend.is_solvable([1, 2, 3, 4, 5, 6, 8, 7, 0])


def test_invalid_sequence_fails_fast() -> None:
    with pytest.raises(InvalidBoardError):
        backend.solve([1, 2, 3])
