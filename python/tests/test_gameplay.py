"""Game session tests: moves, shuffle, reset, hint and playback."""

from __future__ import annotations

import random

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import is_solvable
from backend.models.board import GOAL, Board, Direction


def _one_move_game() -> GamePlay:
    return GamePlay.from_board(Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8]))


def test_new_session_starts_at_goal() -> None:
    game = GamePlay()
    assert game.board == GOAL
    assert game.is_won
    assert game.state.moves == 0


def test_move_applies_and_counts() -> None:
    game = _one_move_game()
    assert game.move(Direction.LEFT)
    assert game.is_won
    assert game.state.moves == 1


def test_move_off_grid_is_rejected() -> None:
    game = GamePlay()
    assert not game.move(Direction.UP)
    assert game.board == GOAL
    assert game.state.moves == 0


def test_move_tile_requires_adjacency() -> None:
    game = _one_move_game()
    assert not game.move_tile(0)
    assert game.state.moves == 0
    assert game.move_tile(8)
    assert game.board == GOAL


def test_shuffle_uses_injected_source() -> None:
    a = GamePlay(random.Random(3))
    b = GamePlay(random.Random(3))
    assert a.shuffle() and b.shuffle()
    assert a.board == b.board
    assert is_solvable(a.board)
    assert a.state.moves == 0


def test_reset_returns_to_goal() -> None:
    game = GamePlay.from_board(Board.from_flat([8, 1, 2, 7, 0, 3, 6, 5, 4]))
    game.move(Direction.UP)
    assert game.reset()
    assert game.board == GOAL
    assert game.state.moves == 0


def test_hint_moves_one_step() -> None:
    game = GamePlay.from_board(Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8]))
    assert game.hint() is Direction.LEFT
    assert game.board == Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])


def test_hint_on_solved_board() -> None:
    assert GamePlay().hint() is None


def test_solution_signals_unsolvable() -> None:
    game = GamePlay.from_board(Board.from_flat([2, 1, 3, 4, 5, 6, 7, 8, 0]))
    assert game.solution() is None


def test_playback_applies_every_step() -> None:
    game = GamePlay.from_board(Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8]))
    path = game.solution()
    assert path is not None

    seen = list(game.playback(path))

    assert seen == path
    assert game.is_won
    assert game.state.moves == 2
    assert not game.state.busy


def test_input_is_ignored_during_playback() -> None:
    game = GamePlay.from_board(Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8]))
    steps = game.playback(game.solution() or [])

    first = next(steps)

    assert game.state.busy
    assert game.board == first
    assert not game.move_tile(8)
    assert not game.move(Direction.LEFT)
    assert not game.shuffle()
    assert not game.reset()
    assert game.board == first


def test_closing_playback_cancels_it() -> None:
    start = Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8])
    game = GamePlay.from_board(start)
    steps = game.playback(game.solution() or [])

    next(steps)
    steps.close()

    assert not game.state.busy
    assert not game.is_won
    assert game.move(Direction.LEFT)
    assert game.is_won
