"""8-puzzle engine.

The five operations the frontends rely on, accepting a ``Board`` or any
sequence of the nine tile values::

    from backend import solve

    solve([1, 2, 3, 4, 5, 6, 7, 0, 8])  # -> [Board((1, 2, ..., 8, 0))]
"""

from __future__ import annotations

import random
from collections.abc import Iterable

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamemoves import MoveGenerator
from backend.engine.gamesolver import Solver
from backend.models.board import GOAL, Board

Configuration = Board | Iterable[int]


def neighbors(configuration: Configuration) -> list[Board]:
    return MoveGenerator.neighbors(Board.coerce(configuration))


def is_solvable(configuration: Configuration) -> bool:
    return Solver.is_solvable(Board.coerce(configuration))


def random_solvable_configuration(rng: random.Random | None = None) -> Board:
    return GameGenerator.generate(rng)


def solve(configuration: Configuration) -> list[Board] | None:
    return Solver.solve(Board.coerce(configuration))


def identity(configuration: Configuration) -> int:
    return Board.coerce(configuration).identity()


__all__ = [
    "GOAL",
    "Board",
    "identity",
    "is_solvable",
    "neighbors",
    "random_solvable_configuration",
    "solve",
]
