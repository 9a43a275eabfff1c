"""Optimal 8-puzzle solver (A* with the Manhattan heuristic)."""

from __future__ import annotations

import heapq
import itertools
import logging

from backend.engine.gamemoves import MoveGenerator
from backend.engine.gamesolver.heuristic import manhattan
from backend.engine.gamesolver.parity import is_solvable
from backend.models.board import GOAL, Board, Direction

logger = logging.getLogger(__name__)


class SolverConsistencyError(RuntimeError):
    """The search ran dry on a board that should have been solvable."""


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board) -> list[Board] | None:
        """Return the boards visited by a shortest solution of *board*.

        The start board is excluded and ``GOAL`` is the last element, so
        ``[]`` means *board* is already solved.  Returns ``None`` if
        *board* cannot reach the goal.
        """
        goal_key = GOAL.identity()
        start_key = board.identity()
        if start_key == goal_key:
            return []

        if not Solver.is_solvable(board):
            logger.info("Rejected unsolvable board %s", board)
            return None

        counter = itertools.count()
        best_g: dict[int, int] = {start_key: 0}
        parent: dict[int, Board | None] = {start_key: None}
        # (f, insertion order, g, board); the counter keeps ties stable
        open_heap: list[tuple[int, int, int, Board]] = [
            (manhattan(board), next(counter), 0, board)
        ]
        expanded = 0

        logger.debug("Solving %s (h=%d)", board, open_heap[0][0])

        while open_heap:
            _, _, g, current = heapq.heappop(open_heap)
            key = current.identity()
            if g > best_g[key]:
                # superseded by a cheaper rediscovery
                continue

            if key == goal_key:
                path = Solver._reconstruct(current, parent)
                logger.debug(
                    "Solved in %d moves after %d expansions", len(path), expanded
                )
                return path

            expanded += 1
            ng = g + 1
            for nxt in MoveGenerator.neighbors(current):
                nk = nxt.identity()
                if nk not in best_g or ng < best_g[nk]:
                    best_g[nk] = ng
                    parent[nk] = current
                    heapq.heappush(
                        open_heap, (ng + manhattan(nxt), next(counter), ng, nxt)
                    )

        logger.error(
            "Search exhausted %d boards without reaching the goal from %s",
            expanded,
            board,
        )
        raise SolverConsistencyError(
            f"No path to the goal from solvable board {board}."
        )

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of an optimal solution, or ``None`` if solved / unsolvable."""
        path = Solver.solve(board)
        if not path:
            return None
        return MoveGenerator.direction_between(board, path[0])

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return is_solvable(board)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _reconstruct(goal: Board, parent: dict[int, Board | None]) -> list[Board]:
        path: list[Board] = []
        current: Board | None = goal
        while current is not None:
            prev = parent[current.identity()]
            if prev is None:
                break
            path.append(current)
            current = prev
        path.reverse()
        return path
