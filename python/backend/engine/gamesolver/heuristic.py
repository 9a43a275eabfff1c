"""Manhattan-distance heuristic."""

from __future__ import annotations

from backend.models.board import BLANK, CELLS, GOAL, SIZE, Board


def _distance_table() -> list[list[int]]:
    """table[v][i]: grid distance from cell i to tile v's goal cell (0 for the blank)."""
    table = [[0] * CELLS for _ in range(CELLS)]
    for goal_index, v in enumerate(GOAL.tiles):
        if v == BLANK:
            continue
        gr, gc = divmod(goal_index, SIZE)
        for i in range(CELLS):
            r, c = divmod(i, SIZE)
            table[v][i] = abs(r - gr) + abs(c - gc)
    return table


_DISTANCE = _distance_table()


def manhattan(board: Board) -> int:
    """Sum of grid distances from each tile to its goal cell.

    A slide moves one tile one step, so the estimate drops by at most one
    per move: admissible and consistent.
    """
    return sum(_DISTANCE[v][i] for i, v in enumerate(board.tiles))
