"""Solvability by inversion parity."""

from __future__ import annotations

from backend.models.board import BLANK, GOAL, Board


def inversion_count(board: Board) -> int:
    """Count tile pairs that appear in the opposite order of their labels."""
    flat = [v for v in board.tiles if v != BLANK]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


def inversion_parity(board: Board) -> int:
    """0 for an even inversion count, 1 for odd."""
    return inversion_count(board) % 2


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach ``GOAL``.

    On an odd-width board a slide never changes inversion parity, so the
    reachable boards are exactly those sharing the goal's parity.
    """
    return inversion_parity(board) == inversion_parity(GOAL)
