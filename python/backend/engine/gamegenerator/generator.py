"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.engine.gamesolver.parity import is_solvable
from backend.models.board import GOAL, Board

logger = logging.getLogger(__name__)

# Process-wide default source, seeded from OS entropy at import.
_DEFAULT_RNG = random.Random()


class GameGenerator:
    """Creates uniformly random solvable boards."""

    # Swapping any two tiles flips inversion parity; these two are used.
    REPAIR_PAIR: tuple[int, int] = (1, 2)

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return GOAL

    @staticmethod
    def generate(rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board.

        The goal's tiles are shuffled uniformly; a board of the wrong
        parity gets tiles 1 and 2 exchanged.  The goal itself is a valid
        (if unlucky) result.
        """
        rng = rng if rng is not None else _DEFAULT_RNG
        tiles = GOAL.to_list()
        rng.shuffle(tiles)
        board = Board(tuple(tiles))

        if not is_solvable(board):
            a, b = GameGenerator.REPAIR_PAIR
            board = board.swap(board.position_of(a), board.position_of(b))
            logger.debug("Repaired parity by swapping tiles %d and %d", a, b)

        return board
