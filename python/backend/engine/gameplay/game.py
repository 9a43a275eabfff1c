"""Core gameplay logic — processes moves, shuffles and solution playback."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamemoves import MoveGenerator
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single puzzle session.

    The session starts at the goal, like a fresh puzzle whose picture is
    shown whole until the player shuffles it.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self.state = GameState(GameGenerator.solved())

    @classmethod
    def from_board(cls, board: Board, rng: random.Random | None = None) -> GamePlay:
        """Create a session from an existing board."""
        game = cls(rng)
        game.state.restart(board)
        return game

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        if self.state.busy:
            return False
        board = MoveGenerator.slide(self.state.board, direction)
        if board is None:
            return False
        self.state.advance(board)
        return True

    def move_tile(self, index: int) -> bool:
        """Move the tile at grid *index* into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        if self.state.busy:
            return False
        board = MoveGenerator.slide_tile(self.state.board, index)
        if board is None:
            return False
        self.state.advance(board)
        return True

    # -- whole-board actions --------------------------------------------------

    def shuffle(self) -> bool:
        if self.state.busy:
            return False
        self.state.restart(GameGenerator.generate(self._rng))
        logger.debug("Shuffled to %s", self.state.board)
        return True

    def reset(self) -> bool:
        if self.state.busy:
            return False
        self.state.restart(GameGenerator.solved())
        logger.debug("Reset to goal")
        return True

    def hint(self) -> Direction | None:
        """Apply the first move of an optimal solution and return it."""
        if self.state.busy:
            return None
        direction = Solver.hint(self.state.board)
        if direction is not None:
            self.move(direction)
        return direction

    # -- solving --------------------------------------------------------------

    def solution(self) -> list[Board] | None:
        """Optimal path from the current board, ``None`` if unsolvable."""
        return Solver.solve(self.state.board)

    def playback(self, path: list[Board]) -> Iterator[Board]:
        """Apply *path* one board per ``next()``, yielding each new board.

        The caller paces the steps.  Closing the iterator early cancels
        the playback; either way the session is no longer busy afterwards.
        """
        self.state.busy = True
        done = 0
        logger.debug("Playing back %d moves", len(path))
        try:
            for board in path:
                self.state.advance(board)
                done += 1
                yield board
        finally:
            self.state.busy = False
            if done < len(path):
                logger.debug("Playback cancelled after %d/%d moves", done, len(path))

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
