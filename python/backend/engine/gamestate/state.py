"""Tracks the current board of a puzzle in progress."""

from __future__ import annotations

from backend.models.board import Board


class GameState:
    """Holds the current board, move counter and busy flag.

    ``busy`` is set while a solution is being played back; the session
    ignores player input until it clears.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.busy: bool = False

    def advance(self, board: Board) -> None:
        """Replace the current board with the result of one move."""
        self.board = board
        self.moves += 1

    def restart(self, board: Board) -> None:
        """Start over from *board* with the move counter cleared."""
        self.board = board
        self.moves = 0

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
