from backend.models.board import GOAL, Board, Direction, InvalidBoardError

__all__ = ["GOAL", "Board", "Direction", "InvalidBoardError"]
