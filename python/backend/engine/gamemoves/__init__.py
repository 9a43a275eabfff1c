from backend.engine.gamemoves.moves import MoveGenerator

__all__ = ["MoveGenerator"]
