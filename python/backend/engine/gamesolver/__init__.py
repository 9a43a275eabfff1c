from backend.engine.gamesolver.heuristic import manhattan
from backend.engine.gamesolver.parity import (
    inversion_count,
    inversion_parity,
    is_solvable,
)
from backend.engine.gamesolver.solver import Solver, SolverConsistencyError

__all__ = [
    "Solver",
    "SolverConsistencyError",
    "inversion_count",
    "inversion_parity",
    "is_solvable",
    "manhattan",
]
