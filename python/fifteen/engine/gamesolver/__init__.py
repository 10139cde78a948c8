from fifteen.engine.gamesolver.heuristics import Heuristic, estimate
from fifteen.engine.gamesolver.search import (
    IDAStar,
    SearchLimits,
    SearchResult,
    SearchStats,
)
from fifteen.engine.gamesolver.solvability import is_solvable
from fifteen.engine.gamesolver.solver import Solver

__all__ = [
    "Heuristic",
    "IDAStar",
    "SearchLimits",
    "SearchResult",
    "SearchStats",
    "Solver",
    "estimate",
    "is_solvable",
]
