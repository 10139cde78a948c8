"""Optimal 15-puzzle solver built on iterative-deepening A*."""

from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.gamesolver import Heuristic, SearchLimits, Solver
from fifteen.errors import (
    IllegalMove,
    MalformedBoard,
    PuzzleError,
    SearchAborted,
    Unsolvable,
)
from fifteen.models import GOAL, Board, Direction

__version__ = "0.1.0"

__all__ = [
    "GOAL",
    "Board",
    "Direction",
    "GameGenerator",
    "Heuristic",
    "IllegalMove",
    "MalformedBoard",
    "PuzzleError",
    "SearchAborted",
    "SearchLimits",
    "Solver",
    "Unsolvable",
]
