"""15-puzzle solver."""

from __future__ import annotations

from fifteen.engine.gamesolver import solvability
from fifteen.engine.gamesolver.heuristics import Heuristic
from fifteen.engine.gamesolver.search import IDAStar, SearchLimits, SearchResult
from fifteen.errors import Unsolvable
from fifteen.models.board import Board, Direction


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(
        board: Board,
        heuristic: Heuristic = Heuristic.LINEAR_CONFLICT,
        limits: SearchLimits | None = None,
    ) -> SearchResult:
        """Run IDA* on *board* and return the moves with search statistics."""
        return IDAStar(board, heuristic, limits).run()

    @staticmethod
    def solve(
        board: Board,
        heuristic: Heuristic = Heuristic.LINEAR_CONFLICT,
        limits: SearchLimits | None = None,
    ) -> list[Direction]:
        """Return a shortest move sequence that solves *board*.

        Returns ``[]`` for the goal board.  Raises ``Unsolvable`` without
        searching when the parity test fails.
        """
        if board.is_solved():
            return []
        return Solver.search(board, heuristic, limits).moves

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of an optimal solution, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None
        try:
            moves = Solver.solve(board)
        except Unsolvable:
            return None
        return moves[0]

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return solvability.is_solvable(board)
