"""Exceptions raised by the puzzle engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fifteen.engine.gamesolver.search import SearchStats
    from fifteen.models.board import Board, Direction


class PuzzleError(Exception):
    """Base class for every error the engine raises."""


class MalformedBoard(PuzzleError, ValueError):
    """Input is not a permutation of the values 0-15."""


class Unsolvable(PuzzleError):
    """The board is valid but cannot reach the goal."""

    def __init__(self, board: Board) -> None:
        super().__init__("Board cannot be solved (odd permutation parity).")
        self.board = board


class IllegalMove(PuzzleError, RuntimeError):
    """A move would take the blank off the grid."""

    def __init__(self, board: Board, direction: Direction) -> None:
        row, col = board.blank_pos
        super().__init__(
            f"Cannot move blank {direction.value} from ({row}, {col})."
        )
        self.board = board
        self.direction = direction


class SearchAborted(PuzzleError):
    """A configured search limit was exceeded before reaching the goal."""

    def __init__(self, reason: str, stats: SearchStats) -> None:
        super().__init__(f"Search aborted: {reason}.")
        self.reason = reason
        self.stats = stats
