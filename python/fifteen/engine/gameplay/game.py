"""Replays move sequences against a board and tracks progress."""

from __future__ import annotations

from typing import Iterable, Iterator

from fifteen.models.board import Board, Direction


class GamePlay:
    """Orchestrates a single playthrough of a board."""

    def __init__(self, board: Board) -> None:
        self.start = board
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Create a session from an existing board (e.g. parsed from stdin)."""
        return cls(board)

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Move the blank one cell in *direction*.

        Returns True if the move was valid.  An invalid move leaves the
        board untouched.
        """
        if not self.board.can_move(direction):
            return False
        self.board = self.board.apply(direction)
        self.moves += 1
        return True

    def replay(self, moves: Iterable[Direction]) -> Iterator[tuple[Direction, Board]]:
        """Apply *moves* in order, yielding each move with the board it produces.

        Stops with ``IllegalMove`` at the first move that leaves the grid.
        """
        for direction in moves:
            self.board = self.board.apply(direction)
            self.moves += 1
            yield direction, self.board

    def restart(self) -> None:
        self.board = self.start
        self.moves = 0

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
