"""Parity test deciding whether a board can reach the goal."""

from __future__ import annotations

from fifteen.errors import Unsolvable
from fifteen.models.board import SIZE, Board


def count_inversions(board: Board) -> int:
    """Number of tile pairs (blank excluded) out of ascending row-major order."""
    flat = [v for v in board.tiles if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


def blank_row_distance(board: Board) -> int:
    """Rows between the blank and its goal row (the bottom one)."""
    return SIZE - 1 - board.blank_pos[0]


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    Every move either keeps the blank in its row (inversions unchanged) or
    shifts it one row while moving a tile past three others (inversion
    parity flips), so ``inversions + blank_row_distance`` keeps its parity.
    The goal has both terms at zero.
    """
    return (count_inversions(board) + blank_row_distance(board)) % 2 == 0


def ensure_solvable(board: Board) -> None:
    """Raise :class:`Unsolvable` unless *board* passes :func:`is_solvable`."""
    if not is_solvable(board):
        raise Unsolvable(board)
