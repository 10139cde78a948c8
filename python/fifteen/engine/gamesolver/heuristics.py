"""Admissible lower bounds on the number of moves left to the goal.

Both estimators are pure functions of a row-major tile sequence.  The
search calls them through :class:`HeuristicTracker`, which keeps the value
current while a single working tile list is mutated in place and only
re-scores the rows or columns a move touches.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import Sequence

from fifteen.models.board import CELLS, SIZE, Board


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    LINEAR_CONFLICT = "linear-conflict"


# Goal coordinates per tile value; index 0 (blank) is never looked up.
GOAL_ROW: tuple[int, ...] = (0,) + tuple((t - 1) // SIZE for t in range(1, CELLS))
GOAL_COL: tuple[int, ...] = (0,) + tuple((t - 1) % SIZE for t in range(1, CELLS))

# _DISTANCE[tile][cell] -> grid distance from cell to the tile's goal cell.
_DISTANCE: tuple[tuple[int, ...], ...] = (
    (0,) * CELLS,
    *(
        tuple(
            abs(i // SIZE - GOAL_ROW[t]) + abs(i % SIZE - GOAL_COL[t])
            for i in range(CELLS)
        )
        for t in range(1, CELLS)
    ),
)


def manhattan(tiles: Sequence[int]) -> int:
    """Sum of grid distances of every non-blank tile from its goal cell."""
    return sum(_DISTANCE[t][i] for i, t in enumerate(tiles))


def _longest_increasing(values: list[int]) -> int:
    best = [1] * len(values)
    for i in range(1, len(values)):
        for j in range(i):
            if values[j] < values[i] and best[j] + 1 > best[i]:
                best[i] = best[j] + 1
    return max(best, default=0)


@lru_cache(maxsize=None)
def _row_penalty(row: int, line: tuple[int, ...]) -> int:
    goals = [GOAL_COL[t] for t in line if t and GOAL_ROW[t] == row]
    return 2 * (len(goals) - _longest_increasing(goals))


@lru_cache(maxsize=None)
def _col_penalty(col: int, line: tuple[int, ...]) -> int:
    goals = [GOAL_ROW[t] for t in line if t and GOAL_COL[t] == col]
    return 2 * (len(goals) - _longest_increasing(goals))


def _row(tiles: Sequence[int], row: int) -> tuple[int, ...]:
    return tuple(tiles[row * SIZE : (row + 1) * SIZE])


def _col(tiles: Sequence[int], col: int) -> tuple[int, ...]:
    return tuple(tiles[col::SIZE])


def conflict_penalty(tiles: Sequence[int]) -> int:
    """Extra moves forced by tiles that share their goal line in the wrong order.

    For each row (and column) the tiles already in their goal line form a
    sequence of goal positions.  Every tile outside its longest increasing
    subsequence has to step out of the line and back, costing two moves.
    """
    return sum(_row_penalty(r, _row(tiles, r)) for r in range(SIZE)) + sum(
        _col_penalty(c, _col(tiles, c)) for c in range(SIZE)
    )


def linear_conflict(tiles: Sequence[int]) -> int:
    """Manhattan distance tightened by :func:`conflict_penalty`."""
    return manhattan(tiles) + conflict_penalty(tiles)


_ESTIMATORS = {
    Heuristic.MANHATTAN: manhattan,
    Heuristic.LINEAR_CONFLICT: linear_conflict,
}


def estimate(board: Board, heuristic: Heuristic = Heuristic.LINEAR_CONFLICT) -> int:
    """Lower bound on the number of moves from *board* to the goal."""
    return _ESTIMATORS[heuristic](board.tiles)


class HeuristicTracker:
    """Running heuristic value over a mutable tile list.

    :meth:`slide` moves the tile at *target* into the blank at *blank* and
    returns the updated estimate.  Calling it again with the arguments
    swapped undoes the move.
    """

    __slots__ = ("tiles", "value", "_lines")

    def __init__(self, tiles: list[int], heuristic: Heuristic) -> None:
        self.tiles = tiles
        self._lines = heuristic is Heuristic.LINEAR_CONFLICT
        self.value = _ESTIMATORS[heuristic](tiles)

    def slide(self, blank: int, target: int) -> int:
        tiles = self.tiles
        tile = tiles[target]
        value = self.value + _DISTANCE[tile][blank] - _DISTANCE[tile][target]

        if not self._lines:
            tiles[blank], tiles[target] = tile, 0
            self.value = value
            return value

        # A vertical slide keeps the tile's order inside its column, so only
        # the two rows change; a horizontal slide likewise touches two columns.
        if abs(blank - target) == SIZE:
            a, b = blank // SIZE, target // SIZE
            before = _row_penalty(a, _row(tiles, a)) + _row_penalty(b, _row(tiles, b))
            tiles[blank], tiles[target] = tile, 0
            after = _row_penalty(a, _row(tiles, a)) + _row_penalty(b, _row(tiles, b))
        else:
            a, b = blank % SIZE, target % SIZE
            before = _col_penalty(a, _col(tiles, a)) + _col_penalty(b, _col(tiles, b))
            tiles[blank], tiles[target] = tile, 0
            after = _col_penalty(a, _col(tiles, a)) + _col_penalty(b, _col(tiles, b))

        self.value = value + after - before
        return self.value
