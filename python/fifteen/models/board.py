"""Board model for the 15-puzzle."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterable

from fifteen.errors import IllegalMove, MalformedBoard

SIZE = 4
CELLS = SIZE * SIZE


class Direction(StrEnum):
    """Direction the *blank* moves (the neighbouring tile slides the other way)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def inverse(self) -> Direction:
        return _INVERSE[self]

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) offset applied to the blank."""
        return _DELTAS[self]


_INVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

# Fixed exploration order; keeps solutions reproducible.
MOVE_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def _neighbours(index: int) -> dict[Direction, int]:
    r, c = divmod(index, SIZE)
    out: dict[Direction, int] = {}
    for d in MOVE_ORDER:
        dr, dc = d.delta
        nr, nc = r + dr, c + dc
        if 0 <= nr < SIZE and 0 <= nc < SIZE:
            out[d] = nr * SIZE + nc
    return out


# NEIGHBOURS[i][d] -> cell the blank lands on when it leaves cell i in direction d.
NEIGHBOURS: tuple[dict[Direction, int], ...] = tuple(
    _neighbours(i) for i in range(CELLS)
)


@dataclass(frozen=True)
class Board:
    """Immutable 4×4 puzzle configuration.

    Tiles are stored as a flat row-major tuple. 0 represents the blank.
    Construct through :meth:`from_flat` to get input validation; the bare
    constructor trusts its caller.
    """

    tiles: tuple[int, ...]
    blank_index: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "blank_index", self.tiles.index(0))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8,
                             9, 10, 11, 12, 13, 14, 0, 15])
        """
        values = tuple(flat)
        if len(values) != CELLS:
            raise MalformedBoard(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(values)}."
            )
        for v in values:
            if not 0 <= v < CELLS:
                raise MalformedBoard(
                    f"Tile {v} is out of range; tiles must be in [0, {CELLS - 1}]."
                )
        if len(set(values)) != CELLS:
            dupes = sorted(v for v, n in Counter(values).items() if n > 1)
            raise MalformedBoard(
                f"Repeated tiles: {', '.join(map(str, dupes))}."
            )
        return cls(values)

    @classmethod
    def goal(cls) -> Board:
        """Return the solved board (1..15 in order, blank bottom-right)."""
        return GOAL

    @classmethod
    def decode(cls, key: int) -> Board:
        """Inverse of :meth:`encode`."""
        if not 0 <= key < 1 << (4 * CELLS):
            raise MalformedBoard(f"Key {key:#x} does not fit in 64 bits.")
        values = [(key >> (4 * (CELLS - 1 - i))) & 0xF for i in range(CELLS)]
        return cls.from_flat(values)

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return SIZE

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank_index, SIZE)

    @property
    def rows(self) -> list[tuple[int, ...]]:
        return [self.tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * SIZE + col]

    def is_goal(self) -> bool:
        return self.tiles == GOAL.tiles

    is_solved = is_goal

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == SIZE - 1 and col == SIZE - 1
        return divmod(val - 1, SIZE) == (row, col)

    def can_move(self, direction: Direction) -> bool:
        return direction in NEIGHBOURS[self.blank_index]

    def legal_moves(self) -> tuple[Direction, ...]:
        """Moves available to the blank, in :data:`MOVE_ORDER`."""
        return tuple(NEIGHBOURS[self.blank_index])

    # -- transitions ----------------------------------------------------------

    def apply(self, direction: Direction) -> Board:
        """Return a new board with the blank moved one cell in *direction*.

        Raises :class:`IllegalMove` if that would leave the grid.
        """
        target = NEIGHBOURS[self.blank_index].get(direction)
        if target is None:
            raise IllegalMove(self, direction)
        tiles = list(self.tiles)
        tiles[self.blank_index], tiles[target] = tiles[target], 0
        return Board(tuple(tiles))

    def encode(self) -> int:
        """Pack the board into a 64-bit key, 4 bits per cell, first cell highest."""
        key = 0
        for v in self.tiles:
            key = (key << 4) | v
        return key

    def __str__(self) -> str:
        return "\n".join(
            "[" + " ".join(str(v) for v in row) + "]" for row in self.rows
        )


GOAL = Board(tuple(range(1, CELLS)) + (0,))
