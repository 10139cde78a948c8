"""Reads board configurations from text.

The expected format is 16 integers in row-major order separated by any
whitespace, 0 marking the blank.  One row per line is conventional::

    1 2 3 4
    5 6 7 8
    9 10 11 12
    13 14 0 15
"""

from __future__ import annotations

from typing import TextIO

from fifteen.errors import MalformedBoard
from fifteen.models.board import Board


def parse_board(text: str) -> Board:
    """Parse *text* into a :class:`Board`, raising ``MalformedBoard`` on bad input."""
    values: list[int] = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            raise MalformedBoard(f"{token!r} is not an integer.") from None
    return Board.from_flat(values)


def read_board(stream: TextIO) -> Board:
    """Read every line from *stream* and parse it as one board."""
    return parse_board(stream.read())
