"""Vanilla terminal frontend — no third-party dependencies.

Prints one move per line using the lowercase direction name of the blank
(``up``, ``down``, ``left``, ``right``).  A solved board prints nothing.
With ``replay`` each move is followed by the board it produces.
"""

from __future__ import annotations

import sys
from typing import TextIO

from fifteen.engine.gameplay import GamePlay
from fifteen.models.board import Board, Direction


def format_moves(moves: list[Direction]) -> str:
    """Return the move list as text, one name per line."""
    return "".join(f"{d.value}\n" for d in moves)


def _format_replay(board: Board, moves: list[Direction]) -> str:
    game = GamePlay.from_board(board)
    lines: list[str] = []
    for direction, after in game.replay(moves):
        lines.append(direction.value)
        lines.append(str(after))
    return "".join(f"{line}\n" for line in lines)


# -- public entry points ------------------------------------------------------


def show(
    board: Board,
    moves: list[Direction],
    replay: bool = False,
    out: TextIO | None = None,
) -> None:
    """Write the solution for *board* to *out* (stdout by default)."""
    out = out or sys.stdout
    out.write(_format_replay(board, moves) if replay else format_moves(moves))
    out.flush()


def error(message: str) -> None:
    sys.stderr.write(f"error: {message}\n")
    sys.stderr.flush()
