"""Rich terminal frontend — styled tables and panels.

Uses the ``rich`` library for the start board, the numbered move list and
an optional step-by-step replay, sharing the same engine as the vanilla
frontend.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fifteen.engine.gameplay import GamePlay
from fifteen.models.board import Board, Direction

console = Console()
err_console = Console(stderr=True)

_ARROWS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, title: str | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        title=title,
        title_style="dim",
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_moves(moves: list[Direction]) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        show_lines=False,
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Blank", style="bold cyan")
    table.add_column("", style="yellow")
    for i, direction in enumerate(moves, 1):
        table.add_row(str(i), direction.value, _ARROWS[direction])
    return table


def _summary(moves: list[Direction]) -> Text:
    text = Text()
    if not moves:
        text.append("  Already solved!", style="bold green")
        return text
    text.append("  Solved in ", style="dim")
    text.append(str(len(moves)), style="bold yellow")
    text.append(" moves", style="dim")
    return text


# -- public entry points ------------------------------------------------------


def show(board: Board, moves: list[Direction], replay: bool = False) -> None:
    """Draw the start board followed by the solution."""
    parts: list = [Align.center(_render_board(board)), Text("")]

    if replay and moves:
        game = GamePlay.from_board(board)
        steps = [
            _render_board(after, title=f"{i}. {direction.value} {_ARROWS[direction]}")
            for i, (direction, after) in enumerate(game.replay(moves), 1)
        ]
        parts.append(Columns(steps, padding=(1, 2)))
    elif moves:
        parts.append(Align.center(_render_moves(moves)))

    parts.append(Align.center(_summary(moves)))

    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]15-Puzzle  {board.size}×{board.size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)


def error(message: str) -> None:
    err_console.print(f"[bold red]error:[/bold red] {message}")
