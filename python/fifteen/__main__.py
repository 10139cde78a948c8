"""15-puzzle solver.

Usage::

    fifteen < board.txt              # read 16 integers from stdin
    fifteen --random --seed 7        # solve a reproducible random board
    fifteen -f rich --replay         # styled output, board after every move
    fifteen --heuristic manhattan --max-nodes 1000000

Exit status is 0 on success, 1 for an unsolvable board, 2 for malformed
input and 3 when a search limit is hit.
"""

import importlib
import logging
import sys
from enum import StrEnum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.gamesolver import Heuristic, SearchLimits, Solver
from fifteen.errors import MalformedBoard, SearchAborted, Unsolvable
from fifteen.frontend.cli.input_handler import read_board
from fifteen.models.board import Board

EXIT_UNSOLVABLE = 1
EXIT_MALFORMED = 2
EXIT_ABORTED = 3


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "fifteen.frontend.cli.vanilla.app",
    Frontend.rich: "fifteen.frontend.cli.rich.app",
}


class Shuffle(StrEnum):
    walk = "walk"
    permute = "permute"


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_board(random_board: bool, seed: Optional[int], shuffle: Shuffle) -> Board:
    if not random_board:
        return read_board(sys.stdin)
    if shuffle is Shuffle.permute:
        return GameGenerator.permuted(seed)
    return GameGenerator.generate(seed)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    random_board: bool = typer.Option(
        False, "--random",
        help="Solve a randomly generated board instead of reading stdin.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random; the same seed gives the same board.",
    ),
    shuffle: Shuffle = typer.Option(
        Shuffle.walk, "--shuffle",
        help="How --random builds its board: random walk or parity-fixed permutation.",
    ),
    heuristic: Heuristic = typer.Option(
        Heuristic.LINEAR_CONFLICT, "--heuristic",
        help="Lower bound used to prune the search.",
    ),
    max_nodes: Optional[int] = typer.Option(
        None, "--max-nodes", min=1,
        help="Abort after expanding this many nodes.",
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=0,
        help="Abort if no solution of at most this many moves exists.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", min=0,
        help="Abort after this many seconds.",
    ),
    replay: bool = typer.Option(
        False, "--replay",
        help="Show the board after every move instead of just the move list.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Print a shortest sequence of blank moves that solves a 15-puzzle."""
    _configure_logging(verbose)
    out = importlib.import_module(_RUNNERS[frontend])
    limits = SearchLimits(max_nodes=max_nodes, max_depth=max_depth, timeout=timeout)

    try:
        board = _load_board(random_board, seed, shuffle)
        if random_board and frontend is Frontend.vanilla:
            typer.echo(str(board), err=True)
        moves = Solver.solve(board, heuristic, limits)
    except MalformedBoard as exc:
        out.error(f"invalid board: {exc}")
        raise typer.Exit(code=EXIT_MALFORMED)
    except Unsolvable:
        out.error("board cannot be solved")
        raise typer.Exit(code=EXIT_UNSOLVABLE)
    except SearchAborted as exc:
        out.error(str(exc))
        raise typer.Exit(code=EXIT_ABORTED)

    out.show(board, moves, replay=replay)


if __name__ == "__main__":
    app()
