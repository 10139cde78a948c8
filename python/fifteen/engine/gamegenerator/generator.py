"""Generates solvable 15-puzzle boards."""

from __future__ import annotations

import logging
import random

from fifteen.engine.gamesolver.solvability import is_solvable
from fifteen.models.board import CELLS, GOAL, Board, Direction

log = logging.getLogger(__name__)

DEFAULT_SHUFFLES = CELLS * 100


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return GOAL

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random) -> Board:
        """Return *board* after *moves* random blank moves.

        The move that would undo the previous one is never picked, so the
        walk does not oscillate in place.
        """
        previous: Direction | None = None
        for _ in range(moves):
            options = [
                d for d in board.legal_moves()
                if previous is None or d is not previous.inverse
            ]
            previous = rng.choice(options)
            board = board.apply(previous)
        return board

    @staticmethod
    def generate(seed: int | None = None, moves: int = DEFAULT_SHUFFLES) -> Board:
        """Return a random *solvable* board that is not the goal.

        The same *seed* always yields the same board.
        """
        if moves < 1:
            raise ValueError("moves must be positive")
        rng = random.Random(seed)
        board = GameGenerator.scramble(GOAL, moves, rng)

        # Ensure the board is not already solved
        while board.is_solved():
            board = GameGenerator.scramble(board, moves, rng)

        log.debug("generated %#018x (seed=%s, moves=%d)", board.encode(), seed, moves)
        return board

    @staticmethod
    def permuted(seed: int | None = None) -> Board:
        """Return a uniformly random solvable board.

        Shuffles all sixteen cells, then swaps two non-blank tiles if the
        permutation has the wrong parity.
        """
        rng = random.Random(seed)
        tiles = list(range(CELLS))
        rng.shuffle(tiles)
        board = Board(tuple(tiles))
        if not is_solvable(board):
            a, b = [i for i, v in enumerate(tiles) if v != 0][:2]
            tiles[a], tiles[b] = tiles[b], tiles[a]
            board = Board(tuple(tiles))

        if not is_solvable(board):
            raise RuntimeError(f"parity fix failed for {tiles}")
        log.debug("permuted %#018x (seed=%s)", board.encode(), seed)
        return board
