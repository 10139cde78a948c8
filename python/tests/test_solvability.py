"""Parity-based solvability test."""

from __future__ import annotations

import random

import pytest

from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.gamesolver.solvability import (
    blank_row_distance,
    count_inversions,
    ensure_solvable,
    is_solvable,
)
from fifteen.errors import Unsolvable
from fifteen.models.board import GOAL, Board

SWAPPED_LAST = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15, 14, 0]
WALKS = 1000


def _swap_first_tiles(board: Board) -> Board:
    tiles = list(board.tiles)
    a, b = [i for i, v in enumerate(tiles) if v != 0][:2]
    tiles[a], tiles[b] = tiles[b], tiles[a]
    return Board(tuple(tiles))


def test_goal_is_solvable() -> None:
    assert count_inversions(GOAL) == 0
    assert blank_row_distance(GOAL) == 0
    assert is_solvable(GOAL)
    ensure_solvable(GOAL)


def test_swapped_last_pair_is_unsolvable() -> None:
    board = Board.from_flat(SWAPPED_LAST)
    assert count_inversions(board) == 1
    assert not is_solvable(board)
    with pytest.raises(Unsolvable) as info:
        ensure_solvable(board)
    assert info.value.board == board


def test_blank_row_counts_toward_parity() -> None:
    # Goal with the blank moved up once: tile 12 jumps past 13, 14 and 15.
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 0, 13, 14, 15, 12])
    assert blank_row_distance(board) == 1
    assert count_inversions(board) == 3
    assert is_solvable(board)


def test_random_walks_stay_solvable() -> None:
    rng = random.Random(2024)
    for _ in range(WALKS):
        board = GameGenerator.scramble(GOAL, rng.randint(1, 60), rng)
        assert is_solvable(board), board


def test_single_swap_breaks_solvability() -> None:
    rng = random.Random(7)
    for _ in range(200):
        board = GameGenerator.scramble(GOAL, 40, rng)
        assert not is_solvable(_swap_first_tiles(board)), board
