"""Random board generation."""

from __future__ import annotations

import random

import pytest

from fifteen.engine.gamegenerator import DEFAULT_SHUFFLES, GameGenerator
from fifteen.engine.gamesolver.solvability import is_solvable
from fifteen.models.board import GOAL, Board


def test_solved_is_goal() -> None:
    assert GameGenerator.solved() == GOAL


@pytest.mark.parametrize("seed", [0, 1, 42, 2**31])
def test_generate_is_reproducible(seed: int) -> None:
    first = GameGenerator.generate(seed)
    assert GameGenerator.generate(seed) == first
    assert is_solvable(first)
    assert not first.is_solved()


def test_generate_differs_between_seeds() -> None:
    boards = {GameGenerator.generate(seed) for seed in range(10)}
    assert len(boards) == 10


def test_generate_short_walk() -> None:
    board = GameGenerator.generate(seed=5, moves=1)
    assert board.blank_index in (11, 14)


def test_generate_rejects_empty_walk() -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(seed=5, moves=0)


def test_default_walk_length() -> None:
    assert DEFAULT_SHUFFLES == 1600


def test_scramble_never_backtracks() -> None:
    # Two moves without immediate reversal cannot return the blank home.
    rng = random.Random(11)
    for _ in range(100):
        assert GameGenerator.scramble(GOAL, 2, rng).blank_index != 15


def test_scramble_leaves_input_untouched() -> None:
    start = Board(GOAL.tiles)
    GameGenerator.scramble(start, 50, random.Random(0))
    assert start == GOAL


@pytest.mark.parametrize("seed", [0, 1, 42])
def test_permuted_is_reproducible(seed: int) -> None:
    assert GameGenerator.permuted(seed) == GameGenerator.permuted(seed)


def test_permuted_boards_are_solvable() -> None:
    boards = [GameGenerator.permuted(seed) for seed in range(300)]
    assert all(is_solvable(b) for b in boards)
    assert all(sorted(b.tiles) == list(range(16)) for b in boards)
    assert len(set(boards)) == len(boards)
