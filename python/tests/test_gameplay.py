"""Move replay through GamePlay."""

from __future__ import annotations

import pytest

from fifteen.engine.gameplay import GamePlay
from fifteen.errors import IllegalMove
from fifteen.models.board import GOAL, Board, Direction

ONE_AWAY = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15]


def test_move_applies_and_counts() -> None:
    game = GamePlay.from_board(Board.from_flat(ONE_AWAY))
    assert not game.is_won
    assert game.move(Direction.RIGHT)
    assert game.moves == 1
    assert game.is_won


def test_invalid_move_is_rejected() -> None:
    game = GamePlay.from_board(GOAL)
    assert not game.move(Direction.DOWN)
    assert game.board == GOAL
    assert game.moves == 0


def test_replay_yields_each_board() -> None:
    game = GamePlay(GOAL)
    steps = list(game.replay([Direction.UP, Direction.LEFT, Direction.DOWN]))
    assert [d for d, _ in steps] == [Direction.UP, Direction.LEFT, Direction.DOWN]
    assert steps[0][1].blank_index == 11
    assert steps[1][1].blank_index == 10
    assert steps[2][1].blank_index == 14
    assert game.board == steps[-1][1]
    assert game.moves == 3


def test_replay_stops_on_illegal_move() -> None:
    game = GamePlay(GOAL)
    with pytest.raises(IllegalMove):
        list(game.replay([Direction.LEFT, Direction.DOWN]))
    assert game.moves == 1


def test_restart_returns_to_start() -> None:
    start = Board.from_flat(ONE_AWAY)
    game = GamePlay(start)
    game.move(Direction.UP)
    game.restart()
    assert game.board == start
    assert game.moves == 0
