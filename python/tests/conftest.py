"""Shared fixtures: a breadth-first distance table around the goal."""

from __future__ import annotations

import random

import pytest

from fifteen.models.board import GOAL, Board

BFS_DEPTH = 12
SAMPLES_PER_DEPTH = 4


def _breadth_first(depth: int) -> dict[Board, int]:
    distances = {GOAL: 0}
    frontier = [GOAL]
    for d in range(1, depth + 1):
        following: list[Board] = []
        for board in frontier:
            for move in board.legal_moves():
                child = board.apply(move)
                if child not in distances:
                    distances[child] = d
                    following.append(child)
        frontier = following
    return distances


@pytest.fixture(scope="session")
def distances() -> dict[Board, int]:
    """Exact optimal distance of every board within ``BFS_DEPTH`` moves of the goal."""
    return _breadth_first(BFS_DEPTH)


@pytest.fixture(scope="session")
def sampled(distances: dict[Board, int]) -> list[tuple[Board, int]]:
    """A few boards per distance, picked reproducibly."""
    rng = random.Random(15)
    by_depth: dict[int, list[Board]] = {}
    for board, d in distances.items():
        by_depth.setdefault(d, []).append(board)
    picked: list[tuple[Board, int]] = []
    for d in sorted(by_depth):
        boards = sorted(by_depth[d], key=Board.encode)
        for board in rng.sample(boards, min(SAMPLES_PER_DEPTH, len(boards))):
            picked.append((board, d))
    return picked
