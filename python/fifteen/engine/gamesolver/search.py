"""Iterative-deepening A* over the 15-puzzle.

Each iteration is a depth-first walk from the start board that prunes any
node whose ``g + h`` exceeds the current threshold.  When an iteration
misses the goal the threshold is raised to the smallest pruned ``g + h``
and the walk restarts.  Memory stays linear in the solution depth: the
only state is one working tile list, the current move path and the
Python call stack.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field

from fifteen.engine.gamesolver.heuristics import Heuristic, HeuristicTracker
from fifteen.engine.gamesolver.solvability import ensure_solvable
from fifteen.errors import SearchAborted
from fifteen.models.board import NEIGHBOURS, Board, Direction

log = logging.getLogger(__name__)

_FOUND = -1
_CLOCK_EVERY = 1024  # nodes between deadline checks


@dataclass(frozen=True)
class SearchLimits:
    """Optional caps; ``None`` disables a cap."""

    max_nodes: int | None = None
    max_depth: int | None = None
    timeout: float | None = None


@dataclass
class SearchStats:
    iterations: int = 0
    nodes: int = 0
    thresholds: list[int] = field(default_factory=list)
    elapsed: float = 0.0


@dataclass
class SearchResult:
    moves: list[Direction]
    stats: SearchStats

    def __len__(self) -> int:
        return len(self.moves)


class IDAStar:
    """One solve invocation.  Not reusable across boards."""

    def __init__(
        self,
        board: Board,
        heuristic: Heuristic = Heuristic.LINEAR_CONFLICT,
        limits: SearchLimits | None = None,
    ) -> None:
        self.board = board
        self.heuristic = heuristic
        self.limits = limits or SearchLimits()
        self.stats = SearchStats()
        self._tracker = HeuristicTracker(list(board.tiles), heuristic)
        self._path: list[Direction] = []
        self._started = 0.0
        self._deadline: float | None = None

    # -- driver ---------------------------------------------------------------

    def run(self) -> SearchResult:
        """Search until the goal is found.

        Raises :class:`~fifteen.errors.Unsolvable` before searching if the
        board fails the parity test, and
        :class:`~fifteen.errors.SearchAborted` if a limit is hit.
        """
        ensure_solvable(self.board)

        self._started = time.monotonic()
        if self.limits.timeout is not None:
            self._deadline = self._started + self.limits.timeout

        threshold = self._tracker.value
        start = self.board.blank_index

        while True:
            if self.limits.max_depth is not None and threshold > self.limits.max_depth:
                self._abort(
                    f"no solution within {self.limits.max_depth} moves "
                    f"(next threshold {threshold})"
                )

            self.stats.iterations += 1
            self.stats.thresholds.append(threshold)
            log.debug(
                "iteration %d: threshold=%d nodes=%d",
                self.stats.iterations,
                threshold,
                self.stats.nodes,
            )

            bound = self._dfs(start, 0, threshold, None)
            if bound == _FOUND:
                break
            # A solvable board always leaves some branch pruned.
            assert bound != math.inf
            threshold = int(bound)

        self.stats.elapsed = time.monotonic() - self._started
        log.info(
            "solved in %d moves (%d nodes, %d iterations, %.3fs)",
            len(self._path),
            self.stats.nodes,
            self.stats.iterations,
            self.stats.elapsed,
        )
        return SearchResult(moves=list(self._path), stats=self.stats)

    # -- depth-first iteration ------------------------------------------------

    def _dfs(
        self,
        blank: int,
        g: int,
        threshold: int,
        last: Direction | None,
    ) -> float:
        """Return ``_FOUND``, or the smallest ``g + h`` pruned below this node."""
        tracker = self._tracker
        h = tracker.value
        f = g + h
        if f > threshold:
            return f
        # Manhattan distance, and so either estimate, is zero only at the goal.
        if h == 0:
            return _FOUND

        self._visit()

        forbidden = last.inverse if last is not None else None
        minimum = math.inf
        for direction, target in NEIGHBOURS[blank].items():
            if direction is forbidden:
                continue
            tracker.slide(blank, target)
            self._path.append(direction)

            bound = self._dfs(target, g + 1, threshold, direction)
            if bound == _FOUND:
                return _FOUND

            self._path.pop()
            tracker.slide(target, blank)
            if bound < minimum:
                minimum = bound
        return minimum

    # -- limits ---------------------------------------------------------------

    def _visit(self) -> None:
        self.stats.nodes += 1
        nodes = self.stats.nodes
        if self.limits.max_nodes is not None and nodes > self.limits.max_nodes:
            self._abort(f"node limit of {self.limits.max_nodes} exceeded")
        if (
            self._deadline is not None
            and nodes % _CLOCK_EVERY == 0
            and time.monotonic() > self._deadline
        ):
            self._abort(f"timeout of {self.limits.timeout:g}s exceeded")

    def _abort(self, reason: str) -> None:
        self.stats.elapsed = time.monotonic() - self._started
        log.warning("%s after %d nodes", reason, self.stats.nodes)
        raise SearchAborted(reason, self.stats)
