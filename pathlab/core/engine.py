# pathlab/core/engine.py
#!/usr/bin/env python3
"""
Shared traversal machinery — one expansion per step() for animation.

Every algorithm exposes the API the viewer drives:
- init(grid) - reset() - step() -> StepSnapshot - cancel()

A step pops one live frontier entry, stops if it is the end cell and
otherwise expands its traversable, unvisited 4-neighbors. Subclasses only
provide the frontier container and the expansion rule.
"""

import logging
from dataclasses import dataclass, field
from typing import Generator, Iterable, List, Optional, Tuple

from pathlab.core.errors import BlockedEndpoint, MissingEndpoint
from pathlab.core.grid import Grid
from pathlab.core.path import reconstruct_path
from pathlab.core.search_state import SearchState
from pathlab.core.types import (
    Cell, CellKind, EXHAUSTED, IDLE, Outcome, RUNNING, StepSnapshot, SUCCEEDED, TERMINAL,
)

logger = logging.getLogger(__name__)


@dataclass
class SearchAlgo:
    name: str = "search"

    grid: Optional[Grid] = None
    search: SearchState = field(default_factory=SearchState)
    state: str = IDLE
    start_cell: Optional[Cell] = None
    goal_cell: Optional[Cell] = None
    popped_count: int = 0
    path: List[Cell] = field(default_factory=list)
    endpoints: Tuple[Optional[Cell], Optional[Cell]] = (None, None)

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Optional[Cell] = None, end: Optional[Cell] = None) -> None:
        """Attach to a grid and start a fresh run on it.

        start and end default to the grid's own endpoints.
        """
        if self.grid is not None and self.grid is not grid:
            self.cancel()
        self.grid = grid
        self.endpoints = (start, end)
        self.reset()

    def reset(self) -> None:
        """Discard the current run (if any) and seed a new one from the start cell."""
        if self.grid is None:
            return
        # a rejected reset must not leave the previous run stepping
        self.cancel()
        grid = self.grid
        start = self.endpoints[0] or grid.start
        end = self.endpoints[1] or grid.end
        if start is None:
            raise MissingEndpoint("start")
        if end is None:
            raise MissingEndpoint("end")
        for cell in (start, end):
            if grid.kind_at(cell) is CellKind.WALL:  # kind_at raises OutOfBounds
                raise BlockedEndpoint(cell)
        grid.claim(self)

        self.search.reset(grid.rows, grid.cols)
        self.start_cell = start
        self.goal_cell = end
        self.popped_count = 0
        self.path = []
        self._clear_frontier()
        self._seed(self.start_cell)
        self.state = RUNNING
        logger.info("%s: search %s -> %s on %dx%d grid",
                    self.name, self.start_cell, self.goal_cell, grid.rows, grid.cols)

    def cancel(self) -> None:
        """Abandon the run and let another search use the grid."""
        if self.grid is not None:
            self.grid.release(self)
        if self.state == RUNNING:
            logger.debug("%s: run cancelled after %d expansions", self.name, self.popped_count)
            self.state = IDLE

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL

    # -------------------- main stepping logic --------------------

    def step(self) -> StepSnapshot:
        if self.grid is None or self.state == IDLE:
            return StepSnapshot(status=IDLE, metrics=self._metrics())
        if self.finished:
            return self._snapshot()

        u = self._pop()
        if u is None:
            self._finish(EXHAUSTED)
            return self._snapshot()

        self.popped_count += 1
        if u == self.goal_cell:
            self.path = reconstruct_path(
                self.search.predecessor, self.start_cell, u, limit=self.search.capacity
            )
            self._finish(SUCCEEDED)
            return self._snapshot(current=u)

        opened = self._expand(u)
        return self._snapshot(current=u, opened=opened)

    def _finish(self, status: str) -> None:
        self.state = status
        self.grid.release(self)
        logger.info("%s: %s after %d expansions (path %d cells)",
                    self.name, status, self.popped_count, len(self.path))

    # -------------------- frontier hooks --------------------

    def _clear_frontier(self) -> None:
        raise NotImplementedError

    def _seed(self, start: Cell) -> None:
        raise NotImplementedError

    def _pop(self) -> Optional[Cell]:
        """Next live frontier cell, or None when the frontier is exhausted."""
        raise NotImplementedError

    def _expand(self, u: Cell) -> List[Cell]:
        """Relax u's neighbors; returns the cells reached for the first time."""
        raise NotImplementedError

    def _frontier_cells(self) -> Iterable[Cell]:
        raise NotImplementedError

    # -------------------- snapshots / metrics --------------------

    def _snapshot(self, current: Optional[Cell] = None, opened: Iterable[Cell] = ()) -> StepSnapshot:
        frontier = () if self.finished else tuple(dict.fromkeys(self._frontier_cells()))
        return StepSnapshot(
            status=self.state,
            visited=frozenset(self.search.visited),
            frontier=frontier,
            current=current,
            opened=tuple(opened),
            path=list(self.path) if self.state == SUCCEEDED else None,
            metrics=self._metrics(open_size=len(frontier)),
        )

    def _metrics(self, open_size: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": open_size,
            "closed_count": len(self.search.visited),
            "path_len": len(self.path),
        }


def run_search(algo: SearchAlgo, grid: Grid, start: Optional[Cell] = None,
               end: Optional[Cell] = None) -> Generator[StepSnapshot, None, Outcome]:
    """Start algo on grid and return a lazy sequence of step snapshots.

    The endpoint and ownership checks happen here, before the first step.
    The generator's return value is the run's Outcome::

        outcome = yield from run_search(BFSAlgo(), grid)
    """
    algo.init(grid, start, end)
    return _drive(algo)


def _drive(algo: SearchAlgo) -> Generator[StepSnapshot, None, Outcome]:
    try:
        while True:
            snap = algo.step()
            if snap.finished:
                return Outcome(status=snap.status, path=list(snap.path or []), metrics=snap.metrics)
            yield snap
    finally:
        if not algo.finished:
            algo.cancel()


def drain(run: Generator[StepSnapshot, None, Outcome]) -> Outcome:
    """Consume a run without rendering and return its Outcome."""
    while True:
        try:
            next(run)
        except StopIteration as stop:
            return stop.value
