# pathlab/core/bfs.py
#!/usr/bin/env python3

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Generator, Iterable, List, Optional

from pathlab.core.engine import SearchAlgo, run_search
from pathlab.core.grid import Grid
from pathlab.core.types import Cell, Outcome, StepSnapshot


@dataclass
class BFSAlgo(SearchAlgo):
    """Breadth-first search.

    Cells are marked visited and given their predecessor when they are
    enqueued, so each cell enters the FIFO queue at most once.
    """
    name: str = "BFS"
    queue: Deque[Cell] = field(default_factory=deque)

    def _clear_frontier(self) -> None:
        self.queue.clear()

    def _seed(self, start: Cell) -> None:
        self.search.mark_visited(start)
        self.search.set_score(start, 0)
        self.queue.append(start)

    def _pop(self) -> Optional[Cell]:
        return self.queue.popleft() if self.queue else None

    def _expand(self, u: Cell) -> List[Cell]:
        opened: List[Cell] = []
        base = self.search.distance[u]
        for v in self.grid.neighbors4(u):
            if self.search.is_visited(v):
                continue
            self.search.mark_visited(v)
            self.search.set_predecessor(v, u)
            self.search.set_score(v, base + 1)
            self.queue.append(v)
            opened.append(v)
        return opened

    def _frontier_cells(self) -> Iterable[Cell]:
        return self.queue


def run_bfs(grid: Grid, start: Optional[Cell] = None,
            end: Optional[Cell] = None) -> Generator[StepSnapshot, None, Outcome]:
    return run_search(BFSAlgo(), grid, start, end)
