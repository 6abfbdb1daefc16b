# pathlab/core/dijkstra.py
#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import Generator, Iterable, List, Optional, Tuple
import heapq

from pathlab.core.engine import SearchAlgo, run_search
from pathlab.core.grid import Grid
from pathlab.core.types import Cell, Outcome, StepSnapshot


@dataclass
class DijkstraAlgo(SearchAlgo):
    name: str = "Dijkstra"

    open_pq: List[Tuple[int, int, Cell]] = field(default_factory=list)   # (d, seq, cell)
    seq: int = 0  # monotonic counter for PQ stability

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _clear_frontier(self) -> None:
        self.open_pq.clear()
        self.seq = 0

    def _seed(self, start: Cell) -> None:
        prio = self._priority(start, 0)
        self.search.set_score(start, 0, prio)
        self._push(prio, 0, start)

    def _pop(self) -> Optional[Cell]:
        while self.open_pq:
            entry = heapq.heappop(self.open_pq)
            key, u = entry[0], entry[-1]
            # stale entry: a better score was pushed later, or u is already final
            if self.search.is_visited(u) or key != self.search.score.get(u):
                continue
            self.search.mark_visited(u)
            return u
        return None

    def _priority(self, v: Cell, d_v: int) -> int:
        return d_v

    def _expand(self, u: Cell) -> List[Cell]:
        opened: List[Cell] = []
        for v in self.grid.neighbors4(u):
            if self.search.is_visited(v):
                continue
            alt = self.search.distance[u] + 1  # uniform cost
            if alt < self.search.distance_of(v):
                if v not in self.search.distance:
                    opened.append(v)
                prio = self._priority(v, alt)
                self.search.set_score(v, alt, prio)
                self.search.set_predecessor(v, u)
                self._push(prio, alt, v)
        return opened

    def _push(self, prio: int, d_v: int, v: Cell) -> None:
        heapq.heappush(self.open_pq, (prio, self._bump(), v))

    def _frontier_cells(self) -> Iterable[Cell]:
        return (entry[-1] for entry in sorted(self.open_pq)
                if not self.search.is_visited(entry[-1]))


def run_dijkstra(grid: Grid, start: Optional[Cell] = None,
                 end: Optional[Cell] = None) -> Generator[StepSnapshot, None, Outcome]:
    return run_search(DijkstraAlgo(), grid, start, end)
