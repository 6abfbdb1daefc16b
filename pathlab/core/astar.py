# pathlab/core/astar.py
#!/usr/bin/env python3
"""
A* — Dijkstra with the frontier ordered by g + h.

Heuristic:
- Manhattan distance to the end cell. Moves cost 1 and never go diagonal,
  so h never overestimates and is consistent.

Tie-breaking in the PQ:
- (f, h, seq, cell): lower f, then lower h (closer to the goal), then FIFO by seq.
"""

from dataclasses import dataclass, field
from typing import Generator, List, Optional, Tuple
import heapq

from pathlab.core.dijkstra import DijkstraAlgo
from pathlab.core.engine import run_search
from pathlab.core.grid import Grid
from pathlab.core.types import Cell, Outcome, StepSnapshot


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class AStarAlgo(DijkstraAlgo):
    name: str = "A*"

    open_pq: List[Tuple[int, int, int, Cell]] = field(default_factory=list)  # (f, h, seq, cell)

    def _h(self, c: Cell) -> int:
        return manhattan(c, self.goal_cell)

    def _priority(self, v: Cell, d_v: int) -> int:
        return d_v + self._h(v)

    def _push(self, prio: int, d_v: int, v: Cell) -> None:
        heapq.heappush(self.open_pq, (prio, self._h(v), self._bump(), v))


def run_astar(grid: Grid, start: Optional[Cell] = None,
              end: Optional[Cell] = None) -> Generator[StepSnapshot, None, Outcome]:
    return run_search(AStarAlgo(), grid, start, end)
