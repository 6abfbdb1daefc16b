# pathlab/core/algorithms.py
from typing import Dict, Optional, Type

from pathlab.core.astar import AStarAlgo, run_astar
from pathlab.core.bfs import BFSAlgo, run_bfs
from pathlab.core.dijkstra import DijkstraAlgo, run_dijkstra
from pathlab.core.engine import SearchAlgo, drain, run_search
from pathlab.core.grid import Grid
from pathlab.core.types import Cell, Outcome

ALGORITHMS: Dict[str, Type[SearchAlgo]] = {
    "BFS": BFSAlgo,
    "Dijkstra": DijkstraAlgo,
    "A*": AStarAlgo,
}

__all__ = [
    "ALGORITHMS", "make_algo", "solve",
    "run_bfs", "run_dijkstra", "run_astar",
]


def make_algo(label: str) -> SearchAlgo:
    try:
        cls = ALGORITHMS[label]
    except KeyError:
        raise ValueError(f"unknown algorithm {label!r}; choose from {', '.join(ALGORITHMS)}") from None
    return cls(name=label)


def solve(grid: Grid, label: str = "A*", start: Optional[Cell] = None,
          end: Optional[Cell] = None) -> Outcome:
    """Run one algorithm to completion without rendering."""
    return drain(run_search(make_algo(label), grid, start, end))
