# pathlab/core/search_state.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from math import inf
from typing import Dict, Optional, Set

from pathlab.core.errors import InvariantViolation
from pathlab.core.types import Cell


@dataclass
class SearchState:
    """Exploration data for one search run.

    ``distance`` holds the best known cost from the start. ``score`` holds
    the frontier priority: the distance itself for BFS/Dijkstra, distance
    plus heuristic for A*. A missing entry means "not reached yet".
    """
    rows: int = 0
    cols: int = 0
    visited: Set[Cell] = field(default_factory=set)
    predecessor: Dict[Cell, Cell] = field(default_factory=dict)
    distance: Dict[Cell, int] = field(default_factory=dict)
    score: Dict[Cell, int] = field(default_factory=dict)

    def reset(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self.visited = set()
        self.predecessor = {}
        self.distance = {}
        self.score = {}

    @property
    def capacity(self) -> int:
        return self.rows * self.cols

    def mark_visited(self, c: Cell) -> None:
        self.visited.add(c)

    def is_visited(self, c: Cell) -> bool:
        return c in self.visited

    def set_predecessor(self, c: Cell, came_from: Cell) -> None:
        if c == came_from:
            raise InvariantViolation(f"{c} cannot be its own predecessor")
        self.predecessor[c] = came_from

    def predecessor_of(self, c: Cell) -> Optional[Cell]:
        return self.predecessor.get(c)

    def distance_of(self, c: Cell) -> float:
        return self.distance.get(c, inf)

    def set_score(self, c: Cell, distance: int, priority: Optional[int] = None) -> None:
        """Record a strictly better distance for c (and its frontier priority)."""
        if distance >= self.distance_of(c):
            raise InvariantViolation(
                f"distance for {c} may only decrease ({self.distance_of(c)} -> {distance})"
            )
        self.distance[c] = distance
        self.score[c] = distance if priority is None else priority
