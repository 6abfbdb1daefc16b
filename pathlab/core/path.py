# pathlab/core/path.py
from typing import Dict, List, Optional, Sequence

from pathlab.core.errors import InvariantViolation, Unreachable
from pathlab.core.types import Cell


def reconstruct_path(
    predecessor: Dict[Cell, Cell],
    start: Cell,
    end: Cell,
    limit: Optional[int] = None,
) -> List[Cell]:
    """Walk predecessors back from end; returns [start .. end].

    Raises Unreachable if end was never reached. A repeated cell, a chain that
    stops short of start, or more than ``limit`` hops raise InvariantViolation.
    """
    if end == start:
        return [start]
    if end not in predecessor:
        raise Unreachable(end)

    path: List[Cell] = [end]
    seen = {end}
    cur = end
    while cur != start:
        if limit is not None and len(path) > limit:
            raise InvariantViolation(f"path from {end} exceeds {limit} cells")
        prev = predecessor.get(cur)
        if prev is None:
            raise InvariantViolation(f"predecessor chain from {end} stops at {cur}, not {start}")
        if prev in seen:
            raise InvariantViolation(f"predecessor cycle through {prev}")
        seen.add(prev)
        path.append(prev)
        cur = prev

    path.reverse()
    return path


def is_valid_path(path: Sequence[Cell], grid) -> bool:
    """Simple, 4-adjacent, traversable and running from grid.start to grid.end."""
    if not path:
        return False
    if path[0] != grid.start or path[-1] != grid.end:
        return False
    if len(set(path)) != len(path):
        return False
    if not all(grid.is_traversable(c) for c in path):
        return False
    for (r0, c0), (r1, c1) in zip(path, path[1:]):
        if abs(r0 - r1) + abs(c0 - c1) != 1:
            return False
    return True
