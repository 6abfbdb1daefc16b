# pathlab/core/errors.py
"""Errors raised by the pathfinding core.

An exhausted search is not an error: it ends with an ``Outcome`` whose
status is ``"exhausted"`` and whose path is empty.
"""

from typing import Optional, Tuple


class PathfindingError(Exception):
    """Base class for every error the core raises."""


class OutOfBounds(PathfindingError, IndexError):
    def __init__(self, cell: Tuple[int, int], rows: int, cols: int):
        super().__init__(f"cell {cell} is outside the {rows}x{cols} grid")
        self.cell = cell


class MissingEndpoint(PathfindingError):
    def __init__(self, missing: str):
        super().__init__(f"set the {missing} cell before running a search")
        self.missing = missing


class BlockedEndpoint(PathfindingError):
    def __init__(self, cell: Tuple[int, int]):
        super().__init__(f"endpoint {cell} is a wall")
        self.cell = cell


class SearchInProgress(PathfindingError):
    """Another algorithm still holds an unfinished run on this grid."""


class Unreachable(PathfindingError):
    def __init__(self, end: Tuple[int, int], detail: Optional[str] = None):
        super().__init__(detail or f"end cell {end} was never reached")
        self.end = end


class InvariantViolation(PathfindingError, AssertionError):
    """Search bookkeeping is inconsistent; indicates a logic defect."""


class MapFormatError(PathfindingError, ValueError):
    """A map file could not be decoded into a grid."""
