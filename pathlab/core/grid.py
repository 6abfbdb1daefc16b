# pathlab/core/grid.py
#!/usr/bin/env python3
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from pathlab.core.errors import OutOfBounds, SearchInProgress
from pathlab.core.types import Cell, CellKind

logger = logging.getLogger(__name__)

# up, down, left, right
DIRECTIONS4 = ((-1, 0), (1, 0), (0, -1), (0, 1))

ASCII_KINDS = {".": CellKind.EMPTY, "#": CellKind.WALL, "S": CellKind.START, "E": CellKind.END}


@dataclass
class Grid:
    rows: int
    cols: int
    cells: List[List[CellKind]] = field(default_factory=list)   # [row][col]
    start: Optional[Cell] = None
    end: Optional[Cell] = None
    # algorithm object currently running on this grid, if any
    active_search: Optional[object] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.rows}x{self.cols}")
        if not self.cells:
            self.cells = [[CellKind.EMPTY] * self.cols for _ in range(self.rows)]

    # -------------------- construction --------------------

    @classmethod
    def from_cells(cls, cells: Sequence[Sequence[int]]) -> "Grid":
        """Build a grid from a [row][col] matrix of CellKind integers."""
        rows = len(cells)
        cols = len(cells[0]) if rows else 0
        grid = cls(rows, cols)
        for r, line in enumerate(cells):
            if len(line) != cols:
                raise ValueError(f"row {r} has {len(line)} cells, expected {cols}")
            for c, v in enumerate(line):
                kind = CellKind(int(v))
                if kind is not CellKind.EMPTY:
                    grid.set_kind((r, c), kind)
        return grid

    @classmethod
    def from_ascii(cls, lines: Sequence[str]) -> "Grid":
        """'#' wall, '.' empty, 'S' start, 'E' end."""
        return cls.from_cells([[int(ASCII_KINDS[ch]) for ch in line.strip()] for line in lines])

    def to_cells(self) -> List[List[int]]:
        return [[int(k) for k in row] for row in self.cells]

    def copy(self) -> "Grid":
        return Grid(self.rows, self.cols, [list(row) for row in self.cells], self.start, self.end)

    # -------------------- queries --------------------

    def in_bounds(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def _check(self, c: Cell) -> None:
        if not self.in_bounds(c):
            raise OutOfBounds(c, self.rows, self.cols)

    def kind_at(self, c: Cell) -> CellKind:
        self._check(c)
        r, col = c
        return self.cells[r][col]

    def is_traversable(self, c: Cell) -> bool:
        if not self.in_bounds(c):
            return False
        r, col = c
        return self.cells[r][col] is not CellKind.WALL

    def neighbors4(self, c: Cell) -> List[Cell]:
        """Traversable 4-connected neighbors of c (up, down, left, right)."""
        r, col = c
        out: List[Cell] = []
        for dr, dc in DIRECTIONS4:
            n = (r + dr, col + dc)
            if self.is_traversable(n):
                out.append(n)
        return out

    def walls(self) -> Iterator[Cell]:
        for r, row in enumerate(self.cells):
            for c, kind in enumerate(row):
                if kind is CellKind.WALL:
                    yield (r, c)

    # -------------------- mutations --------------------

    def set_kind(self, c: Cell, kind: CellKind) -> None:
        self._check(c)
        kind = CellKind(kind)
        r, col = c
        previous = self.cells[r][col]

        # the cell loses its endpoint role when overwritten
        if previous is CellKind.START and kind is not CellKind.START:
            self.start = None
        if previous is CellKind.END and kind is not CellKind.END:
            self.end = None

        if kind is CellKind.START:
            if self.start is not None and self.start != c:
                sr, sc = self.start
                self.cells[sr][sc] = CellKind.EMPTY
                logger.debug("start moved from %s to %s", self.start, c)
            self.start = c
        elif kind is CellKind.END:
            if self.end is not None and self.end != c:
                er, ec = self.end
                self.cells[er][ec] = CellKind.EMPTY
                logger.debug("end moved from %s to %s", self.end, c)
            self.end = c

        self.cells[r][col] = kind

    def toggle_wall(self, c: Cell) -> bool:
        """Flip EMPTY <-> WALL. Returns False when c holds the start or end."""
        kind = self.kind_at(c)
        if kind in (CellKind.START, CellKind.END):
            logger.debug("refusing to wall over %s at %s", kind.name, c)
            return False
        self.set_kind(c, CellKind.EMPTY if kind is CellKind.WALL else CellKind.WALL)
        return True

    def clear_walls(self) -> None:
        for r, c in list(self.walls()):
            self.cells[r][c] = CellKind.EMPTY

    def clear(self) -> None:
        self.cells = [[CellKind.EMPTY] * self.cols for _ in range(self.rows)]
        self.start = None
        self.end = None

    # -------------------- run ownership --------------------

    def claim(self, owner: object) -> None:
        if self.active_search is not None and self.active_search is not owner:
            raise SearchInProgress(
                f"{getattr(self.active_search, 'name', 'a search')} is still running on this grid"
            )
        self.active_search = owner

    def release(self, owner: object) -> None:
        if self.active_search is owner:
            self.active_search = None
