# pathlab/app/maps.py
"""JSON map files: {"rows": R, "cols": C, "cells": [[0|1|2|3, ...], ...]}."""

import json
import logging
from pathlib import Path

from pathlab.core.errors import MapFormatError
from pathlab.core.grid import Grid

logger = logging.getLogger(__name__)


def load_map(path: Path) -> Grid:
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as ex:
        raise MapFormatError(f"{path}: not valid JSON ({ex})") from ex

    try:
        rows = int(data["rows"])
        cols = int(data["cols"])
        cells = data["cells"]
    except (KeyError, TypeError, ValueError) as ex:
        raise MapFormatError(f"{path}: missing or invalid field ({ex})") from ex

    if rows < 1 or cols < 1:
        raise MapFormatError(f"{path}: grid must be at least 1x1, got {rows}x{cols}")
    if (not isinstance(cells, list) or len(cells) != rows
            or any(not isinstance(r, list) or len(r) != cols for r in cells)):
        raise MapFormatError(f"{path}: cells size does not match {rows}x{cols}")
    for row in cells:
        for v in row:
            if v not in (0, 1, 2, 3):
                raise MapFormatError(f"{path}: unknown cell value {v!r}")
    if sum(row.count(2) for row in cells) > 1 or sum(row.count(3) for row in cells) > 1:
        raise MapFormatError(f"{path}: more than one start or end cell")

    grid = Grid.from_cells(cells)
    logger.info("loaded %dx%d map from %s", rows, cols, path)
    return grid


def save_map(grid: Grid, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {"rows": grid.rows, "cols": grid.cols, "cells": grid.to_cells()}
    with open(path, "w") as f:
        json.dump(data, f)
    logger.info("saved map to %s", path)
