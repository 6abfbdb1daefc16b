"""
Pytest configuration and shared fixtures.

Grids are written as ASCII: '#' wall, '.' empty, 'S' start, 'E' end.
"""

import os

import pytest

from pathlab.core.grid import Grid

# pygame-backed tests never open a real window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def open_grid() -> Grid:
    """5x5 grid, start in the top-left corner, end in the bottom-right."""
    return Grid.from_ascii([
        "S....",
        ".....",
        ".....",
        ".....",
        "....E",
    ])


@pytest.fixture
def gap_grid() -> Grid:
    """3x3 grid with a wall column at col 1, open only at (2, 1)."""
    return Grid.from_ascii([
        "S#E",
        ".#.",
        "...",
    ])


@pytest.fixture
def split_grid() -> Grid:
    """Start and end separated by a full wall column."""
    return Grid.from_ascii([
        "S.#..",
        "..#.E",
        "..#..",
    ])
