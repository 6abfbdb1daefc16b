import pytest

from pathlab.core.errors import InvariantViolation, Unreachable
from pathlab.core.grid import Grid
from pathlab.core.path import is_valid_path, reconstruct_path


def test_reconstruct_returns_start_to_end() -> None:
    predecessor = {(0, 1): (0, 0), (1, 1): (0, 1), (1, 2): (1, 1)}
    assert reconstruct_path(predecessor, (0, 0), (1, 2)) == [(0, 0), (0, 1), (1, 1), (1, 2)]


def test_start_equals_end_is_single_cell() -> None:
    assert reconstruct_path({}, (2, 2), (2, 2)) == [(2, 2)]


def test_unreached_end_raises() -> None:
    with pytest.raises(Unreachable):
        reconstruct_path({(0, 1): (0, 0)}, (0, 0), (3, 3))


def test_cycle_is_detected() -> None:
    predecessor = {(0, 1): (0, 2), (0, 2): (0, 1)}
    with pytest.raises(InvariantViolation):
        reconstruct_path(predecessor, (0, 0), (0, 1))


def test_broken_chain_is_detected() -> None:
    predecessor = {(0, 2): (0, 1)}
    with pytest.raises(InvariantViolation):
        reconstruct_path(predecessor, (0, 0), (0, 2))


def test_walk_is_capped() -> None:
    predecessor = {(0, i + 1): (0, i) for i in range(10)}
    with pytest.raises(InvariantViolation):
        reconstruct_path(predecessor, (0, 0), (0, 10), limit=5)
    assert len(reconstruct_path(predecessor, (0, 0), (0, 10), limit=11)) == 11


def test_is_valid_path(gap_grid: Grid) -> None:
    good = [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2)]
    assert is_valid_path(good, gap_grid)
    assert not is_valid_path([], gap_grid)
    assert not is_valid_path([(0, 0), (0, 1), (0, 2)], gap_grid)           # through a wall
    assert not is_valid_path([(0, 0), (1, 0), (2, 0), (2, 2)], gap_grid)   # skips a cell
    assert not is_valid_path(good[:-1], gap_grid)                          # stops short
