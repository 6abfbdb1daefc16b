import pytest

from pathlab.core.errors import OutOfBounds
from pathlab.core.grid import Grid
from pathlab.core.types import CellKind


def test_new_grid_is_empty() -> None:
    grid = Grid(3, 4)
    assert grid.kind_at((2, 3)) is CellKind.EMPTY
    assert grid.start is None and grid.end is None
    assert list(grid.walls()) == []


def test_zero_sized_grid_is_rejected() -> None:
    with pytest.raises(ValueError):
        Grid(0, 5)


def test_kind_at_out_of_bounds_raises() -> None:
    grid = Grid(3, 3)
    with pytest.raises(OutOfBounds) as info:
        grid.kind_at((3, 0))
    assert info.value.cell == (3, 0)
    with pytest.raises(IndexError):
        grid.kind_at((0, -1))


def test_set_kind_out_of_bounds_raises() -> None:
    grid = Grid(3, 3)
    with pytest.raises(OutOfBounds):
        grid.set_kind((5, 5), CellKind.WALL)


def test_new_start_clears_previous_start() -> None:
    grid = Grid(3, 3)
    grid.set_kind((0, 0), CellKind.START)
    grid.set_kind((2, 2), CellKind.START)
    assert grid.start == (2, 2)
    assert grid.kind_at((0, 0)) is CellKind.EMPTY
    assert grid.kind_at((2, 2)) is CellKind.START


def test_new_end_clears_previous_end() -> None:
    grid = Grid(3, 3)
    grid.set_kind((0, 2), CellKind.END)
    grid.set_kind((1, 1), CellKind.END)
    assert grid.end == (1, 1)
    assert grid.kind_at((0, 2)) is CellKind.EMPTY


def test_overwriting_endpoint_unsets_it() -> None:
    grid = Grid(3, 3)
    grid.set_kind((0, 0), CellKind.START)
    grid.set_kind((0, 0), CellKind.END)
    assert grid.start is None
    assert grid.end == (0, 0)
    grid.set_kind((0, 0), CellKind.WALL)
    assert grid.end is None


def test_toggle_wall_flips_empty_and_wall() -> None:
    grid = Grid(2, 2)
    assert grid.toggle_wall((1, 1)) is True
    assert grid.kind_at((1, 1)) is CellKind.WALL
    assert grid.toggle_wall((1, 1)) is True
    assert grid.kind_at((1, 1)) is CellKind.EMPTY


def test_toggle_wall_rejected_on_endpoints(gap_grid: Grid) -> None:
    assert gap_grid.toggle_wall((0, 0)) is False
    assert gap_grid.toggle_wall((0, 2)) is False
    assert gap_grid.kind_at((0, 0)) is CellKind.START
    assert gap_grid.kind_at((0, 2)) is CellKind.END


def test_is_traversable(gap_grid: Grid) -> None:
    assert gap_grid.is_traversable((0, 0))
    assert gap_grid.is_traversable((2, 1))
    assert not gap_grid.is_traversable((0, 1))
    assert not gap_grid.is_traversable((-1, 0))
    assert not gap_grid.is_traversable((0, 3))


def test_neighbors4_skip_walls_and_edges(gap_grid: Grid) -> None:
    assert gap_grid.neighbors4((0, 0)) == [(1, 0)]
    assert gap_grid.neighbors4((2, 1)) == [(2, 0), (2, 2)]
    assert gap_grid.neighbors4((1, 2)) == [(0, 2), (2, 2)]


def test_from_ascii_sets_endpoints(gap_grid: Grid) -> None:
    assert gap_grid.start == (0, 0)
    assert gap_grid.end == (0, 2)
    assert sorted(gap_grid.walls()) == [(0, 1), (1, 1)]


def test_from_cells_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError):
        Grid.from_cells([[0, 0], [0]])


def test_cells_round_trip_keeps_kinds(gap_grid: Grid) -> None:
    rebuilt = Grid.from_cells(gap_grid.to_cells())
    assert rebuilt.to_cells() == [[2, 1, 3], [0, 1, 0], [0, 0, 0]]
    assert rebuilt.start == gap_grid.start
    assert rebuilt.end == gap_grid.end


def test_clear_walls_keeps_endpoints(gap_grid: Grid) -> None:
    gap_grid.clear_walls()
    assert list(gap_grid.walls()) == []
    assert gap_grid.start == (0, 0)
    assert gap_grid.end == (0, 2)


def test_clear_resets_everything(gap_grid: Grid) -> None:
    gap_grid.clear()
    assert gap_grid.start is None and gap_grid.end is None
    assert all(k is CellKind.EMPTY for row in gap_grid.cells for k in row)


def test_copy_is_independent(gap_grid: Grid) -> None:
    clone = gap_grid.copy()
    clone.toggle_wall((2, 1))
    assert gap_grid.kind_at((2, 1)) is CellKind.EMPTY
    assert clone.kind_at((2, 1)) is CellKind.WALL
