import numpy as np
import pytest

from cellkit.ui.widgets import Grid, GridError, Label, GRID_H, GRID_V, GRID_B


def test_grid_exact_columns():
    left, right = Label("a"), Label("b")
    grid = Grid(1, 2)
    grid.set_columns(10, -1)
    grid.add(0, 0, left).add(0, 1, right)
    grid.set_bounds(0, 0, 40, 1)
    grid.layout()

    assert grid.widths == [10, 29]
    assert right.bounds().as_tuple() == (11, 0, 29, 1)

def test_spanning_cell_bounds():
    grid = Grid(2, 3)
    grid.set_columns(4, 5, 6)
    grid.set_rows(1, 2)
    wide = Label("wide")
    corner = Label("c")
    grid.add(0, 0, wide, row_span=2, column_span=2)
    grid.add(0, 2, corner)
    grid.set_bounds(0, 0, 17, 4)
    grid.layout()

    assert wide.bounds().as_tuple() == (0, 0, 10, 4)
    assert corner.bounds().as_tuple() == (11, 0, 6, 1)
    assert grid.hint() == (17, 4)

def test_auto_tracks_use_cell_hints():
    grid = Grid(1, 2)
    grid.add(0, 0, Label("abc")).add(0, 1, Label("de"))
    assert grid.hint() == (3 + 1 + 2, 1)

def test_separators_cleared_inside_span():
    grid = Grid(3, 3)
    assert (grid.separators == GRID_B).all()

    grid.add(0, 0, Label(), row_span=2, column_span=2)
    sep = grid.separators
    assert sep[0, 0] == 0
    assert sep[0, 1] == GRID_V
    assert sep[1, 0] == GRID_H
    assert sep[1, 1] == GRID_B
    assert sep[2, 2] == GRID_B

def test_separators_read_only():
    grid = Grid(2, 2)
    with pytest.raises(ValueError):
        grid.separators[0, 0] = 0

def test_remove_child_restores_lines():
    grid = Grid(2, 2)
    label = Label()
    grid.add(0, 0, label, column_span=2)
    grid.remove_child(label)
    assert label.parent is None
    assert grid.children == []
    assert np.array_equal(grid.separators, np.full((2, 2), GRID_B))
    # The footprint is free again
    grid.add(0, 1, Label())

def test_invalid_placement():
    grid = Grid(2, 2)
    grid.add(0, 0, Label())
    with pytest.raises(GridError):
        grid.add(0, 0, Label())                 # overlap
    with pytest.raises(GridError):
        grid.add(1, 0, Label(), column_span=3)  # out of bounds
    with pytest.raises(GridError):
        grid.add(-1, 0, Label())
    with pytest.raises(GridError):
        grid.add(1, 1, Label(), row_span=0)
    assert len(grid.cells) == 1

def test_invalid_configuration():
    with pytest.raises(GridError):
        Grid(0, 2)
    grid = Grid(2, 2)
    with pytest.raises(GridError):
        grid.set_columns(1, 2, 3)
    with pytest.raises(GridError):
        grid.set_rows(1)
    assert grid.column_hints == (-1, -1)

def test_add_reparents():
    label = Label()
    first, second = Grid(1, 1), Grid(1, 1)
    first.add(0, 0, label)
    second.add(0, 0, label)
    assert label.parent is second
    assert first.children == []

def test_move_within_grid():
    grid = Grid(2, 2)
    label = Label()
    grid.add(0, 0, label)
    grid.add(1, 1, label)
    assert [(c.row, c.column) for c in grid.cells] == [(1, 1)]
    with pytest.raises(GridError):
        grid.add(1, 1, Label())
    grid.add(0, 0, Label())

def test_move_spanning_cell_onto_own_footprint():
    grid = Grid(1, 3)
    label = Label()
    grid.add(0, 0, label, column_span=2)
    grid.add(0, 1, label, column_span=2)
    assert [(c.column, c.column_span) for c in grid.cells] == [(1, 2)]
    # Column 0 is free again, the line between 1 and 2 is gone
    assert grid.separators[0, 0] == GRID_B
    assert grid.separators[0, 1] == GRID_H
    grid.add(0, 0, Label())

def test_add_child_needs_position():
    grid = Grid(2, 2)
    label = Label("x")
    with pytest.raises(GridError):
        grid.add_child(label)
    assert label.parent is None
    assert grid.children == []
