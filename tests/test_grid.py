"""Tests for the Grid module."""

import numpy as np
import pytest

from term_snake.grid import CellType, Grid


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.width == 20
        assert grid.height == 14
        assert grid.capacity == 280

    def test_custom_dimensions(self):
        grid = Grid(width=10, height=8)
        assert grid.cells.shape == (8, 10)

    def test_dimensions_must_be_positive(self):
        with pytest.raises(ValueError, match="positive"):
            Grid(width=0, height=4)
        with pytest.raises(ValueError, match="positive"):
            Grid(width=4, height=-1)

    def test_all_cells_start_empty(self):
        grid = Grid(width=5, height=5)
        assert np.all(grid.cells == CellType.EMPTY)


class TestGridOperations:
    def test_set_uses_xy(self):
        grid = Grid(width=5, height=3)
        grid.set(4, 1, CellType.SNAKE)
        assert grid.cells[1, 4] == CellType.SNAKE

    def test_in_bounds(self):
        grid = Grid(width=5, height=3)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(4, 2)
        assert not grid.in_bounds(-1, 0)
        assert not grid.in_bounds(0, -1)
        assert not grid.in_bounds(5, 0)
        assert not grid.in_bounds(0, 3)

    def test_clear(self):
        grid = Grid(width=5, height=5)
        grid.set(0, 0, CellType.SNAKE)
        grid.set(1, 1, CellType.APPLE)
        grid.clear()
        assert np.all(grid.cells == CellType.EMPTY)


class TestGridProjection:
    def test_project_marks_snake_and_apple(self):
        grid = Grid(width=5, height=5)
        cells = grid.project([(1, 1), (2, 1)], (4, 4))
        assert cells is grid.cells
        assert grid.cells[1, 1] == CellType.SNAKE
        assert grid.cells[1, 2] == CellType.SNAKE
        assert grid.cells[4, 4] == CellType.APPLE
        assert np.count_nonzero(grid.cells == CellType.EMPTY) == 22

    def test_project_replaces_previous_frame(self):
        grid = Grid(width=5, height=5)
        grid.project([(0, 0)], (3, 3))
        grid.project([(1, 0)], None)
        assert grid.cells[0, 0] == CellType.EMPTY
        assert grid.cells[3, 3] == CellType.EMPTY
        assert np.count_nonzero(grid.cells == CellType.SNAKE) == 1
        assert np.count_nonzero(grid.cells == CellType.APPLE) == 0

    def test_segment_wins_over_apple(self):
        grid = Grid(width=5, height=5)
        grid.project([(2, 2)], (2, 2))
        assert grid.cells[2, 2] == CellType.SNAKE

    def test_out_of_bounds_segments_skipped(self):
        grid = Grid(width=5, height=5)
        grid.project([(0, 2), (-1, 2)], None)
        assert np.count_nonzero(grid.cells == CellType.SNAKE) == 1


class TestGridSerialization:
    def test_to_dict(self):
        grid = Grid(width=4, height=3)
        grid.set(1, 2, CellType.APPLE)
        d = grid.to_dict()
        assert d["width"] == 4
        assert d["height"] == 3
        assert len(d["cells"]) == 3
        assert len(d["cells"][0]) == 4
        assert d["cells"][2][1] == CellType.APPLE
