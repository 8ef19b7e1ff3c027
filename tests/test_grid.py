"""Tests for grid models and CSV grid building."""

import pytest

from postfixsheet.grid import Grid, build_grid, split_rows


class TestSplitRows:
    """Test splitting CSV text into padded rows."""

    def test_rectangular_input(self):
        """Test rows and columns split on newlines and commas."""
        assert split_rows("1,2\n3,4") == [["1", "2"], ["3", "4"]]

    def test_ragged_rows_are_padded(self):
        """Test short rows are padded with empty strings to the widest row."""
        assert split_rows("1\n2,3,4\n5,6") == [
            ["1", "", ""],
            ["2", "3", "4"],
            ["5", "6", ""],
        ]

    def test_empty_input(self):
        """Test empty text has no rows."""
        assert split_rows("") == []

    def test_trailing_newline_adds_empty_row(self):
        """Test a trailing newline produces a final row of empty cells."""
        assert split_rows("1,2\n") == [["1", "2"], ["", ""]]

    def test_cell_text_is_kept_raw(self):
        """Test whitespace inside cells is preserved until evaluation."""
        assert split_rows(" 3  4 + ,\tA1") == [[" 3  4 + ", "\tA1"]]


class TestBuildGrid:
    """Test building grids."""

    def test_dimensions(self):
        """Test row and column counts follow the widest row."""
        grid = build_grid("1,2,3\n4")

        assert grid.row_count == 2
        assert grid.column_count == 3

    def test_cells_know_their_coordinates(self):
        """Test every cell records its own position and content."""
        grid = build_grid("a,b\nc,d")

        cell = grid.cell(1, 0)
        assert cell.row == 1
        assert cell.column == 0
        assert cell.content == "c"
        assert grid.cell(0, 1).content == "b"

    def test_padded_cells_are_empty(self):
        """Test padding cells have empty content."""
        grid = build_grid("1,2\n3")

        assert grid.cell(1, 1).content == ""

    def test_empty_input_builds_empty_grid(self):
        """Test empty text builds a 0x0 grid."""
        grid = build_grid("")

        assert grid.row_count == 0
        assert grid.column_count == 0
        assert list(grid.iter_cells()) == []


class TestGrid:
    """Test the Grid model."""

    def test_in_bounds(self):
        """Test bounds checks including negative positions."""
        grid = build_grid("1,2\n3,4")

        assert grid.in_bounds(0, 0) is True
        assert grid.in_bounds(1, 1) is True
        assert grid.in_bounds(2, 0) is False
        assert grid.in_bounds(0, 2) is False
        assert grid.in_bounds(-1, 0) is False

    def test_cell_outside_grid_raises(self):
        """Test accessing a cell outside the grid raises IndexError."""
        grid = build_grid("1")

        with pytest.raises(IndexError):
            grid.cell(-1, 0)

        with pytest.raises(IndexError):
            grid.cell(0, 1)

    def test_iter_cells_is_row_major(self):
        """Test cells iterate row by row."""
        grid = build_grid("a,b\nc,d")

        assert [cell.content for cell in grid.iter_cells()] == ["a", "b", "c", "d"]

    def test_default_grid_is_empty(self):
        """Test a grid built without rows."""
        assert Grid().row_count == 0
