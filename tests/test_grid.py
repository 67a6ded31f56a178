"""Tests for the grid model."""

import numpy as np

from maze.grid import CellType, Grid


class TestFromLines:
    """Tests for building grids from text rows."""

    def test_dimensions_use_longest_row(self):
        """Columns should equal the longest row length."""
        grid = Grid.from_lines(["A", "  B", ""])
        assert grid.shape == (3, 3)

    def test_short_rows_padded_with_open_cells(self):
        """Missing cells should be open."""
        grid = Grid.from_lines(["A", "**B"])
        assert grid.cell_type(0, 1) is CellType.OPEN
        assert grid.cell_type(0, 2) is CellType.OPEN
        assert grid.lines() == ["A  ", "**B"]

    def test_line_terminators_stripped(self):
        """Trailing newlines should not become cells."""
        grid = Grid.from_lines(["A \r\n", " B\n"])
        assert grid.shape == (2, 2)

    def test_empty_input(self):
        """No rows should give an empty grid."""
        grid = Grid.from_lines([])
        assert grid.shape == (0, 0)
        assert grid.is_empty()

    def test_from_file(self, tmp_path):
        """Reading a file should keep trailing spaces."""
        path = tmp_path / "maze.txt"
        path.write_text("A  \n * \n  B\n", encoding="utf-8")
        grid = Grid.from_file(path)
        assert grid.shape == (3, 3)
        assert grid.lines() == ["A  ", " * ", "  B"]


class TestCellTypes:
    """Tests for cell classification."""

    def test_symbols(self):
        """Default symbols map to their cell types."""
        grid = Grid.from_lines(["*A B"])
        assert grid.cell_type(0, 0) is CellType.WALL
        assert grid.cell_type(0, 1) is CellType.START
        assert grid.cell_type(0, 2) is CellType.OPEN
        assert grid.cell_type(0, 3) is CellType.GOAL

    def test_unknown_characters_are_open(self):
        """Any other character should be passable."""
        grid = Grid.from_lines(["A.#xB"])
        assert [grid.cell_type(0, c) for c in range(1, 4)] == [CellType.OPEN] * 3

    def test_custom_symbols(self):
        """Symbol table can be overridden."""
        grid = Grid.from_lines(["S#G"], {"wall": "#", "start": "S", "goal": "G"})
        assert grid.cell_type(0, 0) is CellType.START
        assert grid.cell_type(0, 1) is CellType.WALL
        assert grid.cell_type(0, 2) is CellType.GOAL

    def test_find_row_major(self):
        """find() returns positions in row-major order."""
        grid = Grid.from_lines(["A *", "*A ", "  B"])
        assert grid.find(CellType.START) == [(0, 0), (1, 1)]
        assert grid.find(CellType.WALL) == [(0, 2), (1, 0)]

    def test_iter_cells_order(self):
        """iter_cells walks rows first, then columns."""
        grid = Grid.from_lines(["AB", "**"])
        positions = [(r, c) for r, c, _ in grid.iter_cells()]
        assert positions == [(0, 0), (0, 1), (1, 0), (1, 1)]


class TestViews:
    """Tests for derived grid views."""

    def test_occupancy(self):
        """Occupancy marks walls with 1."""
        grid = Grid.from_lines(["A*", "*B"])
        expected = np.array([[0, 1], [1, 0]], dtype=np.uint8)
        assert np.array_equal(grid.occupancy(), expected)

    def test_overlay_keeps_endpoints(self):
        """Overlay marks cells but leaves A and B visible."""
        grid = Grid.from_lines(["A  ", " * ", "  B"])
        rows = grid.overlay([(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)], mark=".")
        assert rows == ["A  ", ".* ", "..B"]
        # original grid untouched
        assert grid.lines() == ["A  ", " * ", "  B"]

    def test_in_bounds(self):
        grid = Grid.from_lines(["AB"])
        assert grid.in_bounds(0, 1)
        assert not grid.in_bounds(1, 0)
        assert not grid.in_bounds(0, -1)
