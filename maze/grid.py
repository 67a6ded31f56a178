"""
Grid model for maze text.

Purpose: Hold the raw character buffer of a maze plus its dimensions,
         classify cells, and provide row-major iteration.

Inputs:
    - Ordered sequence of text lines (rows), possibly of unequal length
    - Symbol table (wall, start, goal)

Outputs:
    - Character grid (numpy array of single characters, shape rows x cols)
    - Cell classification (Wall, Open, Start, Goal)
    - Occupancy grid (numpy array: 0=passable, 1=wall)

Params:
    symbols: dict - {'wall': '*', 'start': 'A', 'goal': 'B'}
"""

from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np


OPEN_SYMBOL = " "

DEFAULT_SYMBOLS = {
    "wall": "*",
    "start": "A",
    "goal": "B",
}


class CellType(Enum):
    """Grid cell classification."""
    WALL = "WALL"
    OPEN = "OPEN"
    START = "START"
    GOAL = "GOAL"


class Grid:
    """Rectangular character grid, right-padded with open cells."""

    def __init__(self, cells: np.ndarray, symbols: Optional[Dict[str, str]] = None):
        """
        Initialize grid.

        Args:
            cells: 2D numpy array of single characters (rows x cols)
            symbols: Symbol table overriding DEFAULT_SYMBOLS
        """
        self.cells = cells
        self.rows, self.cols = cells.shape
        self.symbols = dict(DEFAULT_SYMBOLS)
        if symbols:
            self.symbols.update(symbols)

        self._types = {
            self.symbols["wall"]: CellType.WALL,
            self.symbols["start"]: CellType.START,
            self.symbols["goal"]: CellType.GOAL,
        }

    @classmethod
    def from_lines(cls, lines: Iterable[str], symbols: Optional[Dict[str, str]] = None) -> "Grid":
        """
        Build a grid from text rows.

        Rows shorter than the longest one are padded with open cells.

        Args:
            lines: Text rows, without line terminators
            symbols: Symbol table overriding DEFAULT_SYMBOLS

        Returns:
            Grid instance
        """
        rows = [line.rstrip("\r\n") for line in lines]
        width = max((len(row) for row in rows), default=0)

        cells = np.full((len(rows), width), OPEN_SYMBOL, dtype="<U1")
        for r, row in enumerate(rows):
            for c, ch in enumerate(row):
                cells[r, c] = ch

        return cls(cells, symbols)

    @classmethod
    def from_file(cls, path, symbols: Optional[Dict[str, str]] = None) -> "Grid":
        """Read a maze text file; one line per grid row."""
        text = Path(path).read_text(encoding="utf-8")
        return cls.from_lines(text.splitlines(), symbols)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def is_empty(self) -> bool:
        return self.rows == 0 or self.cols == 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def char_at(self, row: int, col: int) -> str:
        return str(self.cells[row, col])

    def cell_type(self, row: int, col: int) -> CellType:
        """Classify a cell; unknown characters count as open."""
        return self._types.get(self.char_at(row, col), CellType.OPEN)

    def is_wall(self, row: int, col: int) -> bool:
        return self.cell_type(row, col) is CellType.WALL

    def iter_cells(self) -> Iterator[Tuple[int, int, CellType]]:
        """Yield (row, col, cell_type) in row-major order."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c, self.cell_type(r, c)

    def find(self, cell_type: CellType) -> List[Tuple[int, int]]:
        """Return positions of all cells of the given type, row-major."""
        return [(r, c) for r, c, t in self.iter_cells() if t is cell_type]

    def occupancy(self) -> np.ndarray:
        """
        Occupancy grid of the maze.

        Returns:
            numpy array: 0=passable, 1=wall
        """
        return (self.cells == self.symbols["wall"]).astype(np.uint8)

    def lines(self) -> List[str]:
        """Text rows of the (padded) grid."""
        return ["".join(row) for row in self.cells.tolist()]

    def overlay(self, positions: Iterable[Tuple[int, int]], mark: str = "·") -> List[str]:
        """
        Text rows with the given positions marked.

        Start and goal cells keep their own symbols.

        Args:
            positions: (row, col) cells to mark
            mark: Single character used for marked cells

        Returns:
            List of text rows
        """
        marked = self.cells.copy()
        for r, c in positions:
            if self.cell_type(r, c) in (CellType.START, CellType.GOAL):
                continue
            marked[r, c] = mark
        return ["".join(row) for row in marked.tolist()]

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"
