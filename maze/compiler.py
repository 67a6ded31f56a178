"""
Grid-to-graph compiler.

Purpose: Turn maze text into a Grid and an undirected 4-connected Graph.

Inputs:
    - Text rows (walls '*', open ' ', start 'A', goal 'B'; other chars are open)
    - Compiler config (symbols, validation rules)

Outputs:
    - (Grid, Graph) tuple
    - MissingEndpointError / EmptyGridError on invalid grids

Params:
    symbols: dict - Symbol table for wall/start/goal
    reject_empty: bool - Raise EmptyGridError on zero rows or columns
    duplicate_endpoints: str - 'first' or 'last' start/goal capture rule
"""

import logging
from typing import Dict, Iterable, Optional, Tuple

import numpy as np

from maze.errors import EmptyGridError, MissingEndpointError
from maze.graph import Graph, Node
from maze.grid import CellType, Grid

logger = logging.getLogger(__name__)

# Probe order: up, down, left, right
DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


class MazeCompiler:
    """Compiles maze text into a graph of passable cells."""

    def __init__(self, symbols: Optional[Dict[str, str]] = None, reject_empty: bool = True,
                 duplicate_endpoints: str = "first"):
        """
        Initialize compiler.

        Args:
            symbols: Symbol table overriding the grid defaults
            reject_empty: Raise EmptyGridError for zero-sized grids
            duplicate_endpoints: Start/goal capture rule passed to Graph
        """
        self.symbols = symbols
        self.reject_empty = reject_empty
        self.duplicate_endpoints = duplicate_endpoints

    @classmethod
    def from_config(cls, config: Dict) -> "MazeCompiler":
        """Build a compiler from a loaded config dictionary."""
        validation = config.get("validation", {})
        return cls(
            symbols=config.get("symbols"),
            reject_empty=validation.get("reject_empty", True),
            duplicate_endpoints=validation.get("duplicate_endpoints", "first"),
        )

    def compile(self, lines: Iterable[str]) -> Tuple[Grid, Graph]:
        """
        Compile text rows into a grid and graph.

        Args:
            lines: Maze rows

        Returns:
            (grid, graph)

        Raises:
            EmptyGridError: grid has zero rows or columns (if reject_empty)
            MissingEndpointError: no start or no goal cell
        """
        grid = Grid.from_lines(lines, self.symbols)
        return grid, self.compile_grid(grid)

    def compile_file(self, path) -> Tuple[Grid, Graph]:
        grid = Grid.from_file(path, self.symbols)
        return grid, self.compile_grid(grid)

    def compile_grid(self, grid: Grid) -> Graph:
        """Validate a grid and build its graph."""
        self._validate(grid)

        graph = Graph(duplicate_endpoints=self.duplicate_endpoints)

        # Step 1: one node per non-wall cell, ids in row-major order
        node_ids = np.full(grid.shape, -1, dtype=int)
        next_id = 0
        for r, c, cell_type in grid.iter_cells():
            if cell_type is CellType.WALL:
                continue
            graph.add_node(Node(next_id, r, c, cell_type))
            node_ids[r, c] = next_id
            next_id += 1

        # Step 2: wire 4-connected neighbors
        for r, c, cell_type in grid.iter_cells():
            if cell_type is CellType.WALL:
                continue
            current = int(node_ids[r, c])
            for dr, dc in DIRECTIONS:
                nr, nc = r + dr, c + dc
                if not grid.in_bounds(nr, nc):
                    continue
                if grid.is_wall(nr, nc):
                    continue
                graph.add_edge(current, int(node_ids[nr, nc]))

        logger.debug(
            f"Compiled {grid.rows}x{grid.cols} grid: "
            f"{graph.node_count()} nodes, {graph.edge_count()} edges"
        )
        return graph

    def _validate(self, grid: Grid):
        if self.reject_empty and grid.is_empty():
            raise EmptyGridError(grid.rows, grid.cols)

        missing = []
        if not grid.find(CellType.START):
            missing.append("start")
        if not grid.find(CellType.GOAL):
            missing.append("goal")
        if missing:
            raise MissingEndpointError(missing)


def compile_maze(lines: Iterable[str], config: Optional[Dict] = None) -> Tuple[Grid, Graph]:
    """Compile maze rows with the given (or default) config."""
    compiler = MazeCompiler.from_config(config) if config else MazeCompiler()
    return compiler.compile(lines)


def compile_file(path, config: Optional[Dict] = None) -> Tuple[Grid, Graph]:
    """Compile a maze text file with the given (or default) config."""
    compiler = MazeCompiler.from_config(config) if config else MazeCompiler()
    return compiler.compile_file(path)
