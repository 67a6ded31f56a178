"""
Validation errors raised while compiling a maze.

Purpose: Report grids that cannot be turned into a usable graph.

Outputs:
    - MazeValidationError base class with a machine-readable `kind`
    - MissingEndpointError: start and/or goal cell absent
    - EmptyGridError: zero rows or zero columns
"""

from typing import Sequence


class MazeValidationError(ValueError):
    """Base class for grid validation failures."""

    kind = "invalid"


class MissingEndpointError(MazeValidationError):
    """Raised when the grid has no start cell or no goal cell."""

    kind = "missing_endpoint"

    def __init__(self, missing: Sequence[str]):
        self.missing = tuple(missing)
        super().__init__(
            f"Maze must contain a start and a goal cell (missing: {', '.join(self.missing)})"
        )


class EmptyGridError(MazeValidationError):
    """Raised when the grid has zero rows or zero columns."""

    kind = "empty_grid"

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(f"Maze grid is empty ({rows}x{cols})")
