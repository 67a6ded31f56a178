"""
Pytest configuration and shared fixtures.

Maze layouts used across the suite. Node ids are assigned row-major over
non-wall cells, so for RING_MAZE:

    A  ->   0 1 2
     *  ->  3 * 4
      B ->  5 6 7
"""

from pathlib import Path

import numpy as np
import pytest

from maze.compiler import compile_maze


RING_MAZE = ["A  ", " * ", "  B"]

OPEN_MAZE = ["A  ", "   ", "  B"]


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def ring_graph():
    """Eight open cells around a single wall; start id 0, goal id 7."""
    _, graph = compile_maze(RING_MAZE)
    return graph


@pytest.fixture
def open_graph():
    """Fully open 3x3 grid; start id 0, goal id 8."""
    _, graph = compile_maze(OPEN_MAZE)
    return graph


def random_maze(seed: int, rows: int = 8, cols: int = 10, wall_prob: float = 0.3):
    """Random wall layout with A top-left and B bottom-right."""
    rng = np.random.default_rng(seed)
    walls = rng.random((rows, cols)) < wall_prob
    lines = []
    for r in range(rows):
        lines.append("".join("*" if walls[r, c] else " " for c in range(cols)))
    lines[0] = "A" + lines[0][1:]
    lines[-1] = lines[-1][:-1] + "B"
    return lines


@pytest.fixture(params=range(6))
def random_graph(request):
    """Compiled random maze (several seeds)."""
    _, graph = compile_maze(random_maze(request.param))
    return graph
