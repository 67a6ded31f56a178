"""
Map utilities for navigation.

Purpose: Shortest-path baseline computed independently of the BFS planner,
         used for the efficiency metric and for cross-checking results.

Inputs:
    - Maze graph
    - Start and goal node ids

Outputs:
    - Shortest path length in edges (inf if unreachable)
"""

import numpy as np
from scipy.sparse.csgraph import shortest_path


def shortest_path_baseline(graph, start: int, goal: int) -> float:
    """
    Compute shortest path length using scipy on the sparse adjacency matrix.

    Args:
        graph: maze.graph.Graph
        start: Start node id
        goal: Goal node id

    Returns:
        float: Number of edges on a shortest path, or inf
    """
    matrices = graph.matrices()
    if start not in matrices.index_map or goal not in matrices.index_map:
        return float('inf')

    adjacency = matrices.adjacency_sparse()
    dist = shortest_path(
        adjacency,
        directed=False,
        unweighted=True,
        indices=matrices.index_map[start],
    )
    length = dist[matrices.index_map[goal]]
    return float(length) if np.isfinite(length) else float('inf')


def reachable_count(graph, start: int) -> int:
    """Number of nodes in the component containing start (0 for unknown ids)."""
    matrices = graph.matrices()
    if start not in matrices.index_map:
        return 0
    dist = shortest_path(
        matrices.adjacency_sparse(),
        directed=False,
        unweighted=True,
        indices=matrices.index_map[start],
    )
    return int(np.isfinite(dist).sum())
