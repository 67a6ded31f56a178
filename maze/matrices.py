"""
Matrix views of a maze graph.

Purpose: Derive dense adjacency (N x N) and incidence (N x E) matrices
         from the graph's adjacency lists, plus sparse variants.

Inputs:
    - Graph (nodes in creation order, ordered adjacency lists)

Outputs:
    - id -> matrix index mapping
    - Adjacency matrix (binary, symmetric)
    - Incidence matrix (one column per undirected edge, two 1s per column)
    - Edge list giving the (min id, max id) pair behind each incidence column

Note:
    Incidence columns follow discovery order: nodes in index order, each
    node's neighbors in stored order, first sighting of an unordered pair
    claims the next column. This is not edge insertion order.
"""

from typing import Dict, List, Tuple

import numpy as np
from scipy.sparse import csr_matrix


class GraphMatrices:
    """Adjacency and incidence matrices for a graph snapshot."""

    def __init__(self, graph):
        """
        Initialize matrix views.

        Args:
            graph: maze.graph.Graph
        """
        self.graph = graph
        self.index_map: Dict[int, int] = {
            node.id: index for index, node in enumerate(graph.nodes())
        }
        self.num_nodes = len(self.index_map)

    def edges(self) -> List[Tuple[int, int]]:
        """Undirected edges as (min id, max id), in incidence column order."""
        seen = set()
        edges = []
        for node_id in self.index_map:
            for neighbor in self.graph.neighbors(node_id):
                key = (min(node_id, neighbor), max(node_id, neighbor))
                if key in seen:
                    continue
                seen.add(key)
                edges.append(key)
        return edges

    def adjacency(self) -> np.ndarray:
        """N x N binary adjacency matrix."""
        matrix = np.zeros((self.num_nodes, self.num_nodes), dtype=np.uint8)
        for node_id, i in self.index_map.items():
            for neighbor in self.graph.neighbors(node_id):
                matrix[i, self.index_map[neighbor]] = 1
        return matrix

    def incidence(self) -> np.ndarray:
        """N x E binary incidence matrix."""
        edges = self.edges()
        matrix = np.zeros((self.num_nodes, len(edges)), dtype=np.uint8)
        for column, (a, b) in enumerate(edges):
            matrix[self.index_map[a], column] = 1
            matrix[self.index_map[b], column] = 1
        return matrix

    def adjacency_sparse(self) -> csr_matrix:
        """Adjacency matrix in CSR form (for scipy.sparse.csgraph)."""
        rows, cols = [], []
        for node_id, i in self.index_map.items():
            for neighbor in self.graph.neighbors(node_id):
                rows.append(i)
                cols.append(self.index_map[neighbor])
        data = np.ones(len(rows), dtype=np.uint8)
        return csr_matrix(
            (data, (np.array(rows, dtype=np.int64), np.array(cols, dtype=np.int64))),
            shape=(self.num_nodes, self.num_nodes),
        )

    def incidence_sparse(self) -> csr_matrix:
        """Incidence matrix in CSR form."""
        edges = self.edges()
        rows, cols = [], []
        for column, (a, b) in enumerate(edges):
            rows.extend([self.index_map[a], self.index_map[b]])
            cols.extend([column, column])
        data = np.ones(len(rows), dtype=np.uint8)
        return csr_matrix(
            (data, (np.array(rows, dtype=np.int64), np.array(cols, dtype=np.int64))),
            shape=(self.num_nodes, len(edges)),
        )

    @staticmethod
    def format(matrix: np.ndarray, title: str = "") -> str:
        """
        Fixed-width text table with row and column headers.

        Args:
            matrix: 2D array
            title: Optional heading line

        Returns:
            Multi-line string
        """
        n_rows, n_cols = matrix.shape
        lines = []
        if title:
            lines.append(f"=== {title} ===")
        lines.append(f"Dimension: {n_rows}x{n_cols}")
        lines.append("    " + "".join(f"{j:3d} " for j in range(n_cols)))
        for i in range(n_rows):
            lines.append(f"{i:3d} " + "".join(f"{int(v):3d} " for v in matrix[i]))
        return "\n".join(lines)
