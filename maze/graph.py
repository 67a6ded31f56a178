"""
Undirected maze graph.

Purpose: Node registry plus ordered adjacency lists; tracks the start and
         goal nodes; entry point for traversal algorithms and matrix views.

Inputs:
    - Nodes registered by the compiler (row-major creation order)
    - Undirected edges between registered node ids

Outputs:
    - Ordered neighbor lists, node lookups, counts
    - Traversal/search results as lists of node ids
    - Adjacency and incidence matrices

Params:
    duplicate_endpoints: str - 'first' keeps the first start/goal registered,
                               'last' keeps the most recent one
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from maze.grid import CellType

logger = logging.getLogger(__name__)


class Node:
    """Graph vertex for one non-wall grid cell.

    id, row and col are fixed at construction; only cell_type may change.
    Compared by identity. Use same_position() for positional comparison
    across separately compiled graphs.
    """

    def __init__(self, id: int, row: int, col: int, cell_type: CellType = CellType.OPEN):
        self._id = id
        self._row = row
        self._col = col
        self.cell_type = cell_type

    @property
    def id(self) -> int:
        return self._id

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def position(self) -> Tuple[int, int]:
        return self._row, self._col

    def same_position(self, other: "Node") -> bool:
        return self.position == other.position

    def __repr__(self) -> str:
        return f"Node(id={self.id}, row={self.row}, col={self.col}, type={self.cell_type.name})"


class Graph:
    """Undirected graph with insertion-ordered adjacency lists."""

    def __init__(self, duplicate_endpoints: str = "first"):
        """
        Initialize an empty graph.

        Args:
            duplicate_endpoints: 'first' or 'last' capture rule for start/goal
        """
        if duplicate_endpoints not in ("first", "last"):
            raise ValueError(f"Unknown duplicate_endpoints rule: {duplicate_endpoints}")
        self.duplicate_endpoints = duplicate_endpoints

        self._nodes: Dict[int, Node] = {}
        self._adjacency: Dict[int, List[int]] = {}
        self._start: Optional[Node] = None
        self._goal: Optional[Node] = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_node(self, node: Node):
        """Register a node; no-op if its id is already present."""
        if node.id in self._nodes:
            return

        self._nodes[node.id] = node
        self._adjacency[node.id] = []

        if node.cell_type is CellType.START:
            self._start = self._capture_endpoint(self._start, node, "start")
        elif node.cell_type is CellType.GOAL:
            self._goal = self._capture_endpoint(self._goal, node, "goal")

    def _capture_endpoint(self, current: Optional[Node], node: Node, label: str) -> Node:
        if current is None:
            return node
        logger.warning(
            f"Duplicate {label} cell at {node.position} (already have {current.position}); "
            f"keeping {self.duplicate_endpoints}"
        )
        return current if self.duplicate_endpoints == "first" else node

    def add_edge(self, a: int, b: int):
        """Add an undirected edge; ignored if either id is unregistered."""
        if a not in self._nodes or b not in self._nodes:
            return

        neighbors = self._adjacency[a]
        if b not in neighbors:
            neighbors.append(b)
        neighbors = self._adjacency[b]
        if a not in neighbors:
            neighbors.append(a)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def neighbors(self, node_id: int) -> List[int]:
        """Neighbor ids in stored order; empty list for unknown ids."""
        return list(self._adjacency.get(node_id, ()))

    def node(self, node_id: int) -> Optional[Node]:
        return self._nodes.get(node_id)

    def has_node(self, node_id: int) -> bool:
        return node_id in self._nodes

    def nodes(self) -> Iterator[Node]:
        """Nodes in creation order."""
        return iter(self._nodes.values())

    def node_ids(self) -> List[int]:
        return list(self._nodes)

    def node_at(self, row: int, col: int) -> Optional[Node]:
        """Find the node at a grid position (linear scan)."""
        for node in self._nodes.values():
            if node.row == row and node.col == col:
                return node
        return None

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return sum(len(n) for n in self._adjacency.values()) // 2

    def start(self) -> Optional[Node]:
        return self._start

    def goal(self) -> Optional[Node]:
        return self._goal

    def adjacency_lists(self) -> Dict[int, List[int]]:
        """Copy of the adjacency lists, keyed in creation order."""
        return {node_id: list(n) for node_id, n in self._adjacency.items()}

    def positions(self, node_ids) -> List[Tuple[int, int]]:
        """Grid positions for a sequence of ids (unknown ids skipped)."""
        return [self._nodes[i].position for i in node_ids if i in self._nodes]

    def describe(self) -> str:
        """Multi-line text summary: counts, then one line per node."""
        lines = [f"Graph with {self.node_count()} nodes and {self.edge_count()} edges"]
        for node_id, neighbors in self._adjacency.items():
            node = self._nodes[node_id]
            lines.append(f"Node {node_id} {node.position} {node.cell_type.name} -> {neighbors}")
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def shortest_path(self, origin: int, goal: int) -> List[int]:
        """Minimum-edge path from origin to goal; empty if none exists."""
        from nav.shortest_path import ShortestPathPlanner
        return ShortestPathPlanner(self).plan(origin, goal)

    def dfs_preorder(self, start: int) -> List[int]:
        from nav.dfs import DFSTraversal
        return DFSTraversal(self).preorder(start)

    def dfs_inorder(self, start: int) -> List[int]:
        from nav.dfs import DFSTraversal
        return DFSTraversal(self).inorder(start)

    def dfs_postorder(self, start: int) -> List[int]:
        from nav.dfs import DFSTraversal
        return DFSTraversal(self).postorder(start)

    def bfs(self, start: int) -> List[int]:
        from nav.bfs import BFSTraversal
        return BFSTraversal(self).traverse(start)

    def greedy(self, start: int, goal: int) -> List[int]:
        """Greedy best-first visitation order from start towards goal."""
        from nav.greedy import GreedyBestFirstPlanner
        return GreedyBestFirstPlanner(self).plan(start, goal)

    # ------------------------------------------------------------------
    # Matrix views
    # ------------------------------------------------------------------

    def matrices(self):
        from maze.matrices import GraphMatrices
        return GraphMatrices(self)

    def adjacency_matrix(self) -> np.ndarray:
        return self.matrices().adjacency()

    def incidence_matrix(self) -> np.ndarray:
        return self.matrices().incidence()

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
