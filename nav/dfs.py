"""
DFS (Depth-First Search) traversals.

Purpose: Preorder, inorder and postorder depth-first walks over the whole
         component reachable from a start node.

Inputs:
    - Maze graph (ordered adjacency lists)
    - Start node id

Outputs:
    - Node ids in the requested order, each at most once

Notes:
    Inorder generalizes binary-tree inorder to any degree: recurse into the
    first floor(degree/2) neighbors, emit the node, recurse into the rest.
    The walk is ITERATIVE (explicit stack of frames) to avoid the recursion
    limit on large mazes; each frame resumes its neighbor scan exactly where
    a recursive call would.
"""

from enum import Enum
from typing import List, Set


class DFSOrder(Enum):
    """Emission point of a node during the walk."""
    PREORDER = "PREORDER"
    INORDER = "INORDER"
    POSTORDER = "POSTORDER"


class DFSTraversal:
    """Depth-first traversals of a maze graph."""

    def __init__(self, graph):
        """
        Initialize traversal.

        Args:
            graph: maze.graph.Graph
        """
        self.graph = graph

    def preorder(self, start: int) -> List[int]:
        return self.walk(start, DFSOrder.PREORDER)

    def inorder(self, start: int) -> List[int]:
        return self.walk(start, DFSOrder.INORDER)

    def postorder(self, start: int) -> List[int]:
        return self.walk(start, DFSOrder.POSTORDER)

    def walk(self, start: int, order: DFSOrder) -> List[int]:
        """
        Depth-first walk from start.

        Args:
            start: Start node id
            order: DFSOrder emission rule

        Returns:
            Node ids reachable from start, or [] for unknown ids
        """
        if not self.graph.has_node(start):
            return []

        result: List[int] = []
        visited: Set[int] = set()
        stack = []  # frames: [node_id, neighbors, next_index]
        self._enter(start, order, stack, visited, result)

        while stack:
            frame = stack[-1]
            node_id, neighbors, index = frame

            if order is DFSOrder.INORDER and index == len(neighbors) // 2:
                result.append(node_id)

            if index < len(neighbors):
                frame[2] = index + 1
                neighbor = neighbors[index]
                if neighbor not in visited:
                    self._enter(neighbor, order, stack, visited, result)
                continue

            stack.pop()
            if order is DFSOrder.POSTORDER:
                result.append(node_id)

        return result

    def _enter(self, node_id: int, order: DFSOrder, stack: list, visited: Set[int],
               result: List[int]):
        visited.add(node_id)
        if order is DFSOrder.PREORDER:
            result.append(node_id)
        stack.append([node_id, self.graph.neighbors(node_id), 0])
