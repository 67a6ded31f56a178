"""
BFS (Breadth-First Search) traversal.

Purpose: Visit the connected component of a start node level by level.

Inputs:
    - Maze graph
    - Start node id

Outputs:
    - Node ids in discovery order (each exactly once), or [] for unknown ids
"""

from collections import deque
from typing import List


class BFSTraversal:
    """Breadth-first traversal of a maze graph."""

    def __init__(self, graph):
        self.graph = graph

    def traverse(self, start: int) -> List[int]:
        """
        Traverse the component containing start.

        Args:
            start: Start node id

        Returns:
            Node ids in BFS order; ties broken by adjacency order
        """
        if not self.graph.has_node(start):
            return []

        order = []
        queue = deque([start])
        visited = {start}

        while queue:
            current = queue.popleft()
            order.append(current)

            for neighbor in self.graph.neighbors(current):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                queue.append(neighbor)

        return order
