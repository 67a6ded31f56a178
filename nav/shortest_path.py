"""
Shortest path planner (unweighted BFS).

Purpose: Minimum-edge-count path between two nodes of a maze graph.

Inputs:
    - Maze graph (ordered adjacency lists)
    - Origin and goal node ids

Outputs:
    - Path as list of node ids from origin to goal, or [] if none exists
"""

import logging
from collections import deque
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class ShortestPathPlanner:
    """BFS path planner over a maze graph."""

    def __init__(self, graph):
        """
        Initialize planner.

        Args:
            graph: maze.graph.Graph
        """
        self.graph = graph

    def plan(self, origin: int, goal: int) -> List[int]:
        """
        Plan path using BFS.

        Ties between equal-length paths go to whichever neighbor comes first
        in adjacency order.

        Args:
            origin: Start node id
            goal: Goal node id

        Returns:
            List of node ids (origin first, goal last), or [] if no path
        """
        if not self.graph.has_node(origin) or not self.graph.has_node(goal):
            return []

        queue = deque([origin])
        came_from: Dict[int, Optional[int]] = {origin: None}

        while queue:
            current = queue.popleft()

            if current == goal:
                path = self._reconstruct(came_from, goal)
                logger.debug(f"Shortest path {origin}->{goal}: {len(path) - 1} steps")
                return path

            for neighbor in self.graph.neighbors(current):
                if neighbor in came_from:
                    continue
                came_from[neighbor] = current
                queue.append(neighbor)

        logger.debug(f"No path {origin}->{goal}")
        return []

    @staticmethod
    def _reconstruct(came_from: Dict[int, Optional[int]], goal: int) -> List[int]:
        path = []
        node = goal
        while node is not None:
            path.append(node)
            node = came_from[node]
        path.reverse()
        return path
