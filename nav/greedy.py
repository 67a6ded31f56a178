"""
Greedy Best-First Search.

Purpose: Expand the frontier node closest to the goal by Manhattan distance.

Inputs:
    - Maze graph (nodes carry row/col)
    - Start and goal node ids

Outputs:
    - Visitation order as list of node ids (goal last if reached)

Notes:
    Not admissible: the result is the order nodes were popped, not a
    shortest path. Heap entries are (distance, push_sequence, node_id), so
    ties in distance resolve first-in, first-out.
"""

import heapq
import logging
from typing import List

logger = logging.getLogger(__name__)


class GreedyBestFirstPlanner:
    """Greedy best-first search over a maze graph."""

    def __init__(self, graph):
        """
        Initialize planner.

        Args:
            graph: maze.graph.Graph
        """
        self.graph = graph

    def plan(self, start: int, goal: int) -> List[int]:
        """
        Run greedy best-first search.

        Args:
            start: Start node id
            goal: Goal node id

        Returns:
            Node ids in the order they were popped; stops at goal.
            [] if either id is unknown.
        """
        start_node = self.graph.node(start)
        goal_node = self.graph.node(goal)
        if start_node is None or goal_node is None:
            return []

        goal_pos = goal_node.position
        sequence = 0
        open_set = [(self._manhattan(start_node.position, goal_pos), sequence, start)]
        discovered = {start}
        visited = []

        while open_set:
            _, _, current = heapq.heappop(open_set)
            visited.append(current)

            if current == goal:
                break

            for neighbor in self.graph.neighbors(current):
                if neighbor in discovered:
                    continue
                discovered.add(neighbor)
                sequence += 1
                h = self._manhattan(self.graph.node(neighbor).position, goal_pos)
                heapq.heappush(open_set, (h, sequence, neighbor))

        logger.debug(f"Greedy {start}->{goal}: visited {len(visited)} nodes")
        return visited

    @staticmethod
    def _manhattan(a, b) -> int:
        """Manhattan distance |dr| + |dc| between two (row, col) positions."""
        return abs(a[0] - b[0]) + abs(a[1] - b[1])
