"""
Metrics tracker for traversal runs.

Purpose: Time an algorithm run (process CPU time) and summarize its result.

Inputs:
    - Result sequence (node ids)
    - Goal node id (optional)
    - Shortest-path baseline (edges)

Outputs:
    - Finalized metrics dictionary

Params:
    shortest_path_baseline: float - Shortest path length for efficiency metric
"""

import time
from typing import Dict, List, Optional


class MetricsTracker:
    """Metrics tracker for a single algorithm run."""

    def __init__(self, shortest_path_baseline: Optional[float] = None):
        """
        Initialize metrics tracker.

        Args:
            shortest_path_baseline: Shortest path length in edges
        """
        self.shortest_path_baseline = shortest_path_baseline
        self._t0 = None
        self.cpu_ms = 0.0

    def start(self):
        """Start the run timer."""
        self._t0 = time.process_time()

    def stop(self):
        """Stop the run timer."""
        if self._t0 is not None:
            self.cpu_ms = (time.process_time() - self._t0) * 1000.0
            self._t0 = None

    def finalize(self, result: List[int], goal: Optional[int] = None, is_path: bool = False) -> Dict:
        """
        Finalize metrics for a run.

        Args:
            result: Node id sequence returned by the algorithm
            goal: Goal id, if the algorithm has one
            is_path: True when result is a path (path_len = steps)

        Returns:
            Dictionary with visited, path_len, reached, cpu_ms, efficiency
        """
        reached = goal is not None and len(result) > 0 and result[-1] == goal

        # Efficiency: nodes on an optimal path / nodes the run touched
        if reached and self.shortest_path_baseline is not None \
                and self.shortest_path_baseline != float('inf'):
            efficiency = (self.shortest_path_baseline + 1) / len(result)
        else:
            efficiency = 0.0

        return {
            "visited": len(result),
            "path_len": max(0, len(result) - 1) if is_path else 0,
            "reached": 1 if reached else 0,
            "cpu_ms": self.cpu_ms,
            "efficiency": efficiency,
        }

    def reset(self):
        self._t0 = None
        self.cpu_ms = 0.0
