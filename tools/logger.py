"""
Logging setup and per-run summaries.

Purpose: Configure the logging module and log one summary row per
         algorithm run.

Inputs:
    - Maze name
    - Algorithm name
    - Run metrics (from MetricsTracker.finalize)

Outputs:
    - Log records on the 'maze.runs' logger (nothing is written to disk)
"""

import logging
from typing import Dict, Optional


def setup_logging(level: str = "INFO", fmt: Optional[str] = None):
    """
    Configure root logging.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        fmt: logging format string
    """
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=fmt or "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


class RunLogger:
    """Logs a summary row per algorithm run."""

    schema = [
        "maze",
        "algorithm",
        "visited",
        "path_len",
        "reached",
        "cpu_ms",
        "efficiency",
    ]

    def __init__(self, maze: str):
        """
        Initialize run logger.

        Args:
            maze: Maze name (usually the file name)
        """
        self.maze = maze
        self.logger = logging.getLogger("maze.runs")

    def row(self, algorithm: str, **metrics) -> Dict:
        """Build a summary row in schema order."""
        return {
            "maze": self.maze,
            "algorithm": algorithm,
            "visited": metrics.get("visited", 0),
            "path_len": metrics.get("path_len", 0),
            "reached": metrics.get("reached", 0),
            "cpu_ms": metrics.get("cpu_ms", 0.0),
            "efficiency": metrics.get("efficiency", 0.0),
        }

    def log(self, algorithm: str, **metrics) -> Dict:
        """
        Log metrics for one run.

        Args:
            algorithm: Algorithm name
            **metrics: Dictionary with run values

        Returns:
            The logged row
        """
        row = self.row(algorithm, **metrics)
        self.logger.info(
            "%s | %s | visited=%d path_len=%d reached=%d cpu_ms=%.3f efficiency=%.3f",
            row["maze"], row["algorithm"], row["visited"], row["path_len"],
            row["reached"], row["cpu_ms"], row["efficiency"],
        )
        return row
