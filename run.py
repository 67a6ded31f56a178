#!/usr/bin/env python3
"""
Entry point for maze graph traversal.

Purpose: Parse CLI arguments, load configuration, compile a maze file and
         run traversal/search algorithms over its graph.

Inputs:
    --maze: Path to maze text file
    --algorithm: shortest, dfs_pre, dfs_in, dfs_post, bfs, greedy, all
    --matrices: Also print adjacency and incidence matrices
    --config: Configuration preset (baseline, legacy)

Outputs:
    Prints the maze, graph info and algorithm results; logs a metrics
    summary per run.
"""

import argparse
import sys
from pathlib import Path

import yaml

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from maze.compiler import MazeCompiler
from maze.config import load_config
from maze.errors import MazeValidationError
from nav.maps import reachable_count, shortest_path_baseline
from tools.logger import RunLogger, setup_logging
from tools.metrics import MetricsTracker


ALGORITHMS = ["shortest", "dfs_pre", "dfs_in", "dfs_post", "bfs", "greedy"]

TITLES = {
    "shortest": "SHORTEST PATH (A -> B)",
    "dfs_pre": "DFS - PREORDER",
    "dfs_in": "DFS - INORDER",
    "dfs_post": "DFS - POSTORDER",
    "bfs": "BFS",
    "greedy": "GREEDY BEST-FIRST SEARCH",
}


def run_algorithm(graph, name, start, goal):
    """Dispatch one algorithm by CLI name."""
    if name == "shortest":
        return graph.shortest_path(start, goal)
    if name == "dfs_pre":
        return graph.dfs_preorder(start)
    if name == "dfs_in":
        return graph.dfs_inorder(start)
    if name == "dfs_post":
        return graph.dfs_postorder(start)
    if name == "bfs":
        return graph.bfs(start)
    if name == "greedy":
        return graph.greedy(start, goal)
    raise ValueError(f"Unknown algorithm: {name}")


def print_sequence(title, sequence):
    print(f"\n=== {title} ===")
    print(f"Visited nodes: {len(sequence)}")
    print(" -> ".join(str(node_id) for node_id in sequence))


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Maze graph traversal: shortest path, DFS, BFS, greedy search"
    )
    parser.add_argument(
        "--maze",
        type=str,
        required=True,
        help="Path to maze text file ('*' wall, ' ' open, 'A' start, 'B' goal)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default="all",
        choices=ALGORITHMS + ["all"],
        help="Algorithm to run (default: all)",
    )
    parser.add_argument(
        "--matrices",
        action="store_true",
        help="Print adjacency and incidence matrices",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="baseline",
        help="Configuration preset (default: baseline)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Override configured log level",
    )

    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}")
        sys.exit(1)

    setup_logging(args.log_level or config["logging"]["level"], config["logging"]["format"])

    try:
        compiler = MazeCompiler.from_config(config)
        grid, graph = compiler.compile_file(args.maze)
    except (MazeValidationError, OSError) as e:
        print(f"Error loading maze: {e}")
        sys.exit(1)

    start, goal = graph.start(), graph.goal()

    if config["output"]["show_map"]:
        print("\n=== MAZE ===")
        print("\n".join(grid.lines()))
    print(f"\nGraph: {graph.node_count()} nodes, {graph.edge_count()} edges")
    print(f"Start (A): {start.position}  Goal (B): {goal.position}")
    print(f"Reachable from A: {reachable_count(graph, start.id)} nodes")

    baseline = shortest_path_baseline(graph, start.id, goal.id)
    run_logger = RunLogger(Path(args.maze).name)
    names = ALGORITHMS if args.algorithm == "all" else [args.algorithm]

    for name in names:
        tracker = MetricsTracker(shortest_path_baseline=baseline)
        tracker.start()
        sequence = run_algorithm(graph, name, start.id, goal.id)
        tracker.stop()

        print_sequence(TITLES[name], sequence)
        if name == "shortest":
            if sequence:
                print(f"Path length: {len(sequence) - 1} steps")
                print("\n".join(grid.overlay(graph.positions(sequence))))
            else:
                print("No path between A and B")

        uses_goal = name in ("shortest", "greedy")
        metrics = tracker.finalize(sequence, goal.id if uses_goal else None,
                                   is_path=(name == "shortest"))
        run_logger.log(name, **metrics)

    if args.matrices:
        if graph.node_count() > config["output"]["max_matrix_nodes"]:
            print(f"\nGraph too large to print matrices ({graph.node_count()} nodes)")
        else:
            matrices = graph.matrices()
            print()
            print(matrices.format(matrices.adjacency(), "ADJACENCY MATRIX"))
            print()
            print(matrices.format(matrices.incidence(), "INCIDENCE MATRIX"))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(0)
