"""Command Line Interface for the waypoint route finder.

This module provides a CLI for finding routes in a graph stored as a JSON
document (see ``waypoint.infrastructure.loader`` for the layout).

The CLI supports the following commands:
    - route: Find the cheapest route between two nodes
    - info: Summarize the nodes and edges of a graph file

Settings are read from ``WAYPOINT_*`` environment variables and can be
overridden with flags.

Example Usage:
    waypoint route data/stations.json "ARL Suvarnabhumi" "BRT Wat Dokmai"
    waypoint route data/stations.json A C --heuristic stored --report-memory
    waypoint info data/stations.json
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Hashable, List, Optional

from .config import SearchSettings
from .core.exceptions import (
    ConfigurationError,
    GraphLoadError,
    GraphOperationError,
    ValidationError,
)
from .core.graph import WeightedGraph
from .core.graph_paths import MemoryManager, ShortestPathFinder, resolve_heuristic
from .core.graph_paths.types import HeuristicMode
from .core.graph_paths.utils import get_memory_usage
from .infrastructure.loader import GraphLoader

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_INPUT_ERROR = 2


def configure_logging(level: str) -> None:
    """Configure root logging for CLI use."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_settings(args: argparse.Namespace) -> SearchSettings:
    """Merge command-line overrides into environment settings.

    Raises:
        ConfigurationError: If any resulting setting is invalid
    """
    settings = SearchSettings.from_env()
    overrides = {}
    if getattr(args, "heuristic", None):
        overrides["heuristic"] = HeuristicMode(args.heuristic)
    if getattr(args, "max_memory_mb", None) is not None:
        overrides["max_memory_mb"] = args.max_memory_mb
    if args.log_level:
        overrides["log_level"] = args.log_level
    return replace(settings, **overrides) if overrides else settings


def resolve_node_id(graph: WeightedGraph, raw: str) -> Hashable:
    """Map a command-line identifier onto a registered node, allowing integer IDs."""
    if graph.has_node(raw):
        return raw
    try:
        number = int(raw)
    except ValueError:
        return raw
    return number if graph.has_node(number) else raw


def run_route(args: argparse.Namespace, settings: SearchSettings) -> int:
    """Find and print a route.

    Returns:
        Process exit code
    """
    graph = GraphLoader.from_json_file(args.graph)

    memory_manager = None
    if args.report_memory or settings.max_memory_mb:
        memory_manager = MemoryManager(settings.max_memory_mb)

    finder = ShortestPathFinder(
        graph,
        heuristic=resolve_heuristic(settings.heuristic),
        memory_manager=memory_manager,
        max_queue_size=settings.max_queue_size,
    )
    result = finder.find_path(
        resolve_node_id(graph, args.source), resolve_node_id(graph, args.destination)
    )

    if result is None:
        print(f"No path from {args.source} to {args.destination}")
        status = EXIT_NO_PATH
    else:
        for node in result:
            print(node)
        print(f"Distance {args.source} to {args.destination} = {result.total_cost}")
        status = EXIT_OK

    if args.metrics and finder.last_metrics:
        metrics = finder.last_metrics
        print(
            f"Explored {metrics.nodes_explored} nodes in {metrics.duration:.1f}ms "
            f"(frontier peak {metrics.frontier_peak})"
        )
    if args.report_memory:
        print(f"Allocated memory: {get_memory_usage() // 1024} KB")
    return status


def run_info(args: argparse.Namespace) -> int:
    """Print a summary of a graph file."""
    graph: WeightedGraph = GraphLoader.from_json_file(args.graph)
    print(f"Nodes: {graph.get_node_count()}")
    print(f"Edges: {graph.get_edge_count()}")
    if args.verbose:
        for node in graph:
            neighbors = ", ".join(
                f"{neighbor} ({weight})" for neighbor, weight in graph.edges_from(node).items()
            )
            print(f"- {node}: {neighbors}")
    return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="waypoint", description="Weighted graph route finder")
    parser.add_argument("--log-level", help="Logging level (overrides WAYPOINT_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    route = subparsers.add_parser("route", help="Find the cheapest route between two nodes")
    route.add_argument("graph", help="Path to a JSON graph document")
    route.add_argument("source", help="Source node identifier")
    route.add_argument("destination", help="Destination node identifier")
    route.add_argument(
        "--heuristic",
        choices=[mode.value for mode in HeuristicMode],
        help="Remaining-cost estimator (overrides WAYPOINT_HEURISTIC)",
    )
    route.add_argument("--max-memory-mb", type=float, help="Abort when memory grows past this")
    route.add_argument("--report-memory", action="store_true", help="Print allocated memory")
    route.add_argument("--metrics", action="store_true", help="Print search metrics")

    info = subparsers.add_parser("info", help="Summarize a graph file")
    info.add_argument("graph", help="Path to a JSON graph document")
    info.add_argument("-v", "--verbose", action="store_true", help="List adjacency")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        Process exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_OK

    try:
        settings = build_settings(args)
        configure_logging(settings.log_level)
        logger.debug(f"Using settings {settings}")

        if args.command == "route":
            return run_route(args, settings)
        return run_info(args)
    except (ConfigurationError, GraphLoadError, GraphOperationError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR


if __name__ == "__main__":
    sys.exit(main())
