"""
Waypoint - Shortest routes over weighted, undirected networks

This package provides an in-memory graph of named locations and a
best-first path search over it. It includes:

- A weighted graph with per-node heuristic values
- A best-first search engine (Dijkstra's algorithm with the default
  heuristic, A* with an admissible one)
- A JSON graph loader and a command-line interface

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "Waypoint Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Waypoint requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import WeightedGraph
from .core.graph_paths import PathFinding, PathResult, ShortestPathFinder

__all__ = [
    "PathFinding",
    "PathResult",
    "ShortestPathFinder",
    "WeightedGraph",
]
