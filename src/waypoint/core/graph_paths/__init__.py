"""Graph path finding functionality."""

from typing import Any, Hashable, Optional

from ..graph import WeightedGraph
from ..models import INFINITY
from .algorithms.shortest_path import ShortestPathFinder
from .base import PathFinder
from .models import PathResult, PathValidationError, PerformanceMetrics
from .types import (
    HeuristicFunc,
    HeuristicMode,
    inert_heuristic,
    resolve_heuristic,
    stored_heuristic,
)
from .utils import MemoryManager, calculate_path_cost

__all__ = [
    "HeuristicFunc",
    "HeuristicMode",
    "MemoryManager",
    "PathFinder",
    "PathFinding",
    "PathResult",
    "PathValidationError",
    "PerformanceMetrics",
    "ShortestPathFinder",
    "calculate_path_cost",
    "inert_heuristic",
    "resolve_heuristic",
    "stored_heuristic",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def find_path(
        graph: WeightedGraph,
        source: Hashable,
        destination: Hashable,
        heuristic: Optional[HeuristicFunc] = None,
        **kwargs: Any,
    ) -> Optional[PathResult]:
        """Find the cheapest path between two nodes.

        Returns:
            PathResult, or None when ``destination`` cannot be reached

        Raises:
            UnknownNodeError: If either node is not registered
        """
        finder = ShortestPathFinder(graph, heuristic=heuristic)
        return finder.find_path(source, destination, **kwargs)

    @classmethod
    def distance(
        cls,
        graph: WeightedGraph,
        source: Hashable,
        destination: Hashable,
        heuristic: Optional[HeuristicFunc] = None,
    ) -> float:
        """Cost of the cheapest path, ``inf`` when unreachable."""
        result = cls.find_path(graph, source, destination, heuristic=heuristic)
        return INFINITY if result is None else result.total_cost
