"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    DuplicateNodeError,
    GraphLoadError,
    GraphOperationError,
    InvalidHeuristicError,
    InvalidWeightError,
    NegativeWeightError,
    UnknownHeuristicError,
    UnknownNodeError,
    ValidationError,
)
from .graph import WeightedGraph
from .models import Edge, Neighbor, NodeState
from .graph_paths import PathFinding, PathResult, ShortestPathFinder

__all__ = [
    "ConfigurationError",
    "DuplicateNodeError",
    "Edge",
    "GraphLoadError",
    "GraphOperationError",
    "InvalidHeuristicError",
    "InvalidWeightError",
    "NegativeWeightError",
    "Neighbor",
    "NodeState",
    "PathFinding",
    "PathResult",
    "ShortestPathFinder",
    "UnknownHeuristicError",
    "UnknownNodeError",
    "ValidationError",
    "WeightedGraph",
]
