"""
Core domain models package for the route finding system.

This package provides the data structures that represent nodes, their
search state, and the weighted connections between them.
"""

from .base import INFINITY, validate_heuristic_value, validate_weight
from .edge import Edge, Neighbor
from .node import NodeState

__all__ = [
    # Base utilities
    "INFINITY",
    "validate_weight",
    "validate_heuristic_value",
    # Node models
    "NodeState",
    # Edge models
    "Edge",
    "Neighbor",
]
