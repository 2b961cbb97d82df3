"""
Edge models for the route finding system.

This module defines the models representing undirected, weighted
connections between registered nodes.
"""

from dataclasses import dataclass
from typing import Hashable, NamedTuple, Tuple

from .base import validate_weight
from .node import NodeState


@dataclass(frozen=True)
class Edge:
    """
    Undirected connection between two nodes.

    Attributes:
        source (Hashable): One endpoint
        target (Hashable): The other endpoint
        weight (float): Non-negative, finite length of the connection
    """

    source: Hashable
    target: Hashable
    weight: float

    def __post_init__(self):
        """Validate the weight after initialization."""
        object.__setattr__(self, "weight", validate_weight(self.weight))

    @property
    def endpoints(self) -> Tuple[Hashable, Hashable]:
        return (self.source, self.target)

    def reversed(self) -> "Edge":
        """Return the same connection seen from the other endpoint."""
        return Edge(self.target, self.source, self.weight)


class Neighbor(NamedTuple):
    """A ``(neighbor state, weight)`` pair as returned by ``neighbors_of``."""

    state: NodeState
    weight: float
