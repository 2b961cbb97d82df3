"""
Data models for graph path finding.

This module provides the core data structures used throughout the path finding package:
- PathResult: Container for a discovered path and its total cost
- PerformanceMetrics: Container for search performance metrics
- PathValidationError: Exception for path validation failures

Example:
    >>> result = PathResult(nodes=["A", "B", "C"], total_cost=4.0)
    >>> result.length
    2
    >>> result.validate(graph)  # Ensures path consistency
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Hashable, Iterator, List, Optional, Union

from ..models import Edge

if TYPE_CHECKING:
    from ..graph import WeightedGraph


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Consecutive nodes that are not connected in the graph
    - Nodes missing from the graph
    - Total cost not matching the summed edge weights
    """


@dataclass
class PathResult:
    """
    Container for path finding results.

    Attributes:
        nodes: Node identifiers from source to destination, inclusive
        total_cost: Accumulated cost of the path, equal to the final g-cost
            of the destination
        edges: Edges traversed between consecutive nodes

    Example:
        >>> result = PathResult(nodes=["A", "B"], total_cost=5.0)
        >>> print(f"{result.source} -> {result.destination}: {result.total_cost}")
        A -> B: 5.0
    """

    nodes: List[Hashable]
    total_cost: float
    edges: List[Edge] = field(default_factory=list)

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.nodes, list):
            raise TypeError("nodes must be a list")

        if not self.nodes:
            raise ValueError("nodes must contain at least the source")

        if not isinstance(self.total_cost, (int, float)) or isinstance(self.total_cost, bool):
            raise TypeError("total_cost must be a numeric value")

        if self.total_cost < 0:
            raise ValueError("total_cost cannot be negative")

        if self.edges and len(self.edges) != len(self.nodes) - 1:
            raise PathValidationError(
                f"Path has {len(self.nodes)} nodes but {len(self.edges)} edges"
            )

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self.nodes)

    def __getitem__(self, index: int) -> Hashable:
        """Get a node from the path by index."""
        return self.nodes[index]

    def __iter__(self) -> Iterator[Hashable]:
        """Return an iterator over the path nodes."""
        return iter(self.nodes)

    @property
    def source(self) -> Hashable:
        return self.nodes[0]

    @property
    def destination(self) -> Hashable:
        return self.nodes[-1]

    @property
    def length(self) -> int:
        """Number of edges in the path."""
        return len(self.nodes) - 1

    def validate(self, graph: "WeightedGraph", weight_epsilon: float = 1e-9) -> None:
        """
        Validate the path against a graph.

        Performs comprehensive validation checks:
        - Every node is registered in the graph
        - Every pair of consecutive nodes is connected
        - The summed edge weights match ``total_cost``

        Args:
            graph: The graph instance to validate against
            weight_epsilon: Precision for cost comparisons (default: 1e-9)

        Raises:
            PathValidationError: If any validation check fails
            ValueError: If ``weight_epsilon`` is not positive
        """
        if weight_epsilon <= 0:
            raise ValueError("weight_epsilon must be positive")

        for node_id in self.nodes:
            if not graph.has_node(node_id):
                raise PathValidationError(f"Node {node_id} not in graph")

        calculated = 0.0
        for i in range(len(self.nodes) - 1):
            weight = graph.get_edge_weight(self.nodes[i], self.nodes[i + 1])
            if weight is None:
                raise PathValidationError(
                    f"Path discontinuity between nodes {i} and {i+1}: "
                    f"no edge from {self.nodes[i]} to {self.nodes[i + 1]}"
                )
            calculated += weight

        if abs(calculated - self.total_cost) > weight_epsilon:
            raise PathValidationError(
                f"Cost mismatch: calculated {calculated} != stored {self.total_cost}"
            )


@dataclass
class PerformanceMetrics:
    """
    Container for search performance metrics.

    Attributes:
        operation: Name of the search operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Number of edges in the found path, None when no path
        nodes_explored: Number of frontier entries expanded
        frontier_peak: Largest number of live frontier entries
        max_memory_used: Peak process memory during the search (bytes),
            only recorded when a memory manager is attached
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: int = 0
    frontier_peak: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "frontier_peak": self.frontier_peak,
            "max_memory_used": self.max_memory_used,
        }
