from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterator, Optional, TypeVar

from ..exceptions import UnknownNodeError
from ..graph import WeightedGraph
from .models import PathResult

# Type variable for path finding results
T = TypeVar("T", bound=PathResult)


class PathFinder[T](ABC):
    """Abstract base class for path finding algorithms."""

    def __init__(self, graph: WeightedGraph):
        """Initialize finder with graph."""
        self.graph = graph

    @abstractmethod
    def find_path(self, start_node: Hashable, end_node: Hashable, **kwargs: Any) -> Optional[T]:
        """Find a path between nodes, or None when the destination is unreachable."""
        pass

    def find_paths(self, start_node: Hashable, end_node: Hashable, **kwargs: Any) -> Iterator[T]:
        """Find multiple paths between nodes.

        Default implementation yields single path from find_path.
        Subclasses may override this to provide more efficient implementations.
        """
        path = self.find_path(start_node, end_node, **kwargs)
        if path is not None:
            yield path

    def validate_nodes(self, start_node: Hashable, end_node: Hashable) -> None:
        """Validate that nodes exist in graph."""
        if not self.graph.has_node(start_node):
            raise UnknownNodeError(f"Start node '{start_node}' not found")
        if not self.graph.has_node(end_node):
            raise UnknownNodeError(f"End node '{end_node}' not found")
