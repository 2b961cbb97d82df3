"""
Core graph data structure with weighted, undirected adjacency.

This module provides the WeightedGraph class that represents a network of
locations using an adjacency map. Every connection is stored in both
directions, so neighbor lookups and weight queries are constant time from
either endpoint.

Nodes must be registered explicitly, and only identifiers that appear in the
heuristic mapping the graph was built with can be registered. Each node owns
a ``NodeState`` template carrying its heuristic value; searches copy these
templates into their own scratch space instead of mutating them.
"""

import logging
from dataclasses import dataclass, field
from threading import RLock
from types import MappingProxyType
from typing import Dict, Hashable, Iterator, Mapping, Optional, Set, Tuple

from .exceptions import DuplicateNodeError, UnknownHeuristicError, UnknownNodeError
from .models import Edge, Neighbor, NodeState, validate_heuristic_value, validate_weight

logger = logging.getLogger(__name__)


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    adjacency: Dict[Hashable, Dict[Hashable, float]] = field(default_factory=dict)
    node_states: Dict[Hashable, NodeState] = field(default_factory=dict)
    edge_count: int = 0


class WeightedGraph:
    """
    Weighted undirected graph keyed by node identifier.

    Attributes:
        _heuristics (Dict[Hashable, float]): Heuristic value per allowed node
        _state (GraphState): Internal state of the graph
        _state_lock (RLock): Lock for thread-safe structural access

    Example:
        >>> graph = WeightedGraph({"A": 0, "B": 0})
        >>> graph.add_node("A")
        >>> graph.add_node("B")
        >>> graph.add_edge("A", "B", 5)
        >>> graph.get_edge_weight("B", "A")
        5.0
    """

    def __init__(self, heuristics: Mapping[Hashable, float]):
        """
        Initialize an empty graph over the given heuristic mapping.

        Args:
            heuristics (Mapping[Hashable, float]): Heuristic value for every
                node identifier that may later be registered.

        Raises:
            TypeError: If ``heuristics`` is None
            InvalidHeuristicError: If a heuristic value is not finite and non-negative
        """
        if heuristics is None:
            raise TypeError("The heuristic map should not be None")
        self._heuristics: Dict[Hashable, float] = {
            node_id: validate_heuristic_value(str(node_id), value)
            for node_id, value in heuristics.items()
        }
        self._state = GraphState()
        self._state_lock = RLock()

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate over registered node identifiers in insertion order."""
        return iter(self.get_nodes())

    def __len__(self) -> int:
        return self.get_node_count()

    def __contains__(self, node_id: object) -> bool:
        return self.has_node(node_id)

    def __repr__(self) -> str:
        return f"WeightedGraph(nodes={self.get_node_count()}, edges={self.get_edge_count()})"

    @property
    def heuristics(self) -> Mapping[Hashable, float]:
        """Read-only view of the heuristic mapping."""
        return MappingProxyType(self._heuristics)

    def _require_node(self, node_id: Hashable) -> None:
        if node_id not in self._state.node_states:
            raise UnknownNodeError(f"Node '{node_id}' not found in the graph")

    def add_node(self, node_id: Hashable) -> None:
        """
        Register a node.

        Raises:
            TypeError: If ``node_id`` is None
            DuplicateNodeError: If the node is already registered
            UnknownHeuristicError: If no heuristic was supplied for the node
        """
        if node_id is None:
            raise TypeError("The node cannot be None")
        with self._state_lock:
            if node_id in self._state.node_states:
                raise DuplicateNodeError(f"Node '{node_id}' is already registered")
            if node_id not in self._heuristics:
                raise UnknownHeuristicError(f"Node '{node_id}' is not part of the heuristic map")

            self._state.adjacency[node_id] = {}
            self._state.node_states[node_id] = NodeState(node_id, self._heuristics[node_id])
            logger.debug(f"Added node {node_id}")

    def add_edge(self, first: Hashable, second: Hashable, weight: float) -> None:
        """
        Add an undirected edge, overwriting any existing weight between the pair.

        Raises:
            UnknownNodeError: If either endpoint is not registered
            InvalidWeightError: If the weight is not a finite number
            NegativeWeightError: If the weight is negative
        """
        with self._state_lock:
            self._require_node(first)
            self._require_node(second)
            weight = validate_weight(weight)

            adjacency = self._state.adjacency
            if second not in adjacency[first]:
                self._state.edge_count += 1
            else:
                logger.debug(
                    f"Overwriting edge {first} <-> {second}: "
                    f"{adjacency[first][second]} -> {weight}"
                )
            adjacency[first][second] = weight
            adjacency[second][first] = weight
            logger.debug(f"Added edge {first} <-> {second} ({weight})")

    def add_edge_object(self, edge: Edge) -> None:
        """Add an ``Edge`` instance."""
        self.add_edge(edge.source, edge.target, edge.weight)

    def neighbors_of(self, node_id: Hashable) -> Tuple[Neighbor, ...]:
        """
        Get ``(neighbor state, weight)`` pairs adjacent to a node.

        The states are detached snapshots, so mutating them does not affect
        the graph.

        Raises:
            UnknownNodeError: If the node is not registered
        """
        with self._state_lock:
            self._require_node(node_id)
            states = self._state.node_states
            return tuple(
                Neighbor(states[neighbor].snapshot(), weight)
                for neighbor, weight in self._state.adjacency[node_id].items()
            )

    def edges_from(self, node_id: Hashable) -> Mapping[Hashable, float]:
        """
        Get a read-only mapping of neighbor identifier to edge weight.

        Raises:
            UnknownNodeError: If the node is not registered
        """
        with self._state_lock:
            self._require_node(node_id)
            return MappingProxyType(self._state.adjacency[node_id])

    def state_of(self, node_id: Hashable) -> NodeState:
        """
        Get the graph-owned ``NodeState`` for a node.

        Raises:
            UnknownNodeError: If the node is not registered
        """
        with self._state_lock:
            self._require_node(node_id)
            return self._state.node_states[node_id]

    def reset_states(self) -> None:
        """Return every graph-owned ``NodeState`` to the unreached condition."""
        with self._state_lock:
            for state in self._state.node_states.values():
                state.reset()

    def get_neighbors(self, node_id: Hashable) -> Set[Hashable]:
        """Get the identifiers adjacent to a node."""
        with self._state_lock:
            self._require_node(node_id)
            return set(self._state.adjacency[node_id])

    def get_edge_weight(self, first: Hashable, second: Hashable) -> Optional[float]:
        """Get the weight between two nodes if an edge exists."""
        with self._state_lock:
            return self._state.adjacency.get(first, {}).get(second)

    def has_edge(self, first: Hashable, second: Hashable) -> bool:
        """Check if an edge exists between two nodes."""
        return self.get_edge_weight(first, second) is not None

    def has_node(self, node_id: Hashable) -> bool:
        """Check if a node is registered."""
        with self._state_lock:
            return node_id in self._state.node_states

    def get_nodes(self) -> Tuple[Hashable, ...]:
        """Get all registered nodes in insertion order."""
        with self._state_lock:
            return tuple(self._state.node_states)

    def get_edges(self) -> Iterator[Edge]:
        """Get every undirected edge once."""
        with self._state_lock:
            seen: Set[Hashable] = set()
            edges = []
            for node_id, neighbors in self._state.adjacency.items():
                for neighbor, weight in neighbors.items():
                    if neighbor not in seen:
                        edges.append(Edge(node_id, neighbor, weight))
                seen.add(node_id)
        yield from edges

    def get_degree(self, node_id: Hashable) -> int:
        """Get the number of edges incident to a node."""
        with self._state_lock:
            self._require_node(node_id)
            return len(self._state.adjacency[node_id])

    def get_node_count(self) -> int:
        with self._state_lock:
            return len(self._state.node_states)

    def get_edge_count(self) -> int:
        """Get the number of undirected edges in the graph."""
        with self._state_lock:
            return self._state.edge_count
