"""Type definitions for graph path finding."""

from enum import Enum
from typing import Callable, Hashable, Union

from ..models import NodeState

# Type alias for heuristic functions: h(node state, destination id) -> estimate
HeuristicFunc = Callable[[NodeState, Hashable], float]


class HeuristicMode(Enum):
    """Built-in remaining-cost estimators."""

    INERT = "inert"  # Uniform-cost search, every estimate is zero
    STORED = "stored"  # The per-node value supplied with the graph


def inert_heuristic(state: NodeState, destination: Hashable) -> float:
    """Estimate nothing, turning best-first search into Dijkstra's algorithm."""
    return 0.0


def stored_heuristic(state: NodeState, destination: Hashable) -> float:
    """
    Use the scalar heuristic carried on the node.

    The stored value describes the distance to an implicit goal, not to
    ``destination``; it only yields shortest paths when it never
    overestimates the remaining cost to every destination searched for.
    """
    return state.h


def resolve_heuristic(mode: Union[HeuristicMode, str]) -> HeuristicFunc:
    """Return the heuristic function for a mode or its string value.

    Raises:
        ValueError: If the mode is unknown
    """
    if HeuristicMode(mode) is HeuristicMode.STORED:
        return stored_heuristic
    return inert_heuristic
