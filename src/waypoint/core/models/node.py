"""
Node models for the route finding system.

This module defines the per-node search record. A ``NodeState`` pairs a node
identifier with its fixed heuristic value and the running cost estimates a
search maintains for it.
"""

from copy import copy
from dataclasses import dataclass
from typing import Hashable

from ..exceptions import GraphOperationError
from .base import INFINITY, validate_heuristic_value


@dataclass
class NodeState:
    """
    Search state associated with a node.

    Attributes:
        node_id (Hashable): Identifier of the node
        h (float): Heuristic estimate supplied at graph construction, fixed
        g (float): Best known cost from the source, ``inf`` while unreached
        f (float): Frontier ordering key, ``g`` plus the active estimate
        closed (bool): Whether the cost has been finalized by a search

    ``g`` only ever decreases until the state is closed, after which the
    state is immutable.
    """

    node_id: Hashable
    h: float = 0.0
    g: float = INFINITY
    f: float = INFINITY
    closed: bool = False

    def __post_init__(self):
        """Validate the heuristic value and derive ``f``."""
        self.h = validate_heuristic_value(str(self.node_id), self.h)
        self.f = self.g + self.h

    @property
    def reached(self) -> bool:
        """Whether any cost has been recorded for the node."""
        return self.g != INFINITY

    def relax(self, g: float, estimate: float = 0.0) -> None:
        """Record a cheaper cost and recompute ``f`` from it.

        Args:
            g: New cost from the source, must not exceed the current ``g``
            estimate: Remaining-cost estimate used for ``f``

        Raises:
            GraphOperationError: If the state is already closed
            ValueError: If ``g`` would increase
        """
        if self.closed:
            raise GraphOperationError(f"Node {self.node_id!r} is already finalized")
        if g > self.g:
            raise ValueError(f"Cost for {self.node_id!r} cannot increase from {self.g} to {g}")
        self.g = g
        self.f = g + estimate

    def close(self) -> None:
        """Mark the cost as final."""
        self.closed = True

    def fresh(self) -> "NodeState":
        """Return an unreached copy of this state, keeping identity and heuristic."""
        return NodeState(self.node_id, self.h)

    def snapshot(self) -> "NodeState":
        """Return a detached copy carrying the current values."""
        return copy(self)

    def reset(self) -> None:
        """Return this state to the unreached condition."""
        self.g = INFINITY
        self.f = INFINITY
        self.closed = False
