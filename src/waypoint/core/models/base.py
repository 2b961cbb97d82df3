"""
Core domain models base module for the route finding system.

This module provides the common validation functions used across the
different model types before any value reaches the graph.
"""

import math
from numbers import Real

from ..exceptions import InvalidHeuristicError, InvalidWeightError, NegativeWeightError

INFINITY = float("inf")


def _is_real(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_weight(weight: float) -> float:
    """Validate an edge weight and return it as a float.

    Weights must be finite and non-negative. Zero is allowed.
    """
    if not _is_real(weight):
        raise InvalidWeightError(f"Edge weight must be numeric, got {weight!r}")
    weight = float(weight)
    if math.isnan(weight) or math.isinf(weight):
        raise InvalidWeightError("Edge weight must be finite number")
    if weight < 0:
        raise NegativeWeightError(f"Negative weight {weight} is not supported")
    return weight


def validate_heuristic_value(name: str, value: float) -> float:
    """Validate a heuristic estimate and return it as a float."""
    if not _is_real(value):
        raise InvalidHeuristicError(f"Heuristic for {name!r} must be numeric, got {value!r}")
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        raise InvalidHeuristicError(f"Heuristic for {name!r} must be finite number")
    if value < 0:
        raise InvalidHeuristicError(f"Heuristic for {name!r} must be non-negative, got {value}")
    return value
