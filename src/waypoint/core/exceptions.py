"""
Custom exceptions for the route finding system.

This module defines the hierarchy of custom exceptions used throughout the system
to handle caller-input failures in a structured and meaningful way. Each exception
type corresponds to a specific category of errors that may occur while building a
graph or running a search over it.

An unreachable destination is not an error: searches report it by returning
``None``.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as numeric checks on weights or heuristic values.

    Examples:
        * Non-numeric edge weight
        * Heuristic value that is NaN
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidWeightError(ValidationError):
    """
    Raised when an edge weight is not a finite real number.

    Examples:
        * ``float("inf")`` or ``float("nan")`` weight
        * Boolean or string weight
    """


class NegativeWeightError(InvalidWeightError):
    """Raised when a negative edge weight is supplied."""


class InvalidHeuristicError(ValidationError):
    """
    Raised when a heuristic value or heuristic function result is unusable.

    Heuristic values must be finite and non-negative.
    """


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on the graph structure reference
    identifiers inconsistently, such as unknown or duplicate nodes.

    Examples:
        * Edge between unregistered nodes
        * Registering the same node twice
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(GraphOperationError):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Heuristic entry not found
    """


class UnknownNodeError(ResourceNotFoundError):
    """
    Raised when an operation references a node identifier not registered in the graph.

    Examples:
        * ``add_edge`` with an unregistered endpoint
        * ``find_path`` with an unregistered source or destination
        * ``neighbors_of`` / ``state_of`` lookups by a non-existent ID
    """


class UnknownHeuristicError(ResourceNotFoundError):
    """
    Raised when a node is registered without a corresponding heuristic entry.

    Every node must appear in the heuristic mapping the graph was built with.
    """


class DuplicateResourceError(GraphOperationError):
    """
    Raised when attempting to create a duplicate resource.

    Examples:
        * Duplicate node registration
    """


class DuplicateNodeError(DuplicateResourceError):
    """Raised when registering a node identifier that is already registered."""


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Non-numeric ``WAYPOINT_MAX_QUEUE_SIZE``
        * Unknown heuristic mode
    """


class GraphLoadError(Exception):
    """
    Raised when graph input data cannot be loaded.

    Examples:
        * File not found or unreadable
        * Malformed JSON
        * Document not matching the graph schema
    """
