"""
Tests for core graph functionality.
"""

import math

import pytest

from waypoint.core.exceptions import (
    DuplicateNodeError,
    InvalidHeuristicError,
    InvalidWeightError,
    NegativeWeightError,
    UnknownHeuristicError,
    UnknownNodeError,
)
from waypoint.core.graph import WeightedGraph
from waypoint.core.models import Edge, Neighbor, NodeState


def test_graph_requires_heuristic_map():
    """Test that a graph cannot be built without a heuristic map."""
    with pytest.raises(TypeError, match="heuristic map"):
        WeightedGraph(None)


def test_graph_rejects_invalid_heuristic_values():
    """Test heuristic values are validated at construction."""
    with pytest.raises(InvalidHeuristicError):
        WeightedGraph({"A": -1})
    with pytest.raises(InvalidHeuristicError):
        WeightedGraph({"A": math.nan})
    with pytest.raises(InvalidHeuristicError):
        WeightedGraph({"A": "far"})


def test_add_node_allocates_unreached_state():
    """Test that registering a node creates an unreached NodeState."""
    graph = WeightedGraph({"A": 3.5})
    graph.add_node("A")

    state = graph.state_of("A")
    assert isinstance(state, NodeState)
    assert state.node_id == "A"
    assert state.h == pytest.approx(3.5)
    assert state.g == math.inf
    assert not state.reached
    assert graph.has_node("A")
    assert "A" in graph
    assert len(graph) == 1


def test_add_node_duplicate():
    """Test registering the same node twice."""
    graph = WeightedGraph({"A": 0})
    graph.add_node("A")

    with pytest.raises(DuplicateNodeError, match="already registered"):
        graph.add_node("A")
    assert graph.get_node_count() == 1


def test_add_node_without_heuristic():
    """Test registering a node missing from the heuristic map."""
    graph = WeightedGraph({"A": 0})

    with pytest.raises(UnknownHeuristicError, match="heuristic map"):
        graph.add_node("Z")
    assert not graph.has_node("Z")


def test_add_node_none():
    """Test that None is not a valid identifier."""
    graph = WeightedGraph({None: 0})
    with pytest.raises(TypeError):
        graph.add_node(None)


def test_add_edge_is_symmetric(single_edge_graph):
    """Test that an edge is visible from both endpoints."""
    assert single_edge_graph.get_edge_weight("A", "B") == pytest.approx(5.0)
    assert single_edge_graph.get_edge_weight("B", "A") == pytest.approx(5.0)
    assert single_edge_graph.has_edge("B", "A")
    assert single_edge_graph.get_edge_count() == 1
    assert single_edge_graph.get_neighbors("A") == {"B"}
    assert single_edge_graph.get_neighbors("B") == {"A"}


def test_add_edge_overwrites_weight(single_edge_graph):
    """Test that re-adding an edge replaces its weight in both directions."""
    single_edge_graph.add_edge("B", "A", 2)

    assert single_edge_graph.get_edge_weight("A", "B") == pytest.approx(2.0)
    assert single_edge_graph.get_edge_weight("B", "A") == pytest.approx(2.0)
    assert single_edge_graph.get_edge_count() == 1


def test_add_edge_unknown_node_leaves_graph_unmodified(single_edge_graph):
    """Test that a failing add_edge does not touch the adjacency."""
    with pytest.raises(UnknownNodeError):
        single_edge_graph.add_edge("A", "Z", 1)
    with pytest.raises(UnknownNodeError):
        single_edge_graph.add_edge("Z", "A", 1)

    assert single_edge_graph.get_neighbors("A") == {"B"}
    assert single_edge_graph.get_edge_count() == 1
    assert not single_edge_graph.has_node("Z")


def test_add_edge_registered_but_unknown_to_graph():
    """Test an endpoint with a heuristic entry that was never registered."""
    graph = WeightedGraph({"A": 0, "B": 0})
    graph.add_node("A")

    with pytest.raises(UnknownNodeError, match="'B'"):
        graph.add_edge("A", "B", 1)
    assert graph.get_degree("A") == 0


@pytest.mark.parametrize("weight", [-1, -0.5])
def test_add_edge_negative_weight(single_edge_graph, weight):
    """Test that negative weights are rejected before mutation."""
    with pytest.raises(NegativeWeightError):
        single_edge_graph.add_edge("A", "B", weight)
    assert single_edge_graph.get_edge_weight("A", "B") == pytest.approx(5.0)


@pytest.mark.parametrize("weight", [math.inf, math.nan, "3", None, True])
def test_add_edge_invalid_weight(single_edge_graph, weight):
    """Test that non-finite or non-numeric weights are rejected."""
    with pytest.raises(InvalidWeightError):
        single_edge_graph.add_edge("A", "B", weight)


def test_add_edge_zero_weight(single_edge_graph):
    """Test that zero-length connections are allowed."""
    single_edge_graph.add_edge("A", "B", 0)
    assert single_edge_graph.get_edge_weight("A", "B") == 0.0


def test_neighbors_of_returns_detached_pairs(triangle_graph):
    """Test neighbors_of yields (state, weight) pairs that cannot corrupt the graph."""
    neighbors = triangle_graph.neighbors_of("A")

    assert isinstance(neighbors, tuple)
    assert all(isinstance(entry, Neighbor) for entry in neighbors)
    by_id = {entry.state.node_id: entry.weight for entry in neighbors}
    assert by_id == {"B": 2.0, "C": 10.0}

    neighbors[0].state.g = 0.0
    assert triangle_graph.state_of(neighbors[0].state.node_id).g == math.inf


def test_neighbors_of_unknown_node(triangle_graph):
    """Test lookups of unregistered nodes."""
    with pytest.raises(UnknownNodeError):
        triangle_graph.neighbors_of("Z")
    with pytest.raises(UnknownNodeError):
        triangle_graph.state_of("Z")
    with pytest.raises(UnknownNodeError):
        triangle_graph.edges_from("Z")


def test_edges_from_is_read_only(triangle_graph):
    """Test that the adjacency view cannot be mutated."""
    view = triangle_graph.edges_from("B")
    assert dict(view) == {"A": 2.0, "C": 2.0}

    with pytest.raises(TypeError):
        view["Z"] = 1.0  # type: ignore[index]


def test_iteration_is_restartable(triangle_graph):
    """Test iterating over registered nodes more than once."""
    assert list(triangle_graph) == ["A", "B", "C"]
    assert list(triangle_graph) == ["A", "B", "C"]
    assert triangle_graph.get_nodes() == ("A", "B", "C")


def test_get_edges_lists_each_edge_once(triangle_graph):
    """Test that undirected edges are reported once."""
    edges = list(triangle_graph.get_edges())

    assert len(edges) == 3
    assert all(isinstance(edge, Edge) for edge in edges)
    pairs = {frozenset(edge.endpoints): edge.weight for edge in edges}
    assert pairs == {
        frozenset({"A", "B"}): 2.0,
        frozenset({"B", "C"}): 2.0,
        frozenset({"A", "C"}): 10.0,
    }


def test_add_edge_object(make_graph):
    """Test adding an Edge instance."""
    graph = make_graph({"A": 0, "B": 0}, [])
    graph.add_edge_object(Edge("A", "B", 4))
    assert graph.get_edge_weight("B", "A") == pytest.approx(4.0)


def test_reset_states(single_edge_graph):
    """Test restoring graph-owned states to unreached."""
    state = single_edge_graph.state_of("A")
    state.relax(1.0)
    state.close()

    single_edge_graph.reset_states()

    assert state.g == math.inf
    assert state.f == math.inf
    assert not state.closed


def test_heuristics_view(make_graph):
    """Test the heuristic mapping is exposed read-only."""
    graph = make_graph({"A": 1, "B": 2}, [])
    assert dict(graph.heuristics) == {"A": 1.0, "B": 2.0}
    with pytest.raises(TypeError):
        graph.heuristics["A"] = 5  # type: ignore[index]


def test_integer_identifiers(make_graph):
    """Test that any hashable identifier works."""
    graph = make_graph({1: 0, 2: 0}, [(1, 2, 3)])
    assert graph.get_edge_weight(2, 1) == pytest.approx(3.0)
    assert repr(graph) == "WeightedGraph(nodes=2, edges=1)"
