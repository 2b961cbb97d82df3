"""Shared test fixtures."""

import json

import pytest

from waypoint.core.graph import WeightedGraph


def build_graph(heuristics, edges):
    """Register every heuristic key as a node and add the given edges."""
    graph = WeightedGraph(heuristics)
    for node_id in heuristics:
        graph.add_node(node_id)
    for first, second, weight in edges:
        graph.add_edge(first, second, weight)
    return graph


@pytest.fixture
def make_graph():
    """Factory fixture building a graph from a heuristic mapping and edge triples."""
    return build_graph


@pytest.fixture
def single_edge_graph() -> WeightedGraph:
    """A - B with weight 5."""
    return build_graph({"A": 0, "B": 0}, [("A", "B", 5)])


@pytest.fixture
def triangle_graph() -> WeightedGraph:
    """
    Fixture providing a triangle where the direct edge is the expensive one:
    A --2-- B --2-- C
    \\_______10______/
    """
    return build_graph({"A": 0, "B": 0, "C": 0}, [("A", "B", 2), ("B", "C", 2), ("A", "C", 10)])


@pytest.fixture
def disconnected_graph() -> WeightedGraph:
    """Two components: A - B and C - D."""
    return build_graph(
        {"A": 0, "B": 0, "C": 0, "D": 0},
        [("A", "B", 1), ("C", "D", 1)],
    )


@pytest.fixture
def city_graph() -> WeightedGraph:
    """
    Fixture providing a small road network with several competing routes:

        S --8-- A --3-- D
        |       |       |
        2       1       2
        |       |       |
        B --4-- C --7-- E --1-- T
                 \\______9_____/

    Cheapest S to T: S B C A D E T = 2 + 4 + 1 + 3 + 2 + 1 = 13
    """
    heuristics = {"S": 9, "A": 3, "B": 8, "C": 4, "D": 2, "E": 1, "T": 0}
    edges = [
        ("S", "A", 8),
        ("S", "B", 2),
        ("A", "C", 1),
        ("A", "D", 3),
        ("B", "C", 4),
        ("C", "E", 7),
        ("C", "T", 9),
        ("D", "E", 2),
        ("E", "T", 1),
    ]
    return build_graph(heuristics, edges)


@pytest.fixture
def graph_document() -> dict:
    """JSON graph document matching the loader schema."""
    return {
        "nodes": [
            {"id": "A", "heuristic": 4},
            {"id": "B", "heuristic": 2},
            {"id": "C"},
        ],
        "edges": [
            {"source": "A", "target": "B", "weight": 2},
            {"source": "B", "target": "C", "weight": 2},
            {"source": "A", "target": "C", "weight": 10},
        ],
    }


@pytest.fixture
def graph_file(tmp_path, graph_document):
    """Graph document written to a temporary JSON file."""
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(graph_document), encoding="utf-8")
    return path
