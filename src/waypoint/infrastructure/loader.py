"""
Graph loading from in-memory records and JSON documents.

This module turns the data a storage backend hands over (a heuristic per
node and a list of weighted connections) into a populated ``WeightedGraph``.
JSON documents are checked against ``GRAPH_SCHEMA`` before any node is
registered.

Document layout::

    {
        "nodes": [{"id": "A", "heuristic": 0.0}, ...],
        "edges": [{"source": "A", "target": "B", "weight": 5}, ...]
    }
"""

import json
import logging
import os
from typing import Any, Dict, Hashable, Iterable, Mapping, Optional, Tuple

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ..core.exceptions import GraphLoadError
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)

Connection = Tuple[Hashable, Hashable, float]

GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "nodes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": ["string", "integer"]},
                    "heuristic": {"type": "number", "minimum": 0},
                },
                "required": ["id"],
            },
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "source": {"type": ["string", "integer"]},
                    "target": {"type": ["string", "integer"]},
                    "weight": {"type": "number", "minimum": 0},
                },
                "required": ["source", "target", "weight"],
            },
        },
    },
    "required": ["nodes"],
}


def load_json_file(file_path: str) -> Dict[str, Any]:
    """Load JSON data from a file.

    Raises:
        GraphLoadError: If the file is missing, unreadable or not valid JSON
    """
    if not os.path.exists(file_path):
        raise GraphLoadError(f"File not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise GraphLoadError(f"Invalid JSON in file {file_path}: {e.msg}")
    except OSError as e:
        raise GraphLoadError(f"Failed to read file {file_path}: {e}")


class GraphLoader:
    """Builds ``WeightedGraph`` instances from external data."""

    @staticmethod
    def from_records(
        heuristics: Mapping[Hashable, float],
        connections: Iterable[Connection],
        nodes: Optional[Iterable[Hashable]] = None,
    ) -> WeightedGraph:
        """
        Build a graph from a heuristic mapping and ``(a, b, weight)`` triples.

        Args:
            heuristics: Heuristic value per node identifier
            connections: Weighted undirected connections
            nodes: Identifiers to register, in order; defaults to every
                key of ``heuristics``

        Raises:
            DuplicateNodeError: If ``nodes`` repeats an identifier
            UnknownHeuristicError: If a node has no heuristic entry
            UnknownNodeError: If a connection references an unregistered node
            InvalidWeightError: If a weight is not a finite non-negative number
        """
        graph = WeightedGraph(heuristics)
        for node_id in heuristics if nodes is None else nodes:
            graph.add_node(node_id)
        for first, second, weight in connections:
            graph.add_edge(first, second, weight)

        logger.info(
            f"Loaded graph with {graph.get_node_count()} nodes "
            f"and {graph.get_edge_count()} edges"
        )
        return graph

    @classmethod
    def from_dict(cls, document: Mapping[str, Any]) -> WeightedGraph:
        """
        Build a graph from a document matching ``GRAPH_SCHEMA``.

        Nodes without a ``heuristic`` get 0.

        Raises:
            GraphLoadError: If the document does not match the schema
        """
        try:
            json_validate(instance=document, schema=GRAPH_SCHEMA)
        except JsonSchemaError as e:
            raise GraphLoadError(f"Schema validation failed: {e.message}")

        node_records = document["nodes"]
        heuristics = {record["id"]: record.get("heuristic", 0.0) for record in node_records}
        connections = [
            (record["source"], record["target"], record["weight"])
            for record in document.get("edges", [])
        ]
        return cls.from_records(
            heuristics, connections, nodes=[record["id"] for record in node_records]
        )

    @classmethod
    def from_json_file(cls, file_path: str) -> WeightedGraph:
        """Build a graph from a JSON file."""
        logger.debug(f"Loading graph from {file_path}")
        return cls.from_dict(load_json_file(file_path))
