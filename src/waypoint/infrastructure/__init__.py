"""Infrastructure collaborators: loading graph data from outside the core."""

from .loader import GRAPH_SCHEMA, GraphLoader, load_json_file

__all__ = ["GRAPH_SCHEMA", "GraphLoader", "load_json_file"]
