"""
Formats: getting graphs in and out of text.

Components:
    - json_codec: JSON array of {"source", "destination", "weight"} objects
    - dot: Graphviz DOT rendering

Both work purely through the Graph read interface.
"""

from graphops.formats.dot import to_dot
from graphops.formats.json_codec import (
    decode_graph,
    edges_from_json_data,
    edges_to_json_data,
    encode_graph,
    graph_summary,
    load_graph,
    save_graph,
)

__all__ = [
    "to_dot",
    "encode_graph",
    "graph_summary",
    "decode_graph",
    "edges_to_json_data",
    "edges_from_json_data",
    "load_graph",
    "save_graph",
]
