"""JSON encoding and decoding of graphs as an array of edge objects."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from graphops.core.exceptions import GraphDecodeError
from graphops.core.graph.base import Graph, graph_class
from graphops.core.models import Edge, GraphKind
from graphops.log import get_logger

logger = get_logger(__name__)

_EDGE_KEYS = frozenset({"source", "destination", "weight"})


def edges_to_json_data(graph: Graph) -> list[dict[str, Any]]:
    """Edge objects sorted by (source, destination, weight)."""
    return [
        {"source": e.source, "destination": e.destination, "weight": e.weight}
        for e in sorted(graph.edges, key=Edge.sort_key)
    ]


def encode_graph(graph: Graph, indent: int | None = None) -> str:
    """Encode a graph as a JSON array. Undirected graphs keep both directions."""
    return json.dumps(edges_to_json_data(graph), indent=indent)


def edges_from_json_data(data: Any) -> list[Edge]:
    """Validate parsed JSON and build edges. Raises GraphDecodeError("schema", ...)."""
    if not isinstance(data, list):
        raise GraphDecodeError("schema", f"expected a JSON array, got {type(data).__name__}")

    edges = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise GraphDecodeError("schema", f"edge {i}: expected an object")
        keys = set(item)
        if keys != _EDGE_KEYS:
            missing = sorted(_EDGE_KEYS - keys)
            extra = sorted(keys - _EDGE_KEYS)
            parts = []
            if missing:
                parts.append(f"missing {', '.join(missing)}")
            if extra:
                parts.append(f"unexpected {', '.join(extra)}")
            raise GraphDecodeError("schema", f"edge {i}: {'; '.join(parts)}")

        source, destination, weight = item["source"], item["destination"], item["weight"]
        if not isinstance(source, str) or not isinstance(destination, str):
            raise GraphDecodeError("schema", f"edge {i}: source and destination must be strings")
        # bool is an int subclass but not a weight
        if not isinstance(weight, int) or isinstance(weight, bool):
            raise GraphDecodeError("schema", f"edge {i}: weight must be an integer")

        edges.append(Edge(source, destination, weight))
    return edges


def decode_graph(text: str, kind: GraphKind = GraphKind.DIRECTED) -> Graph:
    """Decode a JSON array into a graph of the given kind.

    The edges are taken as given; undirected input is not symmetrized.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("json syntax error: %s", e)
        raise GraphDecodeError("syntax", str(e)) from e
    except RecursionError as e:
        raise GraphDecodeError("syntax", "input is nested too deeply") from e

    edges = edges_from_json_data(data)
    return graph_class(kind)(edges)


def load_graph(path: Path, kind: GraphKind = GraphKind.DIRECTED) -> Graph:
    """Read and decode a JSON edge file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise GraphDecodeError("io", f"Cannot read {path}: {e}") from e
    graph = decode_graph(text, kind)
    logger.debug("loaded %r from %s", graph, path)
    return graph


def save_graph(graph: Graph, path: Path, indent: int | None = 2) -> None:
    """Write a graph as a JSON edge file."""
    path.write_text(encode_graph(graph, indent=indent) + "\n", encoding="utf-8")
    logger.debug("saved %r to %s", graph, path)


def graph_summary(graph: Graph) -> dict[str, Any]:
    """JSON-ready overview: kind, counts, edges and weighted neighbors."""
    vertices = sorted(graph.vertices)
    return {
        "type": graph.kind.value,
        "num_vertices": graph.num_vertices,
        "num_edges": graph.num_edges,
        "vertices": vertices,
        "edges": edges_to_json_data(graph),
        "weighted_neighbors": {
            v: [[n, w] for n, w in sorted(graph.weighted_neighbors(v))] for v in vertices
        },
    }
