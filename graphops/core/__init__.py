"""
Core module: data models, exceptions, graphs and algorithms.

Models (models.py):
    - Edge: an immutable weighted connection between two vertices
    - Vertex: vertex identifier (a string)
    - GraphKind: directed or undirected

Exceptions (exceptions.py):
    - GraphError: Base exception for all graphops errors
    - GraphDecodeError: JSON input could not be turned into a graph
    - InvalidInputError: User text (e.g. a weight) could not be parsed

Graphs (graph/):
    - DirectedGraph, UndirectedGraph and the dfs/bfs/has_cycle/dijkstra algorithms
"""

from graphops.core.exceptions import (
    GraphDecodeError,
    GraphError,
    InvalidInputError,
)
from graphops.core.graph import DirectedGraph, Graph, UndirectedGraph, graph_class
from graphops.core.models import Edge, GraphKind, Vertex

__all__ = [
    # Models
    "Edge",
    "GraphKind",
    "Vertex",
    # Graphs
    "Graph",
    "DirectedGraph",
    "UndirectedGraph",
    "graph_class",
    # Exceptions
    "GraphError",
    "GraphDecodeError",
    "InvalidInputError",
]
