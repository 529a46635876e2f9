"""
Graph values and the algorithms that run on them.

Data Structures:
    - Graph: abstract immutable edge-set graph; vertices derived from the edges
    - DirectedGraph: neighbors follow edge sources only
    - UndirectedGraph: each edge stored as a reciprocal pair

Algorithms (pure functions over the Graph read interface):
    - traversal: dfs, bfs
    - analysis: has_cycle
    - pathfinding: dijkstra
"""

from graphops.core.graph.analysis import has_cycle
from graphops.core.graph.base import DirectedGraph, Graph, UndirectedGraph, graph_class
from graphops.core.graph.pathfinding import dijkstra
from graphops.core.graph.traversal import bfs, dfs

__all__ = [
    "Graph",
    "DirectedGraph",
    "UndirectedGraph",
    "graph_class",
    "dfs",
    "bfs",
    "has_cycle",
    "dijkstra",
]
