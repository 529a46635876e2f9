"""
graphops: immutable weighted graphs and the classic traversals.

graphops models directed and undirected weighted graphs as immutable values
and ships the algorithms that operate on them:
- Depth-first and breadth-first traversal
- Cycle detection across disconnected components
- Single-source shortest paths (Dijkstra)

Usage:
    from graphops.core import DirectedGraph, Edge
    from graphops.core.graph.pathfinding import dijkstra

    graph = DirectedGraph.empty().add_edge(Edge("A", "B", 4))
    distances = dijkstra(graph, "A")
"""

__version__ = "0.1.0"
