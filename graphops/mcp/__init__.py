"""
MCP server for graphops.

Exposes the graph algorithms to LLMs via the Model Context Protocol. Every
tool takes the graph inline as an array of edge objects.

Tools:
    - graph_info: Vertices, edges and weighted neighbors
    - graph_dfs: Depth-first order from a start vertex
    - graph_bfs: Breadth-first order from a start vertex
    - graph_has_cycle: Whether the graph contains a cycle
    - graph_dijkstra: Shortest distances from a start vertex
    - graph_to_dot: Graphviz DOT rendering

Usage:
    Run: graphops-mcp
"""

import asyncio

from graphops.mcp.server import serve as _serve


def serve() -> None:
    """Entry point for the MCP server."""
    asyncio.run(_serve())


__all__ = ["serve"]
