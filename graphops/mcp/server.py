"""MCP server implementation for graphops."""

from __future__ import annotations

import json
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from graphops.core.exceptions import GraphError
from graphops.core.graph import bfs, dfs, dijkstra, has_cycle
from graphops.core.graph.base import Graph, graph_class
from graphops.core.models import GraphKind
from graphops.formats import edges_from_json_data, graph_summary, to_dot
from graphops.log import get_logger

logger = get_logger(__name__)

server = Server("graphops")

_EDGES_SCHEMA: dict[str, Any] = {
    "type": "array",
    "description": "Edges of the graph",
    "items": {
        "type": "object",
        "properties": {
            "source": {"type": "string"},
            "destination": {"type": "string"},
            "weight": {"type": "integer"},
        },
        "required": ["source", "destination", "weight"],
    },
}

_UNDIRECTED_SCHEMA: dict[str, Any] = {
    "type": "boolean",
    "description": "Treat edges as undirected, adding each reciprocal (default: false)",
    "default": False,
}

_START_SCHEMA: dict[str, Any] = {
    "type": "string",
    "description": "Start vertex",
}


def _schema(with_start: bool = False) -> dict[str, Any]:
    properties = {"edges": _EDGES_SCHEMA, "undirected": _UNDIRECTED_SCHEMA}
    required = ["edges"]
    if with_start:
        properties["start"] = _START_SCHEMA
        required.append("start")
    return {"type": "object", "properties": properties, "required": required}


def build_graph(arguments: dict[str, Any]) -> Graph:
    """Graph from tool arguments.

    Undirected graphs are built through add_edge, so callers may send each
    conceptual edge once.
    """
    edges = edges_from_json_data(arguments.get("edges", []))
    if arguments.get("undirected", False):
        graph = graph_class(GraphKind.UNDIRECTED)()
        for edge in edges:
            graph = graph.add_edge(edge)
        return graph
    return graph_class(GraphKind.DIRECTED)(edges)


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="graph_info",
            description="Summarize a graph: vertices, edges and weighted neighbors.",
            inputSchema=_schema(),
        ),
        Tool(
            name="graph_dfs",
            description=(
                "Depth-first traversal from a start vertex. Smallest neighbor first; "
                "returns the visitation order of reachable vertices."
            ),
            inputSchema=_schema(with_start=True),
        ),
        Tool(
            name="graph_bfs",
            description=(
                "Breadth-first traversal from a start vertex. Returns reachable vertices "
                "in order of hop distance."
            ),
            inputSchema=_schema(with_start=True),
        ),
        Tool(
            name="graph_has_cycle",
            description="Check whether the graph contains a cycle (self-loops count).",
            inputSchema=_schema(),
        ),
        Tool(
            name="graph_dijkstra",
            description=(
                "Shortest weighted distances from a start vertex using Dijkstra's algorithm. "
                "Assumes non-negative weights; unreachable vertices are omitted."
            ),
            inputSchema=_schema(with_start=True),
        ),
        Tool(
            name="graph_to_dot",
            description="Render the graph in the Graphviz DOT language.",
            inputSchema=_schema(),
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        result = handle_tool(name, arguments)
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except GraphError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]
    except Exception as e:
        logger.exception("tool %s failed", name)
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]


def handle_tool(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Run one tool and return its JSON-serializable result."""
    graph = build_graph(arguments)

    if name == "graph_info":
        return graph_summary(graph)
    if name == "graph_dfs":
        return {"start": arguments["start"], "order": dfs(graph, arguments["start"])}
    if name == "graph_bfs":
        return {"start": arguments["start"], "order": bfs(graph, arguments["start"])}
    if name == "graph_has_cycle":
        return {"has_cycle": has_cycle(graph)}
    if name == "graph_dijkstra":
        distances = dijkstra(graph, arguments["start"])
        return {"start": arguments["start"], "distances": dict(sorted(distances.items()))}
    if name == "graph_to_dot":
        return {"dot": to_dot(graph)}
    return {"error": f"Unknown tool: {name}"}


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
