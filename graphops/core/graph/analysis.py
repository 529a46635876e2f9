"""Graph analysis: cycle detection."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from graphops.log import get_logger

if TYPE_CHECKING:
    from graphops.core.graph.base import Graph
    from graphops.core.models import Vertex

logger = get_logger(__name__)


def has_cycle(graph: Graph) -> bool:
    """Check for cycles with an explicit-stack DFS from every component. O(V + E).

    A neighbor still on the open path closes a cycle; self-loops count. On an
    undirected graph the edge back to the vertex we arrived from is ignored,
    since every edge is stored in both directions.
    """
    visited: set[Vertex] = set()

    for root in sorted(graph.vertices):
        if root in visited:
            continue
        if _cycle_from(graph, root, visited):
            logger.debug("cycle reachable from %s", root)
            return True

    return False


def _cycle_from(graph: Graph, root: Vertex, visited: set[Vertex]) -> bool:
    """DFS from ``root`` over unvisited vertices; adds what it finishes to ``visited``."""
    on_path: set[Vertex] = {root}
    # (vertex, vertex we arrived from, neighbors still to look at)
    stack: list[tuple[Vertex, Vertex | None, Iterator[Vertex]]] = [
        (root, None, iter(sorted(graph.neighbors(root))))
    ]

    while stack:
        vertex, parent, pending = stack[-1]
        descended = False

        for neighbor in pending:
            if neighbor in on_path:
                if graph.directed or neighbor != parent:
                    return True
                continue
            if neighbor in visited:
                continue
            on_path.add(neighbor)
            stack.append((neighbor, vertex, iter(sorted(graph.neighbors(neighbor)))))
            descended = True
            break

        if not descended:
            stack.pop()
            on_path.discard(vertex)
            visited.add(vertex)

    return False
