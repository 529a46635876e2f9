"""Depth-first and breadth-first traversal on explicit frontiers."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from graphops.log import get_logger

if TYPE_CHECKING:
    from graphops.core.graph.base import Graph
    from graphops.core.models import Vertex

logger = get_logger(__name__)


def dfs(graph: Graph, start: Vertex) -> list[Vertex]:
    """Vertices reachable from ``start`` in depth-first order. O(V + E) lookups.

    At every branch the smallest unvisited neighbor is explored first.
    Returns an empty list when ``start`` is not in the graph.
    """
    if not graph.contains_vertex(start):
        return []

    stack: list[Vertex] = [start]
    visited: set[Vertex] = set()
    order: list[Vertex] = []

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        # Reversed so the smallest neighbor ends up on top.
        stack.extend(sorted(graph.neighbors(current) - visited, reverse=True))

    logger.debug("dfs from %s visited %d vertices", start, len(order))
    return order


def bfs(graph: Graph, start: Vertex) -> list[Vertex]:
    """Vertices reachable from ``start`` in breadth-first order.

    Neighbors are enqueued in ascending order. Returns an empty list when
    ``start`` is not in the graph.
    """
    if not graph.contains_vertex(start):
        return []

    queue: deque[Vertex] = deque([start])
    visited: set[Vertex] = set()
    order: list[Vertex] = []

    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        queue.extend(sorted(graph.neighbors(current) - visited))

    logger.debug("bfs from %s visited %d vertices", start, len(order))
    return order
