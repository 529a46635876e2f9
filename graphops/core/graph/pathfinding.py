"""Single-source shortest paths: Dijkstra on a binary heap."""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING

from graphops.log import get_logger

if TYPE_CHECKING:
    from graphops.core.graph.base import Graph
    from graphops.core.models import Vertex

logger = get_logger(__name__)


def dijkstra(graph: Graph, start: Vertex) -> dict[Vertex, int]:
    """Shortest weight-sum from ``start`` to every reachable vertex. O(E log V).

    Weights are assumed non-negative; that is not checked beyond a warning.
    Unreachable vertices are left out, and an unknown ``start`` gives ``{}``.
    """
    if not graph.contains_vertex(start):
        return {}

    if any(e.weight < 0 for e in graph.edges):
        logger.warning("graph has negative edge weights; dijkstra distances may be wrong")

    dist: dict[Vertex, int] = {start: 0}
    finalized: set[Vertex] = set()
    pq: list[tuple[int, Vertex]] = [(0, start)]

    while pq:
        d_u, u = heapq.heappop(pq)
        if u in finalized or d_u != dist[u]:
            continue
        finalized.add(u)

        for v, w in graph.weighted_neighbors(u):
            if v in finalized:
                continue
            alt = d_u + w
            if v not in dist or alt < dist[v]:
                dist[v] = alt
                heapq.heappush(pq, (alt, v))

    logger.debug("dijkstra from %s reached %d vertices", start, len(dist))
    return dist
