"""Graphviz DOT rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphops.core.models import Edge

if TYPE_CHECKING:
    from graphops.core.graph.base import Graph


def _quote(name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def to_dot(graph: Graph) -> str:
    """Render a graph in the DOT language.

    Every vertex is declared once. Directed graphs emit one ``->`` line per
    edge; undirected graphs emit one ``--`` line per reciprocal pair.
    """
    lines = [f"  {_quote(v)};" for v in sorted(graph.vertices)]

    if graph.directed:
        header, arrow = "digraph G {", "->"
        drawn = sorted(graph.edges, key=Edge.sort_key)
    else:
        header, arrow = "graph G {", "--"
        seen: set[tuple[str, str, int]] = set()
        drawn = []
        for e in sorted(graph.edges, key=Edge.sort_key):
            if (e.destination, e.source, e.weight) in seen:
                continue
            seen.add((e.source, e.destination, e.weight))
            drawn.append(e)

    lines.extend(
        f'  {_quote(e.source)} {arrow} {_quote(e.destination)} [label="{e.weight}"];'
        for e in drawn
    )
    return "\n".join([header, *lines, "}"])
