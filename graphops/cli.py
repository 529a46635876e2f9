"""CLI entry point for graphops."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from graphops import config
from graphops.core.exceptions import GraphDecodeError
from graphops.core.graph import bfs, dfs, dijkstra, has_cycle
from graphops.core.graph.base import Graph, graph_class
from graphops.core.models import Edge, GraphKind
from graphops.formats import graph_summary, load_graph, save_graph, to_dot
from graphops.log import configure_logging

app = typer.Typer(
    name="graphops",
    help="Immutable weighted graphs: traversal, cycles and shortest paths.",
    no_args_is_help=True,
)
console = Console()

GraphFile = Annotated[Path, typer.Argument(help="JSON file holding an array of edges")]
Undirected = Annotated[
    bool, typer.Option("--undirected", "-u", help="Treat the edges as an undirected graph")
]
OutputJson = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


def get_kind(undirected: bool) -> GraphKind:
    return GraphKind.UNDIRECTED if undirected else GraphKind.DIRECTED


def open_graph(path: Path, undirected: bool) -> Graph:
    """Load the graph file, or exit with code 1 if it cannot be decoded."""
    try:
        return load_graph(path, get_kind(undirected))
    except GraphDecodeError as e:
        console.print(f"[red]Could not load {escape(str(path))}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.callback()
def main(
    log_level: Annotated[
        str, typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    ] = config.LOG_LEVEL,
) -> None:
    """Immutable weighted graphs: traversal, cycles and shortest paths."""
    configure_logging(log_level)


@app.command()
def shell(
    undirected: Annotated[
        bool | None,
        typer.Option(
            "--undirected/--directed", "-u/-d", help="Graph type (asks when omitted)"
        ),
    ] = None,
) -> None:
    """Start the interactive graph shell."""
    from graphops.shell import GraphShell

    kind = None if undirected is None else get_kind(undirected)
    GraphShell(console=console, kind=kind).run()


@app.command()
def info(path: GraphFile, undirected: Undirected = False, output_json: OutputJson = False) -> None:
    """Show vertices, edges and weighted neighbors."""
    graph = open_graph(path, undirected)
    vertices = sorted(graph.vertices)

    if output_json:
        print(json.dumps(graph_summary(graph)))
        return

    console.print(f"Type: [cyan]{graph.kind.value}[/]")
    console.print(f"Vertices ({graph.num_vertices}): {escape(', '.join(vertices))}")
    console.print(f"Edges ({graph.num_edges}):")
    for e in sorted(graph.edges, key=Edge.sort_key):
        console.print(f"  {escape(str(e))}")
    console.print("Weighted neighbors:")
    for v in vertices:
        pairs = ", ".join(f"({n}, {w})" for n, w in sorted(graph.weighted_neighbors(v)))
        console.print(f"  [cyan]{escape(v)}[/] -> {escape(pairs)}")


def _print_order(label: str, start: str, order: list[str], output_json: bool) -> None:
    if output_json:
        print(json.dumps({"start": start, "order": order}))
    elif not order:
        console.print(f"Vertex '[cyan]{escape(start)}[/cyan]' not found in graph.")
    else:
        console.print(f"{label} from [cyan]{escape(start)}[/]: {escape(' -> '.join(order))}")


@app.command("dfs")
def dfs_command(
    path: GraphFile,
    start: Annotated[str, typer.Argument(help="Start vertex")],
    undirected: Undirected = False,
    output_json: OutputJson = False,
) -> None:
    """Depth-first traversal order from a start vertex."""
    graph = open_graph(path, undirected)
    _print_order("DFS", start, dfs(graph, start), output_json)


@app.command("bfs")
def bfs_command(
    path: GraphFile,
    start: Annotated[str, typer.Argument(help="Start vertex")],
    undirected: Undirected = False,
    output_json: OutputJson = False,
) -> None:
    """Breadth-first traversal order from a start vertex."""
    graph = open_graph(path, undirected)
    _print_order("BFS", start, bfs(graph, start), output_json)


@app.command()
def cycle(path: GraphFile, undirected: Undirected = False, output_json: OutputJson = False) -> None:
    """Check whether the graph has a cycle."""
    graph = open_graph(path, undirected)
    found = has_cycle(graph)

    if output_json:
        print(json.dumps({"has_cycle": found}))
    elif found:
        console.print("[yellow]Graph has a cycle.[/]")
    else:
        console.print("[green]Graph has no cycle.[/]")


@app.command("dijkstra")
def dijkstra_command(
    path: GraphFile,
    start: Annotated[str, typer.Argument(help="Start vertex")],
    undirected: Undirected = False,
    output_json: OutputJson = False,
) -> None:
    """Shortest distances from a start vertex (non-negative weights)."""
    graph = open_graph(path, undirected)
    distances = dijkstra(graph, start)

    if output_json:
        print(json.dumps({"start": start, "distances": dict(sorted(distances.items()))}))
        return

    if not distances:
        console.print(f"Vertex '[cyan]{escape(start)}[/cyan]' not found in graph.")
        return
    console.print(f"Shortest distances from [cyan]{escape(start)}[/]:")
    for vertex, distance in sorted(distances.items()):
        console.print(f"  To [cyan]{escape(vertex)}[/]: {distance}")


@app.command()
def dot(
    path: GraphFile,
    undirected: Undirected = False,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write DOT to this file")
    ] = None,
) -> None:
    """Render the graph as Graphviz DOT."""
    graph = open_graph(path, undirected)
    text = to_dot(graph)

    if output is None:
        print(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        console.print(f"[green]Wrote[/green] {escape(str(output))}")


def _edit(path: Path, edge: Edge, undirected: bool, adding: bool) -> None:
    if adding and not path.exists():
        graph = graph_class(get_kind(undirected))()
    else:
        graph = open_graph(path, undirected)

    updated = graph.add_edge(edge) if adding else graph.remove_edge(edge)
    save_graph(updated, path, indent=config.JSON_INDENT)

    if updated == graph:
        console.print(f"[dim]No change: {escape(str(edge))}[/]")
    else:
        verb = "Added" if adding else "Removed"
        console.print(f"[green]{verb}[/green] {escape(str(edge))}")
    console.print(f"  Vertices: {updated.num_vertices}  Edges: {updated.num_edges}")


@app.command("add-edge")
def add_edge(
    path: GraphFile,
    source: Annotated[str, typer.Argument(help="Source vertex")],
    destination: Annotated[str, typer.Argument(help="Destination vertex")],
    weight: Annotated[int, typer.Argument(help="Integer edge weight")],
    undirected: Undirected = False,
) -> None:
    """Add an edge to a JSON graph file (created if missing)."""
    _edit(path, Edge(source, destination, weight), undirected, adding=True)


@app.command("remove-edge")
def remove_edge(
    path: GraphFile,
    source: Annotated[str, typer.Argument(help="Source vertex")],
    destination: Annotated[str, typer.Argument(help="Destination vertex")],
    weight: Annotated[int, typer.Argument(help="Integer edge weight")],
    undirected: Undirected = False,
) -> None:
    """Remove an edge from a JSON graph file."""
    _edit(path, Edge(source, destination, weight), undirected, adding=False)


if __name__ == "__main__":
    app()
