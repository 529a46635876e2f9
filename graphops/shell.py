"""Interactive menu session over a single graph value."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from graphops import config
from graphops.core.exceptions import GraphDecodeError, InvalidInputError
from graphops.core.graph import bfs, dfs, dijkstra, has_cycle
from graphops.core.graph.base import Graph, graph_class
from graphops.core.models import Edge, GraphKind
from graphops.formats import decode_graph, encode_graph, to_dot
from graphops.log import get_logger

logger = get_logger(__name__)

MENU = (
    "Add Edge",
    "Remove Edge",
    "Show Graph Details",
    "Perform DFS",
    "Perform BFS",
    "Check for Cycle",
    "Run Dijkstra's Algorithm",
    "Export to JSON",
    "Import from JSON",
    "Generate GraphViz DOT",
    "Exit",
)

_VIEWER_HINT = (
    "You can paste this into a GraphViz viewer "
    "(e.g. https://dreampuf.github.io/GraphvizOnline/) to visualize your graph."
)


def parse_weight(text: str) -> int:
    """Parse an edge weight typed by the user."""
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidInputError("Invalid weight. Must be an integer.") from None


def parse_kind(text: str, default: GraphKind) -> GraphKind:
    """``d``/``u`` (or the full words) to a GraphKind; anything else is ``default``."""
    answer = text.strip().lower()
    if answer in ("u", "undirected"):
        return GraphKind.UNDIRECTED
    if answer in ("d", "directed"):
        return GraphKind.DIRECTED
    return default


class GraphShell:
    """Menu loop holding the current graph.

    ``read_line`` takes a prompt and returns the user's line; it raises
    EOFError when input runs out, which ends the session.
    """

    def __init__(
        self,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
        kind: GraphKind | None = None,
    ) -> None:
        self.console = console or Console()
        self._read_line = read_line or self.console.input
        self._ask_kind = kind is None
        self.graph: Graph = graph_class(kind or config.default_kind())()
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_edge,
            "2": self.remove_edge,
            "3": self.show_details,
            "4": self.perform_dfs,
            "5": self.perform_bfs,
            "6": self.check_cycle,
            "7": self.run_dijkstra,
            "8": self.export_json,
            "9": self.import_json,
            "10": self.generate_dot,
        }

    @property
    def kind_label(self) -> str:
        return "Directed" if self.graph.directed else "Undirected"

    def _ask(self, prompt: str) -> str:
        return self._read_line(prompt).strip()

    def _print(self, text: str) -> None:
        """Print literal text, no markup or wrapping."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def run(self) -> None:
        """Run until the user exits or input ends."""
        self.console.print("[bold]Welcome to the graphops shell![/]")
        try:
            if self._ask_kind:
                self.console.print(
                    "Choose graph type: (D)irected or (U)ndirected. "
                    f"Default is {config.default_kind().value.capitalize()}."
                )
                kind = parse_kind(self._ask("> "), config.default_kind())
                self.graph = graph_class(kind)()
                self._ask_kind = False
            logger.debug("shell started with %r", self.graph)

            while True:
                self._show_menu()
                choice = self._ask("Enter your choice: ")
                if choice == str(len(MENU)):
                    break
                action = self._actions.get(choice)
                if action is None:
                    self.console.print("[red]Invalid choice. Please try again.[/]")
                    continue
                try:
                    action()
                except InvalidInputError as e:
                    self.console.print(f"[red]{escape(str(e))}[/]")
        except EOFError:
            self.console.print()

        self.console.print("Exiting application. Goodbye!")

    def _show_menu(self) -> None:
        self.console.print("\n[bold]--- Menu ---[/]")
        for number, label in enumerate(MENU, start=1):
            self.console.print(f"{number}. {label}")

    def _read_edge(self, what: str) -> Edge:
        source = self._ask(f"Enter source vertex{what}: ")
        destination = self._ask(f"Enter destination vertex{what}: ")
        weight = parse_weight(self._ask(f"Enter weight{what} (integer): "))
        return Edge(source, destination, weight)

    def add_edge(self) -> None:
        edge = self._read_edge("")
        self.graph = self.graph.add_edge(edge)
        self.console.print(f"Edge {escape(str(edge))} added.")

    def remove_edge(self) -> None:
        edge = self._read_edge(" of edge to remove")
        self.graph = self.graph.remove_edge(edge)
        self.console.print(f"Edge {escape(str(edge))} removed (if it existed).")

    def show_details(self) -> None:
        graph = self.graph
        vertices = sorted(graph.vertices)
        edges = sorted(graph.edges, key=Edge.sort_key)
        self.console.print(f"Current Graph Type: [cyan]{self.kind_label}[/]")
        self._print(f"Vertices ({graph.num_vertices}): {', '.join(vertices)}")
        self._print(f"Edges ({graph.num_edges}): {', '.join(str(e) for e in edges)}")
        self.console.print("Weighted Neighbors:")
        for v in vertices:
            pairs = ", ".join(f"({n}, {w})" for n, w in sorted(graph.weighted_neighbors(v)))
            self._print(f"  {v} -> {pairs}")

    def _ask_start(self, label: str) -> str | None:
        start = self._ask(f"Enter start vertex for {label}: ")
        if not self.graph.contains_vertex(start):
            self.console.print(f"[yellow]Vertex '{escape(start)}' not found in graph.[/]")
            return None
        return start

    def perform_dfs(self) -> None:
        start = self._ask_start("DFS")
        if start is not None:
            self._print(f"DFS from {start}: {' -> '.join(dfs(self.graph, start))}")

    def perform_bfs(self) -> None:
        start = self._ask_start("BFS")
        if start is not None:
            self._print(f"BFS from {start}: {' -> '.join(bfs(self.graph, start))}")

    def check_cycle(self) -> None:
        self.console.print(f"Graph has cycle: {has_cycle(self.graph)}")

    def run_dijkstra(self) -> None:
        start = self._ask_start("Dijkstra's")
        if start is None:
            return
        distances = dijkstra(self.graph, start)
        self._print(f"Shortest distances from {start}:")
        for vertex, distance in sorted(distances.items()):
            self._print(f"  To {vertex}: {distance}")

    def export_json(self) -> None:
        self.console.print("\n--- Graph JSON Representation ---")
        self._print(encode_graph(self.graph, indent=config.JSON_INDENT))
        self.console.print("---------------------------------")

    def import_json(self) -> None:
        label = self.kind_label
        text = self._read_line(
            f"Enter JSON string to import (decoded as a {label.lower()} graph): "
        )
        try:
            graph = decode_graph(text, self.graph.kind)
        except GraphDecodeError as e:
            self.console.print(f"[red]Failed to decode {label}Graph from JSON: {escape(str(e))}[/]")
            return
        self.graph = graph
        self.console.print(f"[green]{label} Graph imported successfully.[/]")

    def generate_dot(self) -> None:
        self.console.print("\n--- GraphViz DOT Representation ---")
        self._print(to_dot(self.graph))
        self.console.print("-----------------------------------")
        self._print(_VIEWER_HINT)
