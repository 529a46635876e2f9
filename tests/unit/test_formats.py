"""Unit tests for the JSON codec and DOT renderer."""

import json
import tempfile
from pathlib import Path

import pytest

from graphops.core.graph import DirectedGraph, UndirectedGraph
from graphops.core.models import Edge, GraphKind
from graphops.formats import (
    decode_graph,
    encode_graph,
    graph_summary,
    load_graph,
    save_graph,
    to_dot,
)


def dot_lines(text: str) -> set[str]:
    """Trimmed, non-empty DOT lines."""
    return {line.strip() for line in text.splitlines() if line.strip()}


@pytest.fixture
def directed_graph() -> DirectedGraph:
    return (
        DirectedGraph.empty()
        .add_edge(Edge("A", "B", 10))
        .add_edge(Edge("B", "C", 20))
        .add_edge(Edge("A", "C", 15))
        .add_edge(Edge("D", "E", 5))
    )


@pytest.fixture
def undirected_graph() -> UndirectedGraph:
    return (
        UndirectedGraph.empty()
        .add_edge(Edge("X", "Y", 5))
        .add_edge(Edge("Y", "Z", 8))
        .add_edge(Edge("X", "Z", 12))
    )


class TestJsonCodec:
    """Tests for JSON encoding and decoding."""

    def test_encode_shape(self) -> None:
        graph = DirectedGraph.empty().add_edge(Edge("A", "B", 10))
        assert json.loads(encode_graph(graph)) == [
            {"source": "A", "destination": "B", "weight": 10}
        ]

    def test_encode_is_sorted(self, directed_graph: DirectedGraph) -> None:
        data = json.loads(encode_graph(directed_graph))
        keys = [(d["source"], d["destination"]) for d in data]
        assert keys == [("A", "B"), ("A", "C"), ("B", "C"), ("D", "E")]

    def test_round_trip_directed(self, directed_graph: DirectedGraph) -> None:
        decoded = decode_graph(encode_graph(directed_graph), GraphKind.DIRECTED)
        assert isinstance(decoded, DirectedGraph)
        assert decoded.edges == directed_graph.edges

    def test_round_trip_undirected(self, undirected_graph: UndirectedGraph) -> None:
        decoded = decode_graph(encode_graph(undirected_graph, indent=2), GraphKind.UNDIRECTED)
        assert isinstance(decoded, UndirectedGraph)
        assert decoded.num_edges == 6
        assert decoded == undirected_graph

    def test_decode_undirected_is_not_symmetrized(self) -> None:
        text = '[{"source": "A", "destination": "B", "weight": 3}]'
        graph = decode_graph(text, GraphKind.UNDIRECTED)
        assert graph.edges == {Edge("A", "B", 3)}
        # add_edge restores the pair
        assert graph.add_edge(Edge("A", "B", 3)).num_edges == 2

    def test_decode_empty_array(self) -> None:
        assert decode_graph("[]") == DirectedGraph.empty()

    def test_decode_collapses_duplicates(self) -> None:
        item = '{"source": "A", "destination": "B", "weight": 1}'
        assert decode_graph(f"[{item}, {item}]").num_edges == 1

    def test_save_and_load(self, undirected_graph: UndirectedGraph) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "graph.json"
            save_graph(undirected_graph, path)
            assert load_graph(path, GraphKind.UNDIRECTED) == undirected_graph

    def test_summary(self) -> None:
        graph = UndirectedGraph.empty().add_edge(Edge("A", "B", 2))
        summary = graph_summary(graph)
        assert summary["type"] == "undirected"
        assert summary["num_vertices"] == 2
        assert summary["num_edges"] == 2
        assert summary["weighted_neighbors"] == {"A": [["B", 2]], "B": [["A", 2]]}


class TestDot:
    """Tests for DOT rendering."""

    def test_directed(self, directed_graph: DirectedGraph) -> None:
        expected = {
            "digraph G {",
            '"A";',
            '"B";',
            '"C";',
            '"D";',
            '"E";',
            '"A" -> "B" [label="10"];',
            '"B" -> "C" [label="20"];',
            '"A" -> "C" [label="15"];',
            '"D" -> "E" [label="5"];',
            "}",
        }
        assert dot_lines(to_dot(directed_graph)) == expected

    def test_undirected_emits_each_edge_once(self, undirected_graph: UndirectedGraph) -> None:
        expected = {
            "graph G {",
            '"X";',
            '"Y";',
            '"Z";',
            '"X" -- "Y" [label="5"];',
            '"Y" -- "Z" [label="8"];',
            '"X" -- "Z" [label="12"];',
            "}",
        }
        lines = to_dot(undirected_graph).splitlines()
        assert dot_lines(to_dot(undirected_graph)) == expected
        assert sum("--" in line for line in lines) == 3

    def test_empty(self) -> None:
        assert dot_lines(to_dot(DirectedGraph.empty())) == {"digraph G {", "}"}
        assert dot_lines(to_dot(UndirectedGraph.empty())) == {"graph G {", "}"}

    def test_undirected_self_loop(self) -> None:
        graph = UndirectedGraph.empty().add_edge(Edge("A", "A", 1))
        assert '"A" -- "A" [label="1"];' in dot_lines(to_dot(graph))

    def test_quotes_are_escaped(self) -> None:
        graph = DirectedGraph.empty().add_edge(Edge('say "hi"', "B", 1))
        assert '"say \\"hi\\"" -> "B" [label="1"];' in dot_lines(to_dot(graph))
