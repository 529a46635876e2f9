"""Immutable Graph values backed by a set of edges."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar, TypeVar

from graphops.core.models import Edge, GraphKind, Vertex

G = TypeVar("G", bound="Graph")


class Graph(ABC):
    """Weighted graph whose state is exactly its edge set.

    Vertices are derived from the edges, so a vertex exists only while some
    edge touches it. Values never change: ``add_edge`` and ``remove_edge``
    build a new graph of the same class.
    """

    __slots__ = ("_edges", "_vertices")

    kind: ClassVar[GraphKind]

    def __init__(self, edges: Iterable[Edge] = ()) -> None:
        frozen = frozenset(edges)
        object.__setattr__(self, "_edges", frozen)
        object.__setattr__(
            self, "_vertices", frozenset(v for e in frozen for v in (e.source, e.destination))
        )

    @classmethod
    def empty(cls: type[G]) -> G:
        """A graph with no edges and therefore no vertices."""
        return cls()

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def directed(self) -> bool:
        return self.kind is GraphKind.DIRECTED

    @property
    def vertices(self) -> frozenset[Vertex]:
        return self._vertices

    @property
    def edges(self) -> frozenset[Edge]:
        return self._edges

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    @abstractmethod
    def neighbors(self, vertex: Vertex) -> frozenset[Vertex]:
        """Vertices one edge away from ``vertex``. Empty if it is unknown."""

    @abstractmethod
    def weighted_neighbors(self, vertex: Vertex) -> frozenset[tuple[Vertex, int]]:
        """``(neighbor, weight)`` pairs; parallel edges keep every weight."""

    @abstractmethod
    def add_edge(self: G, edge: Edge) -> G:
        """New graph of the same class with ``edge`` added."""

    @abstractmethod
    def remove_edge(self: G, edge: Edge) -> G:
        """New graph of the same class without ``edge``; a missing edge is a no-op."""

    def contains_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._vertices

    def contains_edge(self, edge: Edge) -> bool:
        return edge in self._edges

    def get_edge_weight(self, source: Vertex, destination: Vertex) -> int | None:
        """Weight of the ``source -> destination`` edge, or None.

        If several edges share the endpoints the smallest weight wins.
        """
        weights = [
            e.weight for e in self._edges if e.source == source and e.destination == destination
        ]
        return min(weights) if weights else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return type(self) is type(other) and self._edges == other._edges

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._edges))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.num_vertices}, edges={self.num_edges})"


class DirectedGraph(Graph):
    """Edges are one-way: ``neighbors`` follows sources only."""

    __slots__ = ()

    kind = GraphKind.DIRECTED

    def neighbors(self, vertex: Vertex) -> frozenset[Vertex]:
        return frozenset(e.destination for e in self._edges if e.source == vertex)

    def weighted_neighbors(self, vertex: Vertex) -> frozenset[tuple[Vertex, int]]:
        return frozenset((e.destination, e.weight) for e in self._edges if e.source == vertex)

    def add_edge(self, edge: Edge) -> DirectedGraph:
        return DirectedGraph(self._edges | {edge})

    def remove_edge(self, edge: Edge) -> DirectedGraph:
        return DirectedGraph(self._edges - {edge})


class UndirectedGraph(Graph):
    """Each conceptual edge is stored as a reciprocal pair of directed edges.

    ``num_edges`` therefore counts both directions. Building one straight
    from an edge iterable keeps the edges as given; only ``add_edge`` and
    ``remove_edge`` maintain the pairs.
    """

    __slots__ = ()

    kind = GraphKind.UNDIRECTED

    def neighbors(self, vertex: Vertex) -> frozenset[Vertex]:
        return frozenset(other for other, _ in self._incident(vertex))

    def weighted_neighbors(self, vertex: Vertex) -> frozenset[tuple[Vertex, int]]:
        return frozenset(self._incident(vertex))

    def _incident(self, vertex: Vertex) -> list[tuple[Vertex, int]]:
        """The far endpoint and weight of every edge touching ``vertex``."""
        result = []
        for e in self._edges:
            if e.source == vertex:
                result.append((e.destination, e.weight))
            elif e.destination == vertex:
                result.append((e.source, e.weight))
        return result

    def add_edge(self, edge: Edge) -> UndirectedGraph:
        return UndirectedGraph(self._edges | {edge, edge.reversed()})

    def remove_edge(self, edge: Edge) -> UndirectedGraph:
        return UndirectedGraph(self._edges - {edge, edge.reversed()})


def graph_class(kind: GraphKind) -> type[Graph]:
    """Concrete Graph class for a kind."""
    if kind is GraphKind.UNDIRECTED:
        return UndirectedGraph
    return DirectedGraph
