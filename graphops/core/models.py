"""Data models for graphops."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Vertex = str


class GraphKind(Enum):
    """The two graph variants."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


@dataclass(frozen=True)
class Edge:
    """A weighted connection from ``source`` to ``destination``."""

    source: Vertex
    destination: Vertex
    weight: int

    def reversed(self) -> Edge:
        """The reciprocal edge, same weight."""
        return Edge(self.destination, self.source, self.weight)

    def sort_key(self) -> tuple[Vertex, Vertex, int]:
        return (self.source, self.destination, self.weight)

    def __str__(self) -> str:
        return f"({self.source} -> {self.destination}, {self.weight})"
