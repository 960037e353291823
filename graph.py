"""
Directed, weighted graph abstraction read by the search engines.

Vertices are any hashable values.
Edges are directed: u -> v with a positive integer weight.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Mapping, TypeVar

V = TypeVar("V")


class Graph(ABC, Generic[V]):
    """Read-only view of a directed, weighted graph."""

    @abstractmethod
    def vertices(self) -> Iterable[V]:
        """Return all vertices in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: V) -> Mapping[V, int]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: dict[V, int]
        """
        raise NotImplementedError
