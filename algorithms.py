"""
Algorithm interfaces for graph searches.

Keeps the search algorithms separate from graph storage and observer wiring.
Engines hold no per-run state between calls beyond instrumentation counters.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, TypeVar

from graph import Graph
from observers import GraphAlgorithmObserver

V = TypeVar("V")


class TraversalEngine(ABC):
    """
    Interface for an observed start -> end search (BFS, DFS).
    """

    @abstractmethod
    def search(
        self,
        graph: Graph[V],
        observers: Iterable[GraphAlgorithmObserver[V]],
        start: V,
        end: V,
    ) -> None:
        """
        Visit vertices from start until end is visited or nothing is left.

        Observers receive the begin event, one visit per vertex, and a
        search-over event only if end was reached.
        """
        raise NotImplementedError


class ShortestPathEngine(ABC):
    """
    Interface for observed single-source shortest path computation.
    """

    @abstractmethod
    def shortest_paths(
        self,
        graph: Graph[V],
        source: V,
        observers: Iterable[GraphAlgorithmObserver[V]] = (),
    ) -> tuple[Dict[V, float], Dict[V, V]]:
        """
        Finish every vertex of the graph, notifying observers as each is finished.

        Returns:
            (cost, prev) where cost covers every vertex (math.inf when
            unreachable) and prev records the parent of each reachable
            vertex other than source.
        """
        raise NotImplementedError

    @abstractmethod
    def search(
        self,
        graph: Graph[V],
        observers: Iterable[GraphAlgorithmObserver[V]],
        start: V,
        end: V,
    ) -> None:
        """
        Run the full algorithm from start and report the start..end path.
        """
        raise NotImplementedError
