"""
Concrete directed, weighted graph with observed searches.

Implements the Graph interface using a vertex -> (neighbour -> weight)
mapping, and exposes BFS, DFS and Dijkstra entry points that report to the
registered observers. Searches never mutate the graph.
"""

from typing import Dict, Iterable, Iterator, Mapping, Optional, TypeVar, Union
import logging

from algorithms import ShortestPathEngine, TraversalEngine
from dijkstra_engine import SimpleDijkstraEngine
from graph import Graph
from graph_errors import DuplicateVertexError, InvalidWeightError, UnknownVertexError
from observers import GraphAlgorithmObserver, ObserverRegistry
from traversal_engine import BreadthFirstEngine, DepthFirstEngine

V = TypeVar("V")

logger = logging.getLogger(__name__)


class WeightedGraph(Graph[V]):
    """
    Directed graph with strictly positive integer edge weights.

    Never stores duplicate vertices. Every edge endpoint must be added as a
    vertex first.
    """

    def __init__(
        self,
        bfs_engine: Optional[TraversalEngine] = None,
        dfs_engine: Optional[TraversalEngine] = None,
        dijkstra_engine: Optional[ShortestPathEngine] = None,
    ) -> None:
        self._adj: Dict[V, Dict[V, int]] = {}
        self._observers: ObserverRegistry[V] = ObserverRegistry()
        self._bfs = bfs_engine or BreadthFirstEngine()
        self._dfs = dfs_engine or DepthFirstEngine()
        self._dijkstra = dijkstra_engine or SimpleDijkstraEngine()

    # --- Mutation API --------------------------------------------------------

    def add_observer(self, observer: GraphAlgorithmObserver[V]) -> None:
        self._observers.add(observer)

    def add_vertex(self, vertex: V) -> None:
        """
        Add a vertex with no outgoing edges.

        Raises DuplicateVertexError if the vertex is already present.
        """
        if vertex in self._adj:
            raise DuplicateVertexError(f"vertex {vertex!r} is already in the graph")
        self._adj[vertex] = {}

    def add_edge(self, src: V, dst: V, weight: int) -> None:
        """
        Add or update a directed edge src -> dst with weight.

        Both vertices must already be present and weight must be a positive
        int. Re-adding an edge overwrites the previous weight.
        """
        self._require(src)
        self._require(dst)
        # bool is an int subclass but never a meaningful weight.
        if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
            raise InvalidWeightError(f"edge weight must be a positive int, got {weight!r}")
        self._adj[src][dst] = weight

    # --- Queries -------------------------------------------------------------

    def contains_vertex(self, vertex: V) -> bool:
        return vertex in self._adj

    def get_weight(self, src: V, dst: V) -> Optional[int]:
        """
        Weight of the edge src -> dst, or None if there is no such edge.

        Raises UnknownVertexError if either vertex is not in the graph.
        """
        self._require(src)
        self._require(dst)
        return self._adj[src].get(dst)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[V]:
        return iter(self._adj)

    def edge_count(self) -> int:
        return sum(len(out) for out in self._adj.values())

    @property
    def observers(self) -> Iterable[GraphAlgorithmObserver[V]]:
        return self._observers

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> Iterable[V]:
        return self._adj.keys()

    def outgoing(self, vertex: V) -> Mapping[V, int]:
        self._require(vertex)
        return dict(self._adj[vertex])  # defensive copy

    # --- Searches ------------------------------------------------------------

    def run_bfs(self, start: V, end: V) -> None:
        """Breadth-first search from start, stopping just after end is visited."""
        self._run(self._bfs, start, end)

    def run_dfs(self, start: V, end: V) -> None:
        """Depth-first search from start, stopping just after end is visited."""
        self._run(self._dfs, start, end)

    def run_dijkstra(self, start: V, end: V) -> None:
        """
        Dijkstra from start over every vertex, then report the start..end path.

        Does not stop at end. Raises PathNotFoundError after all vertices are
        finished if end cannot be reached.
        """
        self._run(self._dijkstra, start, end)

    # --- Internal helpers ----------------------------------------------------

    def _run(self, engine: Union[TraversalEngine, ShortestPathEngine], start: V, end: V) -> None:
        self._require(start)
        self._require(end)
        logger.debug(
            "running %s from %r to %r over %d vertices",
            type(engine).__name__,
            start,
            end,
            len(self._adj),
        )
        engine.search(self, self._observers, start, end)

    def _require(self, vertex: V) -> None:
        if vertex not in self._adj:
            raise UnknownVertexError(f"vertex {vertex!r} is not in the graph")
