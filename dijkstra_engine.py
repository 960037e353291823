"""
Heap-based exhaustive Dijkstra engine.

Uses Python's heapq to finish every vertex of any Graph implementation, then
reconstructs a single start -> end path for the observers.
"""

from typing import Dict, Iterable, List, Mapping, Set, Tuple, TypeVar
import heapq
import logging
import math

from algorithms import ShortestPathEngine
from graph import Graph
from graph_errors import PathNotFoundError
from observers import GraphAlgorithmObserver

V = TypeVar("V")

logger = logging.getLogger(__name__)

INFINITY = math.inf


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap.

    Heap entries are (cost, insertion index, vertex), so equal costs are
    broken in favour of the vertex added to the graph first. Vertices never
    reached are finished last, in insertion order, at INFINITY.

    Complexity:
        O(E log V + V).
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    def shortest_paths(
        self,
        graph: Graph[V],
        source: V,
        observers: Iterable[GraphAlgorithmObserver[V]] = (),
    ) -> Tuple[Dict[V, float], Dict[V, V]]:
        """
        Finish every vertex and return the cost and predecessor maps.

        The predecessor map omits source and every unreachable vertex.
        """
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        observers = list(observers)

        order: Dict[V, int] = {v: i for i, v in enumerate(graph.vertices())}
        cost: Dict[V, float] = {v: INFINITY for v in order}
        cost[source] = 0
        prev: Dict[V, V] = {}
        finished: Set[V] = set()

        pq: List[Tuple[float, int, V]] = [(0, order[source], source)]
        self.last_heap_pushes = 1

        while pq:
            d_u, _, u = heapq.heappop(pq)
            self.last_heap_pops += 1

            # Skip outdated entries
            if u in finished or d_u != cost[u]:
                continue

            self._finish(u, d_u, finished, observers)

            for v, w in graph.outgoing(u).items():
                if v in finished:
                    continue
                self.last_edges_examined += 1
                alt = d_u + w
                if alt < cost[v]:
                    cost[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, order[v], v))
                    self.last_heap_pushes += 1
                    self.last_relaxed += 1

        # Whatever the heap never reached still has to be finished.
        for v in order:
            if v not in finished:
                self._finish(v, INFINITY, finished, observers)

        return cost, prev

    def search(
        self,
        graph: Graph[V],
        observers: Iterable[GraphAlgorithmObserver[V]],
        start: V,
        end: V,
    ) -> None:
        observers = list(observers)
        for observer in observers:
            observer.notify_dijkstra_has_begun()

        cost, prev = self.shortest_paths(graph, start, observers)
        path = reconstruct_path(prev, start, end)
        logger.debug("dijkstra %r -> %r cost=%s hops=%d", start, end, cost[end], len(path) - 1)

        for observer in observers:
            observer.notify_dijkstra_is_over(path)

    @staticmethod
    def _finish(
        vertex: V,
        cost: float,
        finished: Set[V],
        observers: List[GraphAlgorithmObserver[V]],
    ) -> None:
        finished.add(vertex)
        for observer in observers:
            observer.notify_dijkstra_vertex_finished(vertex, cost)


def reconstruct_path(prev: Mapping[V, V], start: V, end: V) -> List[V]:
    """
    Walk predecessors back from end and return the start..end path.

    Raises PathNotFoundError when the chain stops before reaching start.
    """
    path: List[V] = [end]
    step = end
    while step in prev:
        step = prev[step]
        path.append(step)
    if step != start:
        raise PathNotFoundError(f"no path from {start!r} to {end!r}")
    path.reverse()
    return path
