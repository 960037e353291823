"""
Breadth-first and depth-first search engines.

Both share one visited-set/frontier loop and differ only in which end of the
frontier the next vertex is taken from.
"""

from abc import abstractmethod
from collections import deque
from typing import Deque, Iterable, List, Set, TypeVar
import logging

from algorithms import TraversalEngine
from graph import Graph
from observers import GraphAlgorithmObserver, RecordingObserver

V = TypeVar("V")

logger = logging.getLogger(__name__)


class FrontierSearchEngine(TraversalEngine):
    """
    Observed search with lazy deletion of stale frontier entries.

    A vertex may sit on the frontier several times; the visited check at pop
    time guarantees it is visited at most once.
    """

    name = "frontier"

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_pops = 0
        self.last_pushes = 0

    @abstractmethod
    def _announce(self, observer: GraphAlgorithmObserver[V]) -> None:
        raise NotImplementedError

    @abstractmethod
    def _pop(self, frontier: Deque[V]) -> V:
        raise NotImplementedError

    def search(
        self,
        graph: Graph[V],
        observers: Iterable[GraphAlgorithmObserver[V]],
        start: V,
        end: V,
    ) -> None:
        self.last_pops = 0
        self.last_pushes = 0
        observers = list(observers)

        for observer in observers:
            self._announce(observer)

        visited: Set[V] = set()
        frontier: Deque[V] = deque([start])
        self.last_pushes = 1

        while frontier:
            current = self._pop(frontier)
            self.last_pops += 1

            # Skip outdated entries
            if current in visited:
                continue

            visited.add(current)
            for observer in observers:
                observer.notify_visit(current)

            if current == end:
                for observer in observers:
                    observer.notify_search_is_over()
                logger.debug("%s reached %r after %d visits", self.name, end, len(visited))
                return

            for neighbor in graph.outgoing(current):
                if neighbor not in visited:
                    frontier.append(neighbor)
                    self.last_pushes += 1

        logger.debug("%s exhausted frontier without reaching %r", self.name, end)


class BreadthFirstEngine(FrontierSearchEngine):
    """FIFO frontier: vertices are visited in order of hop distance."""

    name = "bfs"

    def _announce(self, observer: GraphAlgorithmObserver[V]) -> None:
        observer.notify_bfs_has_begun()

    def _pop(self, frontier: Deque[V]) -> V:
        return frontier.popleft()


class DepthFirstEngine(FrontierSearchEngine):
    """LIFO frontier: the most recently discovered vertex is explored first."""

    name = "dfs"

    def _announce(self, observer: GraphAlgorithmObserver[V]) -> None:
        observer.notify_dfs_has_begun()

    def _pop(self, frontier: Deque[V]) -> V:
        return frontier.pop()


def visit_order(engine: TraversalEngine, graph: Graph[V], start: V, end: V) -> List[V]:
    """Run engine without external observers and return the vertices it visited."""
    recorder: RecordingObserver[V] = RecordingObserver()
    engine.search(graph, [recorder], start, end)
    return recorder.visited()
