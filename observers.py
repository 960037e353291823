"""
Observer protocol for graph algorithms.

Algorithms report progress only through these notifications; they return
nothing. The registry has set semantics: registering an equal observer twice
keeps one copy.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar
import logging

V = TypeVar("V")


class GraphAlgorithmObserver(ABC, Generic[V]):
    """
    Listener for BFS, DFS and Dijkstra progress events.

    Within one observer, events arrive in the order they are fired. No order
    is promised across distinct observers.
    """

    @abstractmethod
    def notify_bfs_has_begun(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def notify_dfs_has_begun(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def notify_dijkstra_has_begun(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def notify_visit(self, vertex: V) -> None:
        """Called once per vertex as it enters the visited set (BFS/DFS only)."""
        raise NotImplementedError

    @abstractmethod
    def notify_search_is_over(self) -> None:
        """Called right after the end vertex is visited; nothing follows it."""
        raise NotImplementedError

    @abstractmethod
    def notify_dijkstra_vertex_finished(self, vertex: V, cost: float) -> None:
        """Called once per vertex as its optimal cost is committed."""
        raise NotImplementedError

    @abstractmethod
    def notify_dijkstra_is_over(self, path: Sequence[V]) -> None:
        """Called with the start..end shortest path once every vertex is finished."""
        raise NotImplementedError


class ObserverRegistry(Generic[V]):
    """
    Set of observers, iterated in registration order.

    Backed by a dict so equal observers collapse to one entry.
    """

    def __init__(self) -> None:
        self._observers: Dict[GraphAlgorithmObserver[V], None] = {}

    def add(self, observer: GraphAlgorithmObserver[V]) -> None:
        self._observers[observer] = None

    def __iter__(self) -> Iterator[GraphAlgorithmObserver[V]]:
        # Snapshot so an observer registering another mid-run cannot break iteration.
        return iter(list(self._observers))

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        return observer in self._observers


class RecordingObserver(GraphAlgorithmObserver[V]):
    """
    Observer that keeps every event as an (event, payload) tuple.

    Handy for tests and for summarising a run after the fact.
    """

    def __init__(self) -> None:
        self.events: List[Tuple[str, Any]] = []

    def notify_bfs_has_begun(self) -> None:
        self.events.append(("bfs_begun", None))

    def notify_dfs_has_begun(self) -> None:
        self.events.append(("dfs_begun", None))

    def notify_dijkstra_has_begun(self) -> None:
        self.events.append(("dijkstra_begun", None))

    def notify_visit(self, vertex: V) -> None:
        self.events.append(("visit", vertex))

    def notify_search_is_over(self) -> None:
        self.events.append(("search_over", None))

    def notify_dijkstra_vertex_finished(self, vertex: V, cost: float) -> None:
        self.events.append(("finished", (vertex, cost)))

    def notify_dijkstra_is_over(self, path: Sequence[V]) -> None:
        self.events.append(("dijkstra_over", list(path)))

    # --- Convenience views ---------------------------------------------------

    def names(self) -> List[str]:
        return [name for name, _ in self.events]

    def visited(self) -> List[V]:
        return [payload for name, payload in self.events if name == "visit"]

    def finished(self) -> Dict[V, float]:
        return dict(payload for name, payload in self.events if name == "finished")

    def search_over_count(self) -> int:
        return self.names().count("search_over")

    def path(self) -> Optional[List[V]]:
        for name, payload in reversed(self.events):
            if name == "dijkstra_over":
                return payload
        return None

    def clear(self) -> None:
        self.events.clear()


class LoggingObserver(GraphAlgorithmObserver[V]):
    """Observer that writes one log record per event."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._level = level

    def notify_bfs_has_begun(self) -> None:
        self._logger.log(self._level, "bfs begun")

    def notify_dfs_has_begun(self) -> None:
        self._logger.log(self._level, "dfs begun")

    def notify_dijkstra_has_begun(self) -> None:
        self._logger.log(self._level, "dijkstra begun")

    def notify_visit(self, vertex: V) -> None:
        self._logger.log(self._level, "visit %r", vertex)

    def notify_search_is_over(self) -> None:
        self._logger.log(self._level, "search is over")

    def notify_dijkstra_vertex_finished(self, vertex: V, cost: float) -> None:
        self._logger.log(self._level, "finished %r cost=%s", vertex, cost)

    def notify_dijkstra_is_over(self, path: Sequence[V]) -> None:
        self._logger.log(self._level, "dijkstra over path=%r", list(path))
