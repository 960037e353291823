"""
Unit tests for SimpleDijkstraEngine through WeightedGraph.
"""

from dataclasses import dataclass
import math

import pytest

from dijkstra_engine import INFINITY, SimpleDijkstraEngine, reconstruct_path
from graph_errors import PathNotFoundError
from observers import RecordingObserver
from weighted_graph import WeightedGraph


@dataclass(frozen=True)
class DummyVertex:
    """
    Minimal hashable vertex for Dijkstra tests.
    """

    _id: str


def _graph(vertices, edges) -> WeightedGraph:
    g = WeightedGraph()
    for v in vertices:
        g.add_vertex(v)
    for src, dst, w in edges:
        g.add_edge(src, dst, w)
    return g


def _run(g: WeightedGraph, start, end) -> RecordingObserver:
    rec = RecordingObserver()
    g.add_observer(rec)
    g.run_dijkstra(start, end)
    return rec


def _path_weight(g: WeightedGraph, path) -> int:
    return sum(g.get_weight(a, b) for a, b in zip(path, path[1:]))


def test_two_hop_path_without_direct_edge():
    a, b, c = DummyVertex("A"), DummyVertex("B"), DummyVertex("C")
    g = _graph([a, b, c], [(a, b, 2), (b, c, 3)])

    rec = _run(g, a, c)

    assert rec.path() == [a, b, c]
    assert rec.finished()[c] == 5


def test_dijkstra_basic_paths():
    # A -> B (1), A -> C (4), B -> C (2)
    g = _graph("ABC", [("A", "B", 1), ("A", "C", 4), ("B", "C", 2)])

    rec = _run(g, "A", "C")

    assert rec.finished() == {"A": 0, "B": 1, "C": 3}
    # Shortest A->C is A->B->C with cost 3
    assert rec.path() == ["A", "B", "C"]
    assert _path_weight(g, rec.path()) == rec.finished()["C"]


def test_event_order():
    g = _graph("AB", [("A", "B", 1)])
    rec = _run(g, "A", "B")
    assert rec.names() == ["dijkstra_begun", "finished", "finished", "dijkstra_over"]


def test_does_not_stop_at_end():
    g = _graph("ABC", [("A", "B", 1), ("B", "C", 1)])
    rec = _run(g, "A", "B")
    assert rec.finished() == {"A": 0, "B": 1, "C": 2}
    assert rec.path() == ["A", "B"]


def test_unreachable_vertices_finish_at_infinity():
    g = _graph("ABC", [("A", "B", 2)])
    rec = _run(g, "A", "B")

    finished = [payload for name, payload in rec.events if name == "finished"]
    assert finished == [("A", 0), ("B", 2), ("C", INFINITY)]
    assert math.isinf(rec.finished()["C"])
    assert rec.path() == ["A", "B"]


def test_unreachable_end_raises_after_finishing_everything():
    g = _graph("ABC", [("A", "B", 2)])
    rec = RecordingObserver()
    g.add_observer(rec)

    with pytest.raises(PathNotFoundError):
        g.run_dijkstra("A", "C")

    assert set(rec.finished()) == {"A", "B", "C"}
    assert "dijkstra_over" not in rec.names()


def test_each_vertex_finished_exactly_once():
    # dense-ish graph with many relaxations
    edges = [
        ("A", "B", 7), ("A", "C", 9), ("A", "F", 14),
        ("B", "C", 10), ("B", "D", 15), ("C", "D", 11),
        ("C", "F", 2), ("D", "E", 6), ("E", "F", 9), ("F", "E", 9),
    ]
    g = _graph("ABCDEFG", edges)
    rec = _run(g, "A", "E")

    finished = [payload[0] for name, payload in rec.events if name == "finished"]
    assert sorted(finished) == list("ABCDEFG")
    assert rec.finished()["E"] == 20
    assert rec.path() == ["A", "C", "F", "E"]
    assert _path_weight(g, rec.path()) == 20


def test_costs_are_finished_in_nondecreasing_order():
    edges = [("A", "B", 3), ("A", "C", 1), ("C", "B", 1), ("B", "D", 1), ("C", "D", 5)]
    g = _graph("ABCD", edges)
    rec = _run(g, "A", "D")

    costs = [payload[1] for name, payload in rec.events if name == "finished"]
    assert costs == sorted(costs)
    assert rec.path() == ["A", "C", "B", "D"]


def test_ties_go_to_earliest_added_vertex():
    g = _graph(["A", "C", "B"], [("A", "B", 1), ("A", "C", 1)])
    rec = _run(g, "A", "B")
    finished = [payload[0] for name, payload in rec.events if name == "finished"]
    assert finished == ["A", "C", "B"]


def test_equal_cost_route_keeps_first_predecessor():
    # A -> B direct (4) and A -> C -> B (1 + 3) cost the same; strict < keeps A.
    g = _graph("ABC", [("A", "B", 4), ("A", "C", 1), ("C", "B", 3)])
    rec = _run(g, "A", "B")
    assert rec.path() == ["A", "B"]
    assert rec.finished()["B"] == 4


def test_start_equals_end():
    g = _graph("AB", [("A", "B", 1)])
    rec = _run(g, "A", "A")
    assert rec.path() == ["A"]
    assert rec.finished()["A"] == 0


def test_repeat_runs_give_identical_events():
    g = _graph("ABCD", [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)])
    rec = RecordingObserver()
    g.add_observer(rec)
    g.run_dijkstra("A", "D")
    first = list(rec.events)
    rec.clear()
    g.run_dijkstra("A", "D")
    assert rec.events == first


def test_shortest_paths_returns_cost_and_predecessors():
    g = _graph("ABCD", [("A", "B", 2), ("B", "C", 2), ("A", "C", 5)])
    engine = SimpleDijkstraEngine()

    cost, prev = engine.shortest_paths(g, "A")

    assert cost == {"A": 0, "B": 2, "C": 4, "D": INFINITY}
    assert prev == {"B": "A", "C": "B"}
    assert engine.last_relaxed == 3
    assert engine.last_edges_examined == 3


def test_custom_engine_is_used():
    engine = SimpleDijkstraEngine()
    g = WeightedGraph(dijkstra_engine=engine)
    for v in "AB":
        g.add_vertex(v)
    g.add_edge("A", "B", 1)
    g.run_dijkstra("A", "B")
    assert engine.last_heap_pops == 2


def test_reconstruct_path():
    prev = {"B": "A", "C": "B", "D": "C"}
    assert reconstruct_path(prev, "A", "D") == ["A", "B", "C", "D"]
    assert reconstruct_path(prev, "A", "A") == ["A"]
    with pytest.raises(PathNotFoundError):
        reconstruct_path(prev, "A", "X")
