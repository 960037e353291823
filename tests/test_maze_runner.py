import csv
from pathlib import Path

import pytest

from maze import Juncture
from maze_runner import load_config, main, run_searches

SMALL_CONFIG = """
seed: 5
searches:
  - name: open_corner
    width: 3
    height: 3
    open: true
    algorithm: dijkstra
    start: [0, 0]
    end: [2, 2]
  - name: maze_bfs
    width: 5
    height: 4
    algorithm: BFS
    start: [0, 0]
    end: [4, 3]
  - name: maze_dfs
    width: 5
    height: 4
    max_weight: 3
    algorithm: dfs
    start: [4, 3]
    end: [0, 0]
"""


def test_load_config_parses_searches(tmp_path: Path):
    cfg_path = tmp_path / "searches.yml"
    cfg_path.write_text(SMALL_CONFIG)

    cfg = load_config(cfg_path)

    assert cfg.seed == 5
    assert [s.name for s in cfg.searches] == ["open_corner", "maze_bfs", "maze_dfs"]
    assert cfg.searches[0].open is True
    assert cfg.searches[1].algorithm == "bfs"
    assert cfg.searches[2].start == Juncture(4, 3)
    assert cfg.searches[2].max_weight == 3


def test_unknown_algorithm_rejected(tmp_path: Path):
    cfg_path = tmp_path / "bad.yml"
    cfg_path.write_text(
        """
searches:
  - name: nope
    width: 2
    height: 2
    algorithm: astar
    start: [0, 0]
    end: [1, 1]
"""
    )
    with pytest.raises(ValueError, match="astar"):
        load_config(cfg_path)


def test_run_searches_executes_small_config(tmp_path: Path):
    """Smoke-test: every configured search runs and reaches its end."""
    cfg_path = tmp_path / "searches.yml"
    cfg_path.write_text(SMALL_CONFIG)
    out = tmp_path / "results" / "searches.csv"

    results = run_searches(cfg_path, results_csv=out)

    assert len(results) == 3
    assert all(res["reached"] for res in results)

    dijkstra = results[0]
    assert dijkstra["cost"] == 4
    assert len(dijkstra["path"]) == 5
    assert dijkstra["finished"] == 9
    assert dijkstra["visited"] == 0

    for res in results[1:]:
        assert res["path"] is None
        assert 1 <= res["visited"] <= 20

    with out.open() as f:
        rows = list(csv.DictReader(f))
    assert [r["name"] for r in rows] == ["open_corner", "maze_bfs", "maze_dfs"]
    assert rows[0]["path"].startswith("0,0 ")
    assert rows[0]["path"].endswith(" 2,2")
    assert rows[1]["path"] == ""


def test_main_prints_progress(tmp_path: Path, capsys):
    cfg_path = tmp_path / "searches.yml"
    cfg_path.write_text(SMALL_CONFIG)

    main([str(cfg_path), "--render"])

    out = capsys.readouterr().out
    assert "[run] queued 3 searches" in out
    assert "[run] completed search=open_corner algorithm=dijkstra reached=True" in out
    assert "+---+---+---+" in out


def test_shipped_config_loads():
    cfg = load_config(Path(__file__).parent.parent / "experiments" / "searches.yml")
    assert len(cfg.searches) == 4
    assert {s.algorithm for s in cfg.searches} == {"bfs", "dfs", "dijkstra"}
