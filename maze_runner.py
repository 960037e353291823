"""
CLI to run observed maze searches from a YAML config.

Reads experiments/searches.yml, builds a maze per search (open grid or
generated), runs BFS, DFS or Dijkstra over its MazeGraph, and summarises what
the observers saw.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Sequence
import argparse
import csv
import time

from graph_errors import PathNotFoundError
from maze import Juncture, Maze, generate_maze
from maze_graph import MazeGraph
from observers import RecordingObserver

ALGORITHMS = ("bfs", "dfs", "dijkstra")

RESULT_FIELDS = [
    "name",
    "algorithm",
    "width",
    "height",
    "seed",
    "visited",
    "finished",
    "reached",
    "cost",
    "path",
    "duration_sec",
]


@dataclass(frozen=True)
class SearchConfig:
    name: str
    width: int
    height: int
    algorithm: str
    start: Juncture
    end: Juncture
    max_weight: int = 1
    open: bool = False


@dataclass(frozen=True)
class Config:
    seed: int
    searches: Sequence[SearchConfig]


def load_config(path: Path) -> Config:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text())
    searches = [_parse_search(entry) for entry in data["searches"]]
    return Config(seed=int(data.get("seed", 0)), searches=searches)


def _parse_search(entry: Dict[str, object]) -> SearchConfig:
    algorithm = str(entry["algorithm"]).lower()
    if algorithm not in ALGORITHMS:
        raise ValueError(f"unknown algorithm {entry['algorithm']!r}; expected one of {ALGORITHMS}")
    start_x, start_y = entry["start"]  # type: ignore[misc]
    end_x, end_y = entry["end"]  # type: ignore[misc]
    return SearchConfig(
        name=str(entry["name"]),
        width=int(entry["width"]),  # type: ignore[arg-type]
        height=int(entry["height"]),  # type: ignore[arg-type]
        algorithm=algorithm,
        start=Juncture(int(start_x), int(start_y)),
        end=Juncture(int(end_x), int(end_y)),
        max_weight=int(entry.get("max_weight", 1)),  # type: ignore[arg-type]
        open=bool(entry.get("open", False)),
    )


def build_maze(search: SearchConfig, seed: int) -> Maze:
    if search.open:
        return Maze.open_grid(search.width, search.height, weight=search.max_weight)
    return generate_maze(search.width, search.height, seed=seed, max_weight=search.max_weight)


def run_searches(
    config_path: Path,
    results_csv: Path | None = None,
    render: bool = False,
) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()
    print(f"[run] queued {len(cfg.searches)} searches (seed: {cfg.seed})")

    results: List[Dict[str, object]] = []
    for search in cfg.searches:
        res = run_single(search, cfg.seed, render=render)
        results.append(res)
        print(
            f"[run] completed search={search.name} algorithm={search.algorithm} "
            f"reached={res['reached']} visited={res['visited']} duration={res['duration_sec']:.3f}s"
        )

    if results_csv:
        write_results_csv(results, results_csv)

    elapsed = time.time() - start
    print(f"[run] completed {len(results)} searches in {elapsed:.2f}s")
    return results


def run_single(search: SearchConfig, seed: int, render: bool = False) -> Dict[str, object]:
    start_run = time.time()
    maze = build_maze(search, seed)
    graph = MazeGraph(maze)
    recorder: RecordingObserver[Juncture] = RecordingObserver()
    graph.add_observer(recorder)

    path: List[Juncture] | None = None
    cost: float | None = None
    if search.algorithm == "bfs":
        graph.run_bfs(search.start, search.end)
        reached = recorder.search_over_count() == 1
    elif search.algorithm == "dfs":
        graph.run_dfs(search.start, search.end)
        reached = recorder.search_over_count() == 1
    else:
        try:
            graph.run_dijkstra(search.start, search.end)
        except PathNotFoundError as exc:
            print(f"[run] search={search.name}: {exc}")
        path = recorder.path()
        reached = path is not None
        cost = recorder.finished().get(search.end)

    if render:
        marked: Iterable[Juncture] = path if path is not None else recorder.visited()
        print(maze.render(marked))

    return {
        "name": search.name,
        "algorithm": search.algorithm,
        "width": search.width,
        "height": search.height,
        "seed": seed,
        "visited": len(recorder.visited()),
        "finished": len(recorder.finished()),
        "reached": reached,
        "cost": cost,
        "path": path,
        "duration_sec": time.time() - start_run,
    }


def write_results_csv(results: Iterable[Dict[str, object]], path: Path) -> None:
    """
    Write per-search results to CSV for downstream analysis.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for res in results:
            row = {key: res.get(key) for key in RESULT_FIELDS}
            route = res.get("path")
            row["path"] = " ".join(f"{j.x},{j.y}" for j in route) if route else ""  # type: ignore[union-attr]
            writer.writerow(row)


def main(argv: Sequence[str] | None = None) -> None:
    default_config = Path(__file__).parent / "experiments" / "searches.yml"
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("config", nargs="?", type=Path, default=default_config)
    parser.add_argument("--results", type=Path, default=None, help="write per-search CSV here")
    parser.add_argument("--render", action="store_true", help="draw each maze with its path")
    args = parser.parse_args(argv)

    results = run_searches(args.config, results_csv=args.results, render=args.render)
    for res in results:
        print(res)
    if args.results:
        print(f"Wrote results to {args.results}")


if __name__ == "__main__":
    main()
