"""
Maze-to-graph adapter.

Every juncture becomes a vertex; every open adjacency becomes a pair of
directed edges weighted by the maze.
"""

from maze import Juncture, Maze
from weighted_graph import WeightedGraph


class MazeGraph(WeightedGraph[Juncture]):
    """
    WeightedGraph over the junctures of a Maze.

    Uses only add_vertex/add_edge, so all graph validation still applies.
    """

    def __init__(self, maze: Maze, **engines) -> None:
        super().__init__(**engines)
        self.maze = maze
        width = maze.get_maze_width()
        height = maze.get_maze_height()

        for j in maze.junctures():
            self.add_vertex(j)

        for j in maze.junctures():
            x, y = j.x, j.y
            if x > 0 and not maze.is_wall_to_left(j):
                self.add_edge(j, Juncture(x - 1, y), maze.get_weight_to_left(j))
            if y > 0 and not maze.is_wall_above(j):
                self.add_edge(j, Juncture(x, y - 1), maze.get_weight_above(j))
            if x < width - 1 and not maze.is_wall_to_right(j):
                self.add_edge(j, Juncture(x + 1, y), maze.get_weight_to_right(j))
            if y < height - 1 and not maze.is_wall_below(j):
                self.add_edge(j, Juncture(x, y + 1), maze.get_weight_below(j))
