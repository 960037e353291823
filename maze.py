"""
Rectangular maze of junctures separated by optional walls.

Junctures are addressed by integer (x, y) with (0, 0) in the upper left.
Walls and crossing weights are stored as numpy arrays of shape
(height, width), indexed [y, x]:

    right_walls[y, x]    wall between (x, y) and (x + 1, y)
    bottom_walls[y, x]   wall between (x, y) and (x, y + 1)

The grid boundary always counts as a wall.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np


@dataclass(frozen=True, order=True)
class Juncture:
    """One cell of the maze."""

    x: int
    y: int

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


class Maze:
    """
    Wall layout plus per-crossing weights.

    Weights are symmetric: crossing from A to B costs the same as B to A.
    """

    def __init__(
        self,
        width: int,
        height: int,
        right_walls: np.ndarray,
        bottom_walls: np.ndarray,
        right_weights: Optional[np.ndarray] = None,
        bottom_weights: Optional[np.ndarray] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"maze dimensions must be positive, got {width}x{height}")
        shape = (height, width)
        if right_weights is None:
            right_weights = np.ones(shape, dtype=np.int64)
        if bottom_weights is None:
            bottom_weights = np.ones(shape, dtype=np.int64)
        for label, arr in (
            ("right_walls", right_walls),
            ("bottom_walls", bottom_walls),
            ("right_weights", right_weights),
            ("bottom_weights", bottom_weights),
        ):
            if np.shape(arr) != shape:
                raise ValueError(f"{label} must have shape {shape}, got {np.shape(arr)}")
        if np.any(np.asarray(right_weights) <= 0) or np.any(np.asarray(bottom_weights) <= 0):
            raise ValueError("maze weights must be positive")

        self._width = width
        self._height = height
        self._right_walls = np.array(right_walls, dtype=bool)
        self._bottom_walls = np.array(bottom_walls, dtype=bool)
        # Boundary walls are implied; pin them so queries never index past the edge.
        self._right_walls[:, -1] = True
        self._bottom_walls[-1, :] = True
        self._right_weights = np.array(right_weights, dtype=np.int64)
        self._bottom_weights = np.array(bottom_weights, dtype=np.int64)

    @classmethod
    def open_grid(cls, width: int, height: int, weight: int = 1) -> "Maze":
        """Maze with no internal walls and a uniform crossing weight."""
        shape = (height, width)
        return cls(
            width,
            height,
            right_walls=np.zeros(shape, dtype=bool),
            bottom_walls=np.zeros(shape, dtype=bool),
            right_weights=np.full(shape, weight, dtype=np.int64),
            bottom_weights=np.full(shape, weight, dtype=np.int64),
        )

    # --- Dimensions ----------------------------------------------------------

    def get_maze_width(self) -> int:
        return self._width

    def get_maze_height(self) -> int:
        return self._height

    def junctures(self) -> Iterator[Juncture]:
        """All junctures, column by column."""
        for x in range(self._width):
            for y in range(self._height):
                yield Juncture(x, y)

    def open_adjacencies(self) -> int:
        """Number of neighbouring juncture pairs not separated by a wall."""
        return int(np.count_nonzero(~self._right_walls) + np.count_nonzero(~self._bottom_walls))

    # --- Wall queries --------------------------------------------------------

    def is_wall_to_right(self, j: Juncture) -> bool:
        self._check(j)
        return bool(self._right_walls[j.y, j.x])

    def is_wall_to_left(self, j: Juncture) -> bool:
        self._check(j)
        return j.x == 0 or bool(self._right_walls[j.y, j.x - 1])

    def is_wall_below(self, j: Juncture) -> bool:
        self._check(j)
        return bool(self._bottom_walls[j.y, j.x])

    def is_wall_above(self, j: Juncture) -> bool:
        self._check(j)
        return j.y == 0 or bool(self._bottom_walls[j.y - 1, j.x])

    # --- Weight queries ------------------------------------------------------

    def get_weight_to_right(self, j: Juncture) -> int:
        self._check(j)
        return int(self._right_weights[j.y, j.x])

    def get_weight_to_left(self, j: Juncture) -> int:
        self._check(j)
        if j.x == 0:
            raise ValueError(f"juncture {j!r} has no neighbour to the left")
        return int(self._right_weights[j.y, j.x - 1])

    def get_weight_below(self, j: Juncture) -> int:
        self._check(j)
        return int(self._bottom_weights[j.y, j.x])

    def get_weight_above(self, j: Juncture) -> int:
        self._check(j)
        if j.y == 0:
            raise ValueError(f"juncture {j!r} has no neighbour above")
        return int(self._bottom_weights[j.y - 1, j.x])

    # --- Rendering -----------------------------------------------------------

    def render(self, marked: Iterable[Juncture] = ()) -> str:
        """ASCII drawing of the maze; marked junctures are drawn as '*'."""
        marks: Set[Juncture] = set(marked)
        lines: List[str] = ["+" + "---+" * self._width]
        for y in range(self._height):
            row = "|"
            floor = "+"
            for x in range(self._width):
                cell = " * " if Juncture(x, y) in marks else "   "
                row += cell + ("|" if self._right_walls[y, x] else " ")
                floor += ("---" if self._bottom_walls[y, x] else "   ") + "+"
            lines.append(row)
            lines.append(floor)
        return "\n".join(lines)

    def _check(self, j: Juncture) -> None:
        if not (0 <= j.x < self._width and 0 <= j.y < self._height):
            raise ValueError(f"juncture {j!r} is outside a {self._width}x{self._height} maze")


def generate_maze(
    width: int,
    height: int,
    seed: Optional[int] = None,
    max_weight: int = 1,
) -> Maze:
    """
    Carve a perfect maze (exactly one route between any two junctures).

    Uses randomized depth-first search from (0, 0). Crossing weights are drawn
    uniformly from 1..max_weight.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"maze dimensions must be positive, got {width}x{height}")
    if max_weight < 1:
        raise ValueError(f"max_weight must be at least 1, got {max_weight}")

    rng = np.random.default_rng(seed)
    shape = (height, width)
    right_walls = np.ones(shape, dtype=bool)
    bottom_walls = np.ones(shape, dtype=bool)
    seen = np.zeros(shape, dtype=bool)

    stack: List[Tuple[int, int]] = [(0, 0)]
    seen[0, 0] = True
    while stack:
        x, y = stack[-1]
        candidates = [
            (nx, ny)
            for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
            if 0 <= nx < width and 0 <= ny < height and not seen[ny, nx]
        ]
        if not candidates:
            stack.pop()
            continue
        nx, ny = candidates[int(rng.integers(len(candidates)))]
        if nx != x:
            right_walls[y, min(x, nx)] = False
        else:
            bottom_walls[min(y, ny), x] = False
        seen[ny, nx] = True
        stack.append((nx, ny))

    return Maze(
        width,
        height,
        right_walls=right_walls,
        bottom_walls=bottom_walls,
        right_weights=rng.integers(1, max_weight + 1, size=shape),
        bottom_weights=rng.integers(1, max_weight + 1, size=shape),
    )
