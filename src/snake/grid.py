# grid.py
"""Value types for the board: cells, directions and the bounds check."""
from __future__ import annotations

import enum
from typing import Iterable, NamedTuple, Tuple

import numpy as np  # type: ignore


class Direction(enum.Enum):
    """Heading of the snake, valued by its (dx, dy) unit vector."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: "Direction") -> bool:
        return self.opposite is other


class Cell(NamedTuple):
    x: int
    y: int

    def offset(self, direction: Direction) -> "Cell":
        dx, dy = direction.vector
        return Cell(self.x + dx, self.y + dy)


class CellType(enum.IntEnum):
    """Integer codes stored in an occupancy grid."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    FOOD = 3


def contains(cell: Tuple[int, int], width: int, height: int) -> bool:
    """Check if a cell is inside a width x height board."""
    x, y = cell
    return 0 <= x < width and 0 <= y < height


def occupancy(cells: Iterable[Tuple[int, int]], width: int, height: int) -> np.ndarray:
    """
    Return a (height, width) int8 array with every in-bounds cell of
    `cells` marked as SNAKE. Rows are indexed by y, columns by x.
    """
    grid = np.zeros((height, width), dtype=np.int8)
    for x, y in cells:
        if contains((x, y), width, height):
            grid[y, x] = CellType.SNAKE
    return grid
