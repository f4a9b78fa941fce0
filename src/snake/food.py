# food.py
import logging
import random
from typing import Collection, Optional

import numpy as np  # type: ignore

from .grid import Cell, CellType, occupancy

logger = logging.getLogger(__name__)


def free_cells(snake: Collection[Cell], width: int, height: int) -> np.ndarray:
    """Return an (n, 2) array of the (x, y) cells not covered by the snake."""
    grid = occupancy(snake, width, height)
    ys, xs = np.nonzero(grid == CellType.EMPTY)
    return np.stack([xs, ys], axis=1)


def spawn_food(
    snake: Collection[Cell],
    width: int,
    height: int,
    rng: random.Random,
    max_attempts: Optional[int] = None,
) -> Optional[Cell]:
    """
    Pick a uniformly random empty cell for the next food.

    Draws random coordinates and rejects occupied ones. After
    `max_attempts` misses (default: one per board cell) it scans the
    whole board for free cells instead, so a nearly full board still
    terminates. Returns None when no cell is free.
    """
    occupied = set(snake)
    if max_attempts is None:
        max_attempts = width * height

    for _ in range(max_attempts):
        cell = Cell(rng.randrange(width), rng.randrange(height))
        if cell not in occupied:
            return cell

    candidates = free_cells(occupied, width, height)
    logger.debug(f"Random food draws exhausted, scanning {len(candidates)} free cells")
    if len(candidates) == 0:
        return None
    x, y = candidates[rng.randrange(len(candidates))]
    return Cell(int(x), int(y))
