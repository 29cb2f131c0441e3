# food.py
from __future__ import annotations

import logging
from typing import Collection

import numpy as np  # type: ignore

from .grid import Coordinate, random_coord

logger = logging.getLogger(__name__)


class BoardFullError(RuntimeError):
    """Raised when every cell food may use is covered by the snake."""


def free_cells(occupied: Collection[Coordinate], size: int, low: int = 1) -> np.ndarray:
    """Return an (n, 2) array of (x, y) cells in [low, size) not in ``occupied``."""
    mask = np.ones((size, size), dtype=bool)  # indexed [x, y]
    mask[:low, :] = False
    mask[:, :low] = False
    for x, y in occupied:
        if 0 <= x < size and 0 <= y < size:
            mask[x, y] = False
    return np.argwhere(mask)


def spawn_food(
    occupied: Collection[Coordinate],
    size: int,
    rng: np.random.Generator,
    low: int = 1,
    max_attempts: int = 1000,
) -> Coordinate:
    """
    Pick a random cell with both axes in [low, size) that is not occupied.

    Rolls at most ``max_attempts`` times, then falls back to choosing
    uniformly among the remaining free cells.
    """
    taken = set(occupied)
    for _ in range(max_attempts):
        coord = random_coord(low, size, rng)
        if coord not in taken:
            return coord
        logger.debug("food rolled onto snake at %s, retrying", coord)

    cells = free_cells(taken, size, low)
    if len(cells) == 0:
        raise BoardFullError(f"no free cell left for food on a {size}x{size} grid")
    logger.debug("rejection sampling gave up after %d attempts; %d free cells", max_attempts, len(cells))
    x, y = cells[rng.integers(len(cells))]
    return (int(x), int(y))
