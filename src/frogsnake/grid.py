# grid.py
from __future__ import annotations

from typing import Tuple

import numpy as np  # type: ignore

from .config import Direction

Coordinate = Tuple[int, int]


def in_bounds(coord: Coordinate, size: int) -> bool:
    """Check if a cell is inside a ``size`` x ``size`` grid."""
    x, y = coord
    return 0 <= x < size and 0 <= y < size


def offset(coord: Coordinate, direction: Direction) -> Coordinate:
    """Return the neighbouring cell one step away in ``direction``."""
    dx, dy = direction.delta
    return (coord[0] + dx, coord[1] + dy)


def random_coord(low: int, high: int, rng: np.random.Generator) -> Coordinate:
    """Draw a coordinate with each axis uniform in [low, high)."""
    x, y = rng.integers(low, high, size=2)
    return (int(x), int(y))
