# rules.py
from typing import Sequence

from .grid import Coordinate, in_bounds
from .snake import hit_self


def out_of_bounds(body: Sequence[Coordinate], size: int) -> bool:
    return not in_bounds(body[0], size)


def is_game_over(body: Sequence[Coordinate], size: int) -> bool:
    """True if the head left the grid or landed on the rest of the body."""
    return out_of_bounds(body, size) or hit_self(body)


def eats(body: Sequence[Coordinate], food: Coordinate) -> bool:
    return body[0] == food
