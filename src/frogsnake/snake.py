# snake.py
from __future__ import annotations

from collections import deque
from typing import Iterable, Tuple

from .config import Direction
from .grid import Coordinate, offset


# ---------- Pure helpers ----------
def moved(body: Tuple[Coordinate, ...], direction: Direction) -> Tuple[Coordinate, ...]:
    """New head one cell in ``direction``; last segment dropped."""
    return (offset(body[0], direction),) + tuple(body[:-1])


def grown(body: Tuple[Coordinate, ...]) -> Tuple[Coordinate, ...]:
    """Duplicate the tail; the copy is consumed by the next move."""
    return tuple(body) + (body[-1],)


def hit_self(body: Iterable[Coordinate]) -> bool:
    parts = list(body)
    head = parts[0]
    return any(part == head for part in parts[1:])


# ---------- Entity ----------
class Snake:
    """
    Ordered body segments, head at index 0.

    Attributes:
        body: deque of (x, y) from head to tail
    """

    def __init__(self, body: Iterable[Coordinate]):
        self.body = deque(body)
        if not self.body:
            raise ValueError("a snake needs at least one segment")

    @property
    def head(self) -> Coordinate:
        return self.body[0]

    @property
    def tail(self) -> Coordinate:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def move(self, direction: Direction) -> None:
        self.body.appendleft(offset(self.head, direction))
        self.body.pop()

    def grow(self) -> None:
        self.body.append(self.tail)

    def trim(self) -> None:
        """Drop the last segment, keeping at least the head."""
        if len(self.body) > 1:
            self.body.pop()

    def hit_self(self) -> bool:
        return hit_self(self.body)

    def occupies(self, coord: Coordinate) -> bool:
        return coord in self.body

    def as_tuple(self) -> Tuple[Coordinate, ...]:
        return tuple(self.body)

    def __repr__(self):
        return f"<Snake len={len(self.body)} head={self.head}>"
