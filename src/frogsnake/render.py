# render.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple

from .grid import Coordinate


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs for one picture of the game."""
    body: Tuple[Coordinate, ...]   # head at index 0
    food: Coordinate
    grid_size: int
    score: int
    high_score: int
    instruction: str               # start / pause / resume / restart


class Renderer(Protocol):
    def draw(self, frame: Frame) -> None: ...


class RecordingRenderer:
    """Headless renderer that keeps every frame it is given."""

    def __init__(self):
        self.frames: List[Frame] = []

    def draw(self, frame: Frame) -> None:
        self.frames.append(frame)

    @property
    def last(self) -> Optional[Frame]:
        return self.frames[-1] if self.frames else None
