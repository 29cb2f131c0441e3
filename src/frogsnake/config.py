# config.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# ----- Window -----
CELL_SIZE = 20
HUD_HEIGHT = 32

# ----- Colors -----
BG    = (20, 20, 24)
GREEN = (80, 200, 80)
HEAD  = (144, 238, 144)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

# ----- Directions -----
class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def delta(self) -> Tuple[int, int]:
        return DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]


DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class Action(str, Enum):
    """The single overloaded start/pause/resume/restart button."""
    ACTIVATE = "activate"


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    grid_size: int = 20
    start: Tuple[int, int] = (10, 10)
    start_direction: Direction = Direction.LEFT
    initial_speed_ms: int = 200
    speed_step_ms: int = 10
    min_speed_ms: int = 50
    foods_per_speedup: int = 5
    food_min: int = 1             # food never lands on row/column 0
    spawn_attempts: int = 1000
    seed: Optional[int] = None

    def __post_init__(self):
        if self.grid_size < 3:
            raise ValueError(f"grid_size must be at least 3, got {self.grid_size}")
        if not (0 <= self.food_min < self.grid_size):
            raise ValueError(f"food_min must lie in [0, {self.grid_size}), got {self.food_min}")
        x, y = self.start
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise ValueError(f"start {self.start} is outside a {self.grid_size}x{self.grid_size} grid")
        if self.min_speed_ms <= 0 or self.initial_speed_ms < self.min_speed_ms:
            raise ValueError("speeds must satisfy 0 < min_speed_ms <= initial_speed_ms")
        if self.speed_step_ms < 0 or self.foods_per_speedup <= 0:
            raise ValueError("speed_step_ms must be >= 0 and foods_per_speedup > 0")
        if self.spawn_attempts <= 0:
            raise ValueError("spawn_attempts must be positive")
        # accept plain strings like "left"
        object.__setattr__(self, "start_direction", Direction(self.start_direction))


CFG = Config()
