# __init__.py
"""Grid snake: eat food, grow, speed up, don't leave the board or bite yourself."""

from .config import CFG, Action, Config, Direction
from .food import BoardFullError, spawn_food
from .game import Game, GameState, Phase, instruction, make_input, new_game_state, next_speed
from .render import Frame, RecordingRenderer, Renderer
from .snake import Snake
from .throttle import Throttler
from .timer import Scheduler, TimerHandle

__all__ = [
    "CFG", "Action", "Config", "Direction",
    "BoardFullError", "spawn_food",
    "Game", "GameState", "Phase", "instruction", "make_input", "new_game_state", "next_speed",
    "Frame", "RecordingRenderer", "Renderer",
    "Snake",
    "Throttler",
    "Scheduler", "TimerHandle",
]
