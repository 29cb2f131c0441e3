# game.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np  # type: ignore

from .config import CFG, Action, Config, Direction
from .food import spawn_food
from .grid import Coordinate
from .render import Frame, Renderer
from .rules import eats, is_game_over
from .snake import Snake
from .throttle import Throttler
from .timer import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

Event = Union[Action, Direction]


class Phase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    LOST = "lost"


# what the action button does next, shown to the player
INSTRUCTIONS = {
    Phase.IDLE: "start",
    Phase.RUNNING: "pause",
    Phase.PAUSED: "resume",
    Phase.LOST: "restart",
}


def instruction(phase: Phase) -> str:
    return INSTRUCTIONS[phase]


def next_speed(score: int, speed_ms: int, cfg: Config = CFG) -> int:
    """Speed after reaching ``score``: one step faster on every multiple of foods_per_speedup."""
    if score > 0 and score % cfg.foods_per_speedup == 0 and speed_ms > cfg.min_speed_ms:
        return max(cfg.min_speed_ms, speed_ms - cfg.speed_step_ms)
    return speed_ms


# ---------- State ----------
@dataclass
class GameState:
    snake: Snake
    food: Coordinate
    direction: Direction
    speed_ms: int                      # tick interval, lower is faster
    score: int = 0
    phase: Phase = Phase.IDLE
    timer: Optional[TimerHandle] = None


def new_game_state(cfg: Config, rng: np.random.Generator) -> GameState:
    snake = Snake([cfg.start])
    food = spawn_food(snake.body, cfg.grid_size, rng, low=cfg.food_min, max_attempts=cfg.spawn_attempts)
    return GameState(
        snake=snake,
        food=food,
        direction=cfg.start_direction,
        speed_ms=cfg.initial_speed_ms,
    )


# ---------- Controller ----------
class Game:
    """
    Owns one GameState at a time plus the session high score.

    All mutation goes through :meth:`handle` (player input) and :meth:`tick`
    (fired by the scheduler while running).
    """

    def __init__(
        self,
        cfg: Config = CFG,
        scheduler: Optional[Scheduler] = None,
        renderer: Optional[Renderer] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.cfg = cfg
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.renderer = renderer
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.high_score = 0
        self.state = new_game_state(cfg, self.rng)
        self.render()

    @property
    def phase(self) -> Phase:
        return self.state.phase

    # ----- Input -----
    def handle(self, event: Event) -> None:
        """Single entry point for the action button and the four directions."""
        if event == Action.ACTIVATE:
            self.activate()
        elif isinstance(event, Direction):
            self.steer(event)
        else:
            logger.debug("ignoring unknown input %r", event)

    def activate(self) -> None:
        phase = self.state.phase
        if phase is Phase.IDLE or phase is Phase.PAUSED:
            self._run()
        elif phase is Phase.RUNNING:
            self._cancel_timer()
            self.state.phase = Phase.PAUSED
        elif phase is Phase.LOST:
            self.state = new_game_state(self.cfg, self.rng)
            self._run()
        logger.info("%s -> %s", phase.value, self.state.phase.value)
        self.render()

    def steer(self, direction: Direction) -> bool:
        """Change heading; returns False if the turn was rejected."""
        state = self.state
        if state.phase is not Phase.RUNNING:
            logger.debug("direction %s ignored while %s", direction.value, state.phase.value)
            return False
        if direction is state.direction.opposite:
            logger.debug("reversal %s -> %s rejected", state.direction.value, direction.value)
            return False
        state.direction = direction
        return True

    # ----- Timer -----
    def _run(self) -> None:
        self.state.phase = Phase.RUNNING
        self._schedule()

    def _schedule(self) -> None:
        self._cancel_timer()
        self.state.timer = self.scheduler.call_every(self.state.speed_ms, self._on_timer, self.state)

    def _cancel_timer(self) -> None:
        if self.state.timer is not None:
            self.state.timer.cancel()
            self.state.timer = None

    def _on_timer(self, state: GameState) -> None:
        # a handle from a replaced game must never touch the current one
        if state is not self.state:
            return
        self.tick()

    # ----- Update -----
    def tick(self) -> None:
        """Advance the game by one step."""
        state = self.state
        if state.phase is not Phase.RUNNING:
            return

        cfg = self.cfg
        state.snake.move(state.direction)

        # eating wins over dying on the same step
        if eats(state.snake.body, state.food):
            state.snake.grow()
            state.food = spawn_food(
                state.snake.body, cfg.grid_size, self.rng,
                low=cfg.food_min, max_attempts=cfg.spawn_attempts,
            )
            state.score += 1
            speed = next_speed(state.score, state.speed_ms, cfg)
            if speed != state.speed_ms:
                logger.info("score %d, speeding up to %d ms", state.score, speed)
                state.speed_ms = speed
                self._schedule()
        elif is_game_over(state.snake.body, cfg.grid_size):
            state.snake.trim()
            self._cancel_timer()
            state.phase = Phase.LOST
            if state.score > self.high_score:
                self.high_score = state.score
            logger.info("lost with score %d (high score %d)", state.score, self.high_score)
            state.score = 0

        self.render()

    # ----- Output -----
    def snapshot(self) -> Frame:
        state = self.state
        return Frame(
            body=state.snake.as_tuple(),
            food=state.food,
            grid_size=self.cfg.grid_size,
            score=state.score,
            high_score=self.high_score,
            instruction=instruction(state.phase),
        )

    def render(self) -> None:
        state = self.state
        if state.snake.occupies(state.food) and state.phase is not Phase.LOST:
            logger.debug("food is on snake at %s, respawning", state.food)
            state.food = spawn_food(
                state.snake.body, self.cfg.grid_size, self.rng,
                low=self.cfg.food_min, max_attempts=self.cfg.spawn_attempts,
            )
        if self.renderer is not None:
            self.renderer.draw(self.snapshot())


def make_input(game: Game) -> Throttler:
    """Throttled front door for player input, on the game's own scheduler.

    The window is the starting tick interval and stays there as the game
    speeds up.
    """
    return Throttler(game.handle, game.cfg.initial_speed_ms, game.scheduler)
