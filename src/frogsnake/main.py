# main.py
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import pygame  # type: ignore

from .config import CELL_SIZE, Action, Config, Direction
from .game import Game, make_input
from .pygame_render import PygameRenderer
from .timer import Scheduler

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_SPACE: Action.ACTIVATE,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Snake: eat frogs, don't bite yourself.")
    p.add_argument("--grid-size", type=int, default=20, help="cells per side")
    p.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per cell")
    p.add_argument("--seed", type=int, default=None, help="seed for food placement")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(
        grid_size=args.grid_size,
        start=(args.grid_size // 2, args.grid_size // 2),
        seed=args.seed,
    )

    pygame.init()
    clock = pygame.time.Clock()
    scheduler = Scheduler(pygame.time.get_ticks())
    renderer = PygameRenderer(cfg.grid_size, args.cell_size)
    game = Game(cfg, scheduler=scheduler, renderer=renderer)

    on_input = make_input(game)
    logger.info("grid %dx%d, press SPACE to start", cfg.grid_size, cfg.grid_size)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                # unmapped keys bypass the throttle and never use up its window
                elif event.key in KEYMAP:
                    on_input(KEYMAP[event.key])
            elif event.type == pygame.VIDEOEXPOSE:
                game.render()

        # 2) timers: ticks and throttled input
        scheduler.advance(pygame.time.get_ticks())
        clock.tick(60)

    on_input.cancel()
    renderer.close()
    pygame.quit()


if __name__ == "__main__":
    main()
