# pygame_render.py
from __future__ import annotations

import pygame  # type: ignore

from .config import BG, CELL_SIZE, GREEN, HEAD, HUD_HEIGHT, RED, TEXT
from .grid import Coordinate, in_bounds
from .render import Frame


class PygameRenderer:
    """Draws the board with a one-line HUD (score, high score, instruction) on top."""

    def __init__(self, grid_size: int, cell_size: int = CELL_SIZE, caption: str = "Snake"):
        self.grid_size = grid_size
        self.cell_size = cell_size
        width = grid_size * cell_size
        height = grid_size * cell_size + HUD_HEIGHT
        pygame.display.set_caption(caption)
        self.screen = pygame.display.set_mode((width, height))
        self.font = pygame.font.SysFont(None, 24)

    def _cell(self, coord: Coordinate, color) -> None:
        x, y = coord
        rect = pygame.Rect(x * self.cell_size, HUD_HEIGHT + y * self.cell_size, self.cell_size, self.cell_size)
        pygame.draw.rect(self.screen, color, rect)

    def draw(self, frame: Frame) -> None:
        self.screen.fill(BG)
        pygame.draw.line(self.screen, TEXT, (0, HUD_HEIGHT - 1), (self.screen.get_width(), HUD_HEIGHT - 1))

        self._cell(frame.food, RED)
        # a losing head may sit just outside the grid
        for i, part in enumerate(frame.body):
            if in_bounds(part, frame.grid_size):
                self._cell(part, HEAD if i == 0 else GREEN)

        hud = f"Score: {frame.score}   High: {frame.high_score}   SPACE to {frame.instruction}"
        self.screen.blit(self.font.render(hud, True, TEXT), (8, 8))
        pygame.display.flip()

    def close(self) -> None:
        pygame.display.quit()
