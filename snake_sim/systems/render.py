from typing import Optional

import pygame

from snake_sim.components.body.position import Position
from snake_sim.constants.colors import BACKGROUND_COLOR, FRUIT_COLOR
from snake_sim.schemas.game import WorldSnapshot
from snake_sim.systems.system import System


class RenderSystem(System):
    def __init__(self, width: int, height: int, cell_size: int, surface: Optional[pygame.Surface] = None):
        self.cell_size = cell_size
        self._screen_size = (self.cell_size * width, self.cell_size * height)
        self.window = surface

    def setup(self):
        if self.window is None:
            self.window = pygame.display.set_mode(self._screen_size)
            pygame.display.set_caption("Snake")
        self.window.fill(BACKGROUND_COLOR)

    def run(self, snapshot: WorldSnapshot):
        self.window.fill(BACKGROUND_COLOR)

        if snapshot.fruit is not None:
            self._draw_cell(snapshot.fruit, FRUIT_COLOR)
        for actor in snapshot.actors:
            self._draw_cell(actor.head, actor.color)
            for segment in actor.tail:
                self._draw_cell(segment, actor.color)

    def present(self):
        pygame.display.flip()

    def _draw_cell(self, cell: Position, color: tuple[int, int, int]):
        pygame.draw.rect(
            self.window,
            color,
            (
                cell.x * self.cell_size,
                cell.y * self.cell_size,
                self.cell_size,
                self.cell_size,
            ),
        )
