from typing import Iterable, Optional

import pygame

from snake_sim.components.movement.direction import Direction
from snake_sim.systems.system import System

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class InputSystem(System):
    def setup(self):
        pass

    def run(self) -> tuple[Optional[Direction], bool]:
        return self.translate(pygame.event.get())

    def translate(self, events: Iterable[pygame.event.Event]) -> tuple[Optional[Direction], bool]:
        """Map pygame events to the last requested direction and a quit flag."""
        snake_direction = None
        quit_game = False

        for event in events:
            if event.type == pygame.QUIT:
                quit_game = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    quit_game = True
                elif event.key in KEY_DIRECTIONS:
                    snake_direction = KEY_DIRECTIONS[event.key]

        return snake_direction, quit_game
