import logging
from typing import Optional

import numpy as np

from snake_sim.components.body.position import Position
from snake_sim.entities.type import Fruit, Snake
from snake_sim.systems.system import System

logger = logging.getLogger(__name__)


class GameLogicSystem(System):
    def __init__(
        self,
        width: int,
        height: int,
        rng: np.random.Generator,
        fruit_reward: int = 10,
    ) -> None:
        self._grid_width = width
        self._grid_height = height
        self._rng = rng
        self._fruit_reward = fruit_reward

    def setup(self):
        pass

    def run(self, snake: Snake, snakes: list[Snake], fruit: Fruit):
        obstacles = self.obstacles_for(snake, snakes)
        if snake.check_collision(self._grid_width, self._grid_height, obstacles):
            if snake.alive:
                logger.info(
                    "Snake '%s' collided at %s with score %d",
                    snake.player_name,
                    snake.get_head(),
                    snake.score,
                )
            snake.dead = True

        if fruit.position is not None and snake.get_head() == fruit.position:
            snake.score += self._fruit_reward
            snake.add_segment()
            logger.info("Snake '%s' ate the fruit, score %d", snake.player_name, snake.score)
            self.place_fruit(snakes, fruit)

    def obstacles_for(self, snake: Snake, snakes: list[Snake]) -> list[Position]:
        if len(snakes) == 1:
            return snake.tail_to_points()

        obstacles = []
        for other in snakes:
            if other == snake:
                obstacles.extend(other.tail_to_points())
            else:
                obstacles.extend(other.occupied_cells())
        return obstacles

    def occupancy_grid(self, snakes: list[Snake]) -> np.ndarray:
        occupied = np.zeros((self._grid_height, self._grid_width), dtype=bool)
        for snake in snakes:
            for cell in snake.occupied_cells():
                # Dead snakes may have left the grid
                if 0 <= cell.x < self._grid_width and 0 <= cell.y < self._grid_height:
                    occupied[cell.y, cell.x] = True
        return occupied

    def spawn_valid_fruit(self, snakes: list[Snake], fruit: Fruit) -> Position:
        occupied = self.occupancy_grid(snakes)
        if occupied.all():
            raise ValueError("No free cell left on the grid to place the fruit")
        return self._place_on_free_cell(occupied, fruit)

    def place_fruit(self, snakes: list[Snake], fruit: Fruit) -> Optional[Position]:
        """Move the fruit to a free cell, or take it off the grid when full."""
        occupied = self.occupancy_grid(snakes)
        if occupied.all():
            fruit.position = None
            logger.info("Grid is full, no cell left for the fruit")
            return None
        return self._place_on_free_cell(occupied, fruit)

    def _place_on_free_cell(self, occupied: np.ndarray, fruit: Fruit) -> Position:
        attempts = 0
        invalid_position = True
        while invalid_position:
            fruit_position = Position(
                int(self._rng.integers(0, self._grid_width)),
                int(self._rng.integers(0, self._grid_height)),
            )
            invalid_position = bool(occupied[fruit_position.y, fruit_position.x])
            attempts += 1

        fruit.position = fruit_position
        logger.debug("Fruit placed at %s after %d attempt(s)", fruit_position, attempts)
        return fruit_position
