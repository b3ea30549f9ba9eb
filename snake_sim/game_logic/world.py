import logging
from typing import Optional

import numpy as np

from snake_sim.components.body.position import Position
from snake_sim.components.movement.direction import Direction
from snake_sim.constants.colors import SNAKE_COLORS
from snake_sim.entities.entity_id import EntityID
from snake_sim.entities.factory import EntityFactory
from snake_sim.entities.type import Fruit, Snake
from snake_sim.schemas.game import ActorState, PlayerCommand, WorldSnapshot
from snake_sim.schemas.settings import GameSettings
from snake_sim.systems.game_logic import GameLogicSystem
from snake_sim.systems.movement import MovementSystem

logger = logging.getLogger(__name__)


class World:
    """
    Owns the snakes, the fruit and the grid, and advances them in time.

    Snakes are updated in insertion order. There is no game-over state:
    callers poll ``actors[0].dead`` after each update.
    """

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        cell_size: Optional[int] = None,
        settings: Optional[GameSettings] = None,
        seed: Optional[int] = None,
    ):
        settings = settings if settings is not None else GameSettings()
        overrides = {"width": width, "height": height, "cell_size": cell_size, "seed": seed}
        overrides = {key: value for key, value in overrides.items() if value is not None}
        self.settings = GameSettings.model_validate({**settings.model_dump(), **overrides})

        self._rng = np.random.default_rng(self.settings.seed)
        self._entity_factory = EntityFactory()

        self.movement_system = MovementSystem()
        self.game_logic_system = GameLogicSystem(
            self.settings.width,
            self.settings.height,
            self._rng,
            self.settings.fruit_reward,
        )
        self.movement_system.setup()
        self.game_logic_system.setup()

        self._actors: list[Snake] = []
        self._fruit: Optional[Fruit] = None

        self.add_actor(
            self.settings.start_position,
            self.settings.start_direction,
            player_name=self.settings.player_name,
        )

        self._fruit = self._entity_factory.create_entity(EntityID.FRUIT)
        self.relocate_fruit()

    @classmethod
    def from_settings(cls, settings: GameSettings) -> "World":
        return cls(settings.width, settings.height, settings.cell_size, settings=settings)

    @property
    def actors(self) -> list[Snake]:
        return list(self._actors)

    @property
    def fruit(self) -> Fruit:
        return self._fruit

    @property
    def fruit_position(self) -> Optional[Position]:
        return self._fruit.position

    @property
    def grid_full(self) -> bool:
        """True once snakes cover every cell and no fruit is left."""
        return self._fruit.position is None

    @property
    def grid_width(self) -> int:
        return self.settings.width

    @property
    def grid_height(self) -> int:
        return self.settings.height

    @property
    def cell_size(self) -> int:
        return self.settings.cell_size

    def add_actor(
        self,
        position: Position,
        direction: Direction = Direction.RIGHT,
        move_interval: Optional[float] = None,
        player_name: Optional[str] = None,
        color: Optional[tuple[int, int, int]] = None,
    ) -> Snake:
        if player_name is None:
            player_name = f"player_{len(self._actors) + 1}"
        if any(actor.player_name == player_name for actor in self._actors):
            raise ValueError(f"A snake for player '{player_name}' already exists")

        snake = self._entity_factory.create_entity(
            EntityID.SNAKE,
            position=position,
            direction=direction,
            move_interval=move_interval if move_interval is not None else self.settings.move_interval,
            player_name=player_name,
            color=color if color is not None else SNAKE_COLORS[len(self._actors) % len(SNAKE_COLORS)],
            size=self.settings.initial_length,
            score=self.settings.initial_score,
        )
        self._actors.append(snake)
        logger.debug("Added snake '%s' at %s heading %s", player_name, position, direction.name)

        if self._fruit is not None and self._fruit.position in snake.occupied_cells():
            self.relocate_fruit()
        return snake

    def update(self, elapsed: float):
        if elapsed < 0:
            raise ValueError(f"Elapsed time cannot be negative, got {elapsed}")

        for snake in self._actors:
            if snake.dead and not self.settings.tick_dead_actors:
                continue

            steps = 0
            for _ in self.movement_system.run(snake, elapsed):
                steps += 1
                self.game_logic_system.run(snake, self._actors, self._fruit)

            # Other snakes may still have moved into this one
            if steps == 0:
                self.game_logic_system.run(snake, self._actors, self._fruit)

    def relocate_fruit(self) -> Position:
        return self.game_logic_system.spawn_valid_fruit(self._actors, self._fruit)

    def handle_input(self, direction: Direction) -> bool:
        return self._actors[0].set_move(direction)

    def handle_command(self, command: PlayerCommand):
        self.movement_system.apply_commands(self._actors, [command])

    def occupied_cells(self) -> set[Position]:
        cells = set()
        for snake in self._actors:
            cells.update(snake.occupied_cells())
        return cells

    def snapshot(self) -> WorldSnapshot:
        return WorldSnapshot(
            width=self.grid_width,
            height=self.grid_height,
            cell_size=self.cell_size,
            fruit=self.fruit_position,
            actors=[
                ActorState(
                    player_name=snake.player_name,
                    head=snake.get_head(),
                    tail=snake.tail_to_points(),
                    score=snake.score,
                    alive=snake.alive,
                    color=snake.color,
                )
                for snake in self._actors
            ],
        )
