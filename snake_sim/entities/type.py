from typing import Iterable, Optional

from snake_sim.components.body.component import BodyComponent
from snake_sim.components.body.position import Position
from snake_sim.components.body.snake import SnakeBody
from snake_sim.components.color import ColorComponent
from snake_sim.components.movement.direction import Direction
from snake_sim.components.movement.snake import SnakeMovement
from snake_sim.components.player import PlayerComponent
from snake_sim.entities.base import Entity
from snake_sim.entities.entity_id import EntityID


# Define the player snake
class Snake(Entity):
    def __init__(self, entity_hash: str):
        super().__init__(EntityID.SNAKE, entity_hash)

    @property
    def _body(self) -> SnakeBody:
        return self.get_component(SnakeBody)

    @property
    def _movement(self) -> SnakeMovement:
        return self.get_component(SnakeMovement)

    @property
    def _player(self) -> PlayerComponent:
        return self.get_component(PlayerComponent)

    @property
    def player_name(self) -> str:
        return self._player.name

    @property
    def color(self) -> tuple[int, int, int]:
        return self.get_component(ColorComponent).color

    @property
    def head_position(self) -> Position:
        return self._body.head

    @property
    def body(self) -> list[Direction]:
        return list(self._body.directions)

    @property
    def current_direction(self) -> Direction:
        return self._movement.current_direction

    @property
    def pending_direction(self) -> Direction:
        return self._movement.pending_direction

    @property
    def move_interval(self) -> float:
        return self._movement.move_interval

    @property
    def elapsed_since_move(self) -> float:
        return self._movement.elapsed_since_move

    @property
    def score(self) -> int:
        return self._player.score

    @score.setter
    def score(self, value: int):
        self._player.score = value

    @property
    def alive(self) -> bool:
        return self._player.alive

    @alive.setter
    def alive(self, value: bool):
        if value and not self._player.alive:
            raise ValueError(f"Snake '{self.player_name}' is dead and cannot be revived")
        self._player.alive = value

    @property
    def dead(self) -> bool:
        return not self.alive

    @dead.setter
    def dead(self, value: bool):
        self.alive = not value

    def update(self, elapsed: float) -> int:
        steps = self.advance_clock(elapsed)
        for _ in range(steps):
            self.step()
        return steps

    def advance_clock(self, elapsed: float) -> int:
        return self._movement.advance_clock(elapsed)

    def step(self):
        self._movement.move()

    def set_move(self, direction: Direction) -> bool:
        return self._movement.set_move(direction)

    def add_segment(self):
        self._body.add_segment()

    def check_collision(
        self, map_width: int, map_height: int, obstacle_cells: Iterable[Position]
    ) -> bool:
        head = self._body.head

        # Map bounds
        if head.x < 0 or head.y < 0 or head.x >= map_width or head.y >= map_height:
            return True

        # Obstacles
        return any(head == cell for cell in obstacle_cells)

    def get_head(self) -> Position:
        return self._body.head

    def tail_to_points(self) -> list[Position]:
        return self._body.tail_to_points()

    def occupied_cells(self) -> list[Position]:
        return self._body.segments


# Define the fruit
class Fruit(Entity):
    def __init__(self, entity_hash: str):
        super().__init__(EntityID.FRUIT, entity_hash)

    @property
    def position(self) -> Optional[Position]:
        # None once the grid is full
        return self.get_component(BodyComponent).head

    @position.setter
    def position(self, new_position: Optional[Position]):
        self.get_component(BodyComponent).head = new_position
