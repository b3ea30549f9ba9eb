import logging

from snake_sim.components.body.snake import SnakeBody
from snake_sim.components.movement.component import MovementComponent
from snake_sim.components.movement.direction import Direction, is_opposite

logger = logging.getLogger(__name__)


class SnakeMovement(MovementComponent):
    def __init__(
        self,
        snake_body: SnakeBody,
        direction: Direction = Direction.RIGHT,
        move_interval: float = 0.05,
    ):
        super().__init__(direction, move_interval)
        self.snake_body = snake_body
        # Only committed to self.direction on the next step
        self.pending_direction = direction

    @classmethod
    def create(
        cls,
        entity,
        direction: Direction = Direction.RIGHT,
        move_interval: float = 0.05,
        **_,
    ):
        snake_body = entity.get_component(SnakeBody)
        if snake_body is None:
            raise ValueError(f"{cls.__name__} needs a SnakeBody added before it")
        return cls(snake_body, direction, move_interval)

    @property
    def current_direction(self) -> Direction:
        return self.direction

    def set_move(self, direction: Direction) -> bool:
        if is_opposite(self.direction, direction):
            logger.debug("Ignoring reversal from %s to %s", self.direction.name, direction.name)
            return False

        self.pending_direction = direction
        return True

    def move(self):
        self.snake_body.advance(self.pending_direction)
        self.direction = self.pending_direction
