from snake_sim.components.body.component import BodyComponent
from snake_sim.components.body.position import Position
from snake_sim.components.movement.direction import Direction


class SnakeBody(BodyComponent):
    """
    Snake body stored as the head cell plus one direction per tail segment.

    Each stored direction is the one that segment is travelling in, so the
    segment itself sits one cell *behind* the previous point. Walking the
    tail therefore applies the trailing (inverted) offset of every entry.
    """

    def __init__(
        self,
        position: Position,
        direction: Direction = Direction.RIGHT,
        size: int = 3,
    ):
        super().__init__(starting_position=position)

        self.directions: list[Direction] = [direction for _ in range(size)]

    @classmethod
    def create(
        cls,
        entity,
        position: Position,
        direction: Direction = Direction.RIGHT,
        size: int = 3,
        **_,
    ):
        return cls(position, direction, size)

    @property
    def size(self) -> int:
        return len(self.directions)

    @property
    def tail(self) -> list[Position]:
        return self.tail_to_points()

    @property
    def segments(self) -> list[Position]:
        return [self.head] + self.tail_to_points()

    def advance(self, direction: Direction):
        self.head = self.head + direction.offset

        # Every segment inherits the direction of the one in front of it
        self.directions.insert(0, direction)
        self.directions.pop()

    def add_segment(self):
        last = self.directions[-1] if self.directions else Direction.RIGHT
        self.directions.append(last)

    def tail_to_points(self) -> list[Position]:
        points = []
        next_point = self.head
        for direction in self.directions:
            next_point = next_point + direction.trailing_offset
            points.append(next_point)
        return points
