from enum import Enum

from snake_sim.components.body.position import Position


class Direction(Enum):
    # ! Do not change member order, it is being used for checking if the
    # ! snake is doing a 180 degrees turn
    UP = "UP"
    LEFT = "LEFT"
    DOWN = "DOWN"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> Position:
        return _OFFSETS[self]

    @property
    def trailing_offset(self) -> Position:
        # Where the previous segment sits when this one travels in self
        return _TRAILING_OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        indexed_directions = list(Direction)
        # Opposite direction is 2 units away in the member order.
        # Go back to 0 if it goes outside of the list length.
        opposite_index = (indexed_directions.index(self) + 2) % len(indexed_directions)
        return indexed_directions[opposite_index]


_OFFSETS = {
    Direction.UP: Position(0, -1),
    Direction.LEFT: Position(-1, 0),
    Direction.DOWN: Position(0, 1),
    Direction.RIGHT: Position(1, 0),
}

_TRAILING_OFFSETS = {
    Direction.UP: Position(0, 1),
    Direction.LEFT: Position(1, 0),
    Direction.DOWN: Position(0, -1),
    Direction.RIGHT: Position(-1, 0),
}


def is_opposite(current_direction: Direction, new_direction: Direction) -> bool:
    return new_direction == current_direction.opposite
