from enum import Enum, auto


class EntityID(Enum):
    SNAKE = auto()
    FRUIT = auto()
