from snake_sim.components.body.position import Position


class BodyComponent:
    def __init__(self, starting_position: Position = Position(0, 0)):
        self.head = starting_position

    @classmethod
    def create(cls, entity, position: Position = Position(0, 0), **_):
        return cls(position)

    @property
    def segments(self) -> list[Position]:
        return [self.head]
