from snake_sim.constants.colors import GREEN


class ColorComponent:
    def __init__(self, color: tuple[int, int, int] = GREEN):
        self.color = color

    @classmethod
    def create(cls, entity, color: tuple[int, int, int] = GREEN, **_):
        return cls(color)
