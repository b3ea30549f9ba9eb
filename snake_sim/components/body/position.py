from pydantic import BaseModel, ConfigDict

class Position(BaseModel):
    """Grid cell coordinate. Immutable, so it can be hashed and shared."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def __init__(self, x: int, y: int, **data):
        super().__init__(x=x, y=y, **data)

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.x - other.x, self.y - other.y)

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y})"
