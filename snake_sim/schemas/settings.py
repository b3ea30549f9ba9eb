import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from snake_sim.components.body.position import Position
from snake_sim.components.movement.direction import Direction

logger = logging.getLogger(__name__)


class GameSettings(BaseModel):
    # Grid
    width: int = Field(default=40, gt=0)
    height: int = Field(default=30, gt=0)
    cell_size: int = Field(default=20, gt=0)

    # Default player snake
    player_name: str = "player"
    start_x: int = Field(default=5, ge=0)
    start_y: int = Field(default=5, ge=0)
    start_direction: Direction = Direction.RIGHT
    move_interval: float = Field(default=0.05, gt=0)
    initial_length: int = Field(default=3, ge=0)
    initial_score: int = 10

    # Rules
    fruit_reward: int = 10
    tick_dead_actors: bool = True
    seed: Optional[int] = None

    # Driver
    tick_rate: int = Field(default=60, gt=0)

    @model_validator(mode="after")
    def _clamp_start_to_grid(self):
        start_x = min(self.start_x, self.width - 1)
        start_y = min(self.start_y, self.height - 1)
        if (start_x, start_y) != (self.start_x, self.start_y):
            logger.warning(
                "Start cell (%d, %d) is outside of the %dx%d grid, using (%d, %d)",
                self.start_x,
                self.start_y,
                self.width,
                self.height,
                start_x,
                start_y,
            )
            self.start_x = start_x
            self.start_y = start_y
        return self

    @property
    def start_position(self) -> Position:
        return Position(self.start_x, self.start_y)

    @classmethod
    def from_file(cls, path) -> "GameSettings":
        return cls.model_validate_json(Path(path).read_text())
