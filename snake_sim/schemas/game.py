from typing import List, Optional

from pydantic import BaseModel

from snake_sim.components.body.position import Position
from snake_sim.components.movement.direction import Direction


class PlayerCommand(BaseModel):
    player_name: str
    direction: Direction


class ActorState(BaseModel):
    player_name: str
    head: Position
    tail: List[Position]
    score: int
    alive: bool
    color: tuple[int, int, int]


class WorldSnapshot(BaseModel):
    width: int
    height: int
    cell_size: int
    fruit: Optional[Position]
    actors: List[ActorState]
