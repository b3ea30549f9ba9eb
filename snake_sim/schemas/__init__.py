from .game import ActorState, PlayerCommand, WorldSnapshot
from .settings import GameSettings
