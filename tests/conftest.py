import os

# Let pygame run without a real display or audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pytest  # noqa: E402

from snake_sim.components.body.position import Position  # noqa: E402
from snake_sim.components.movement.direction import Direction  # noqa: E402
from snake_sim.entities.entity_id import EntityID  # noqa: E402
from snake_sim.entities.factory import EntityFactory  # noqa: E402
from snake_sim.game_logic.world import World  # noqa: E402
from snake_sim.schemas.settings import GameSettings  # noqa: E402


@pytest.fixture
def make_snake():
    """Build snakes through the entity factory, stepping once per second by default."""
    factory = EntityFactory()

    def _make_snake(position, direction=Direction.RIGHT, move_interval=1.0, **kwargs):
        return factory.create_entity(
            EntityID.SNAKE,
            position=position,
            direction=direction,
            move_interval=move_interval,
            **kwargs,
        )

    return _make_snake


@pytest.fixture
def snake(make_snake):
    """Snake at (10, 10) heading right, stepping once per second."""
    return make_snake(Position(10, 10))


@pytest.fixture
def small_world():
    """10x10 world with the default snake at (5, 5) stepping once per second."""
    settings = GameSettings(width=10, height=10, move_interval=1.0, seed=1234)
    return World.from_settings(settings)
