from typing import NamedTuple, Optional

from snake_sim.components.body.component import BodyComponent
from snake_sim.components.body.snake import SnakeBody
from snake_sim.components.color import ColorComponent
from snake_sim.components.movement.snake import SnakeMovement
from snake_sim.components.player import PlayerComponent
from snake_sim.constants.colors import FRUIT_COLOR
from snake_sim.entities.entity_id import EntityID
from snake_sim.entities.type import Fruit, Snake


class EntityBlueprint(NamedTuple):
    entity_type: type
    # Built in this order, later components may look up earlier ones
    components: list
    defaults: dict


def get_entities_configuration() -> "EntityConfiguration":
    entities_config = EntityConfiguration()
    entities_config.add_configuration(
        EntityID.SNAKE,
        Snake,
        components=[SnakeBody, SnakeMovement, PlayerComponent, ColorComponent],
    )
    entities_config.add_configuration(
        EntityID.FRUIT,
        Fruit,
        components=[BodyComponent, ColorComponent],
        defaults={"color": FRUIT_COLOR},
    )
    return entities_config


class EntityConfiguration(dict):
    def __setitem__(self, key, value):
        if not isinstance(key, EntityID):
            raise ValueError("Key must be an EntityID")
        elif not isinstance(value, EntityBlueprint):
            raise ValueError("Value must be an EntityBlueprint")
        elif not value.components:
            raise ValueError(f"{key.name} entity needs at least one component")
        elif key in self:
            raise ValueError(f"{key.name} entity configuration already exists")
        super().__setitem__(key, value)

    def __getitem__(self, key) -> EntityBlueprint:
        if not isinstance(key, EntityID):
            raise ValueError("Key must be an EntityID")
        elif key not in self:
            raise ValueError(f"{key.name} entity configuration does not exist")
        return super().__getitem__(key)

    def add_configuration(
        self,
        entity_id: EntityID,
        entity_type: type,
        components: list,
        defaults: Optional[dict] = None,
    ):
        self[entity_id] = EntityBlueprint(entity_type, list(components), dict(defaults or {}))
