import hashlib
from typing import Optional

from snake_sim.entities.base import Entity
from snake_sim.entities.configuration import EntityConfiguration, get_entities_configuration
from snake_sim.entities.entity_id import EntityID


class EntityFactory:
    def __init__(self, config: Optional[EntityConfiguration] = None):
        self._config = config if config is not None else get_entities_configuration()
        self._used_hashes = set()
        self._created = 0

    def create_entity(self, entity_id: EntityID, **kwargs) -> Entity:
        """Build an entity and add its configured components in order.

        Keyword arguments are offered to every component, each one picks
        the options it understands.
        """
        blueprint = self._config[entity_id]
        options = {**blueprint.defaults, **kwargs}

        entity = blueprint.entity_type(self._get_entity_hash(entity_id))
        for component_type in blueprint.components:
            entity.add_component(component_type.create(entity, **options))
        return entity

    def _get_entity_hash(self, entity_id: EntityID) -> str:
        hashed = self._next_hash(entity_id)
        while hashed in self._used_hashes:
            hashed = self._next_hash(entity_id)
        self._used_hashes.add(hashed)
        return hashed

    def _next_hash(self, entity_id: EntityID) -> str:
        self._created += 1
        return hashlib.sha256(f"{entity_id.name}:{self._created}".encode()).hexdigest()
