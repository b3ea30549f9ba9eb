from snake_sim.entities.entity_id import EntityID


class Entity:
    def __init__(self, entity_id: EntityID, entity_hash: str):
        self.id = entity_id
        self.hash = entity_hash
        self._components = {}

    def add_component(self, component):
        component_type = type(component)
        if component_type in self._components:
            raise ValueError(
                "Component already exists for this entity.\n"
                + f"  Entity id: '{self.id.name}',\n"
                + f"  Entity hash: '{self.hash}',\n"
                + f"  Component type: '{component_type.__name__}'"
            )
        self._components[component_type] = component

    def get_component(self, component_type):
        component = self._components.get(component_type)
        if component is not None:
            return component

        # Fall back to subclasses, e.g. a SnakeBody is also a BodyComponent
        for component in self._components.values():
            if isinstance(component, component_type):
                return component
        return None

    def __eq__(self, value) -> bool:
        if not issubclass(type(value), Entity):
            raise ValueError("Entities can only be compared to other entities.")

        return self.hash == value.hash

    def __hash__(self) -> int:
        return hash(self.hash)
