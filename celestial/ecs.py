"""A small entity-component system.

Components hold behaviour, entities own components and may belong to
numbered groups, and an entity manager owns entities and drives them.
"""

from __future__ import annotations

from typing import Any, TypeVar

MAX_GROUPS = 64

C = TypeVar("C", bound="Component")


def _check_group(group: int) -> None:
    if not 0 <= group < MAX_GROUPS:
        raise IndexError(f"group {group} is outside 0..{MAX_GROUPS - 1}")


class Component:
    """Base class for behaviour attached to an entity."""

    entity: Entity | None = None

    def init(self) -> None:
        """Called once, right after the component is attached to its entity."""

    def update(self) -> None:
        """Called once per frame."""

    def render(self) -> None:
        """Called once per drawn frame."""


class Entity:
    """A bag of components that can be tagged with groups."""

    def __init__(self, manager: EntityManager) -> None:
        self.manager = manager
        self._active = True
        self._components: list[Component] = []
        self._by_type: dict[type, Component] = {}
        self._groups: set[int] = set()

    def update(self) -> None:
        for component in list(self._components):
            component.update()

    def render(self) -> None:
        for component in list(self._components):
            component.render()

    def is_active(self) -> bool:
        return self._active

    def destroy(self) -> None:
        """Mark the entity for removal at the manager's next refresh."""
        self._active = False

    def has_group(self, group: int) -> bool:
        _check_group(group)
        return group in self._groups

    def add_group(self, group: int) -> None:
        _check_group(group)
        self._groups.add(group)
        self.manager.add_to_group(self, group)

    def delete_group(self, group: int) -> None:
        """Leave a group; the manager drops the entity from it on refresh."""
        _check_group(group)
        self._groups.discard(group)

    def has_component(self, component_type: type) -> bool:
        return component_type in self._by_type

    def add_component(self, component_type: type[C], *args: Any, **kwargs: Any) -> C:
        """Build a component, attach it, run its init and return it."""
        component = component_type(*args, **kwargs)
        component.entity = self
        self._components.append(component)
        self._by_type[component_type] = component
        component.init()
        return component

    def get_component(self, component_type: type[C]) -> C:
        try:
            return self._by_type[component_type]  # type: ignore[return-value]
        except KeyError:
            raise KeyError(
                f"entity has no {component_type.__name__} component"
            ) from None


class EntityManager:
    """Owns entities and their group memberships."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._groups: list[list[Entity]] = [[] for _ in range(MAX_GROUPS)]

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    def update(self) -> None:
        for entity in list(self._entities):
            entity.update()

    def render(self) -> None:
        for entity in list(self._entities):
            entity.render()

    def refresh(self) -> None:
        """Drop destroyed entities and stale group memberships."""
        for index, members in enumerate(self._groups):
            members[:] = [
                entity
                for entity in members
                if entity.is_active() and entity.has_group(index)
            ]
        self._entities[:] = [entity for entity in self._entities if entity.is_active()]

    def add_to_group(self, entity: Entity, group: int) -> None:
        _check_group(group)
        self._groups[group].append(entity)

    def get_group(self, group: int) -> list[Entity]:
        _check_group(group)
        return self._groups[group]

    def add_entity(self) -> Entity:
        entity = Entity(self)
        self._entities.append(entity)
        return entity