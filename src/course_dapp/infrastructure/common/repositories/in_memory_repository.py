"""Base class for process-lifetime, dictionary-backed repositories."""

from typing import Any, Generic, TypeVar

from course_dapp.domain.common.entity import Entity, EntityId

IdT = TypeVar("IdT", bound=EntityId)
EntityT = TypeVar("EntityT", bound=Entity[Any])


class InMemoryRepository(Generic[IdT, EntityT]):
    """
    Keyed collection of entities held in memory.

    Nothing is persisted: the collection lives as long as the repository
    instance, which the container keeps for the whole process. No
    referential integrity is checked against other repositories.
    """

    def __init__(self) -> None:
        self._items: dict[IdT, EntityT] = {}

    def save(self, entity: EntityT) -> EntityT:
        """Insert or replace an entity under its own ID."""
        self._items[entity.id] = entity
        return entity

    def find_by_id(self, entity_id: IdT) -> EntityT | None:
        return self._items.get(entity_id)

    def find_all(self) -> list[EntityT]:
        """Return a snapshot list, unaffected by later inserts."""
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)
