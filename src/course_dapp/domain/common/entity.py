"""
Identifiers and the entity base class.

Entities are compared by identity: two objects holding the same ID are the
same entity, whatever their other attributes.

Example:
    @dataclass(eq=False)
    class Lesson(Entity[LessonId]):
        id: LessonId
        name: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed entity identifiers.

    Identifiers wrap a UUID4 generated when the entity is constructed.
    They are never reassigned, and the distinct subclasses keep a UserId
    from being used where a CourseId is expected.
    """

    value: UUID

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh, process-unique identifier."""
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: object) -> Self | None:
        """
        Parse an identifier received from a request.

        Returns:
            The identifier, or None if ``raw`` is not a UUID string
        """
        if isinstance(raw, UUID):
            return cls(raw)
        if not isinstance(raw, str):
            return None
        try:
            return cls(UUID(raw))
        except ValueError:
            return None


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Mutable domain object identified by ``id``.

    Dataclass subclasses must pass ``eq=False`` so the identity-based
    comparison below is kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
