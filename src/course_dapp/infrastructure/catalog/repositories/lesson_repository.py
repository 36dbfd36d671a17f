"""Repository for Lesson domain entities."""

from course_dapp.domain.catalog.entities.lesson import Lesson
from course_dapp.domain.common.value_objects.ids import LessonId
from course_dapp.infrastructure.common.repositories.in_memory_repository import (
    InMemoryRepository,
)


class LessonRepository(InMemoryRepository[LessonId, Lesson]):
    """Repository for Lesson domain entities."""
