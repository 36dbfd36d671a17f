"""Repository for Course domain entities."""

from course_dapp.domain.catalog.entities.course import Course
from course_dapp.domain.common.value_objects.ids import CourseId, UserId
from course_dapp.infrastructure.common.repositories.in_memory_repository import (
    InMemoryRepository,
)


class CourseRepository(InMemoryRepository[CourseId, Course]):
    """Repository for Course domain entities."""

    def find_by_owner(self, owner: UserId) -> list[Course]:
        """Return the courses owned by a user, in creation order."""
        return [course for course in self._items.values() if course.owner == owner]
