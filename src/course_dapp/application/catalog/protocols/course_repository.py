from typing import Protocol

from course_dapp.domain.catalog.entities.course import Course
from course_dapp.domain.common.value_objects.ids import CourseId, UserId


class CourseRepositoryProtocol(Protocol):
    def find_by_id(self, course_id: CourseId) -> Course | None: ...

    def find_all(self) -> list[Course]: ...

    def find_by_owner(self, owner: UserId) -> list[Course]: ...

    def save(self, course: Course) -> Course: ...
