from typing import Protocol

from course_dapp.domain.catalog.entities.lesson import Lesson
from course_dapp.domain.common.value_objects.ids import LessonId


class LessonRepositoryProtocol(Protocol):
    def find_by_id(self, lesson_id: LessonId) -> Lesson | None: ...

    def find_all(self) -> list[Lesson]: ...

    def save(self, lesson: Lesson) -> Lesson: ...
