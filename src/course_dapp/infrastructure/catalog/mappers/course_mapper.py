"""Mappers for Course/Lesson domain → wire conversion."""

from course_dapp.domain.catalog.entities.course import Course
from course_dapp.domain.catalog.entities.lesson import Lesson
from course_dapp.infrastructure.catalog.schemas.course_schemas import (
    CourseResponse,
    LessonResponse,
)
from course_dapp.infrastructure.common.time_utils import to_epoch_millis


class CourseMapper:
    """Mapper for Course domain → wire conversion."""

    def to_schema(self, course: Course) -> CourseResponse:
        return CourseResponse(
            id=str(course.id),
            name=course.name,
            owner=str(course.owner),
            img_url=course.img_url,
            description=course.description,
            created_at=to_epoch_millis(course.created_at),
        )

    def to_schema_list(self, courses: list[Course]) -> list[CourseResponse]:
        return [self.to_schema(course) for course in courses]


class LessonMapper:
    """Mapper for Lesson domain → wire conversion."""

    def to_schema(self, lesson: Lesson) -> LessonResponse:
        return LessonResponse(
            id=str(lesson.id),
            name=lesson.name,
            module=lesson.module,
            content=lesson.content,
            created_at=to_epoch_millis(lesson.created_at),
        )

    def to_schema_list(self, lessons: list[Lesson]) -> list[LessonResponse]:
        return [self.to_schema(lesson) for lesson in lessons]
