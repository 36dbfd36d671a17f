"""Catalog context schemas."""

from course_dapp.infrastructure.catalog.schemas.course_schemas import (
    CourseResponse,
    LessonResponse,
)

__all__ = [
    "CourseResponse",
    "LessonResponse",
]
