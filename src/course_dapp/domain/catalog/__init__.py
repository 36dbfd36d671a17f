"""Catalog domain layer: courses and their lessons."""

from course_dapp.domain.catalog.entities import Course, Lesson
from course_dapp.domain.catalog.exceptions import NotCourseOwnerError

__all__ = [
    "Course",
    "Lesson",
    "NotCourseOwnerError",
]
