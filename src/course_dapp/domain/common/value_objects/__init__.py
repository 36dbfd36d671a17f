"""Common value objects shared across all domain modules."""

from .ids import CourseId, LessonId, UserId

__all__ = [
    "CourseId",
    "LessonId",
    "UserId",
]
