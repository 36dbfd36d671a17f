from .course_repository import CourseRepository
from .lesson_repository import LessonRepository

__all__ = [
    "CourseRepository",
    "LessonRepository",
]
