from .course_repository import CourseRepositoryProtocol
from .lesson_repository import LessonRepositoryProtocol

__all__ = [
    "CourseRepositoryProtocol",
    "LessonRepositoryProtocol",
]
