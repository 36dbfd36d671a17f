from .course_use_case import CourseUseCase
from .lesson_use_case import LessonUseCase

__all__ = [
    "CourseUseCase",
    "LessonUseCase",
]
