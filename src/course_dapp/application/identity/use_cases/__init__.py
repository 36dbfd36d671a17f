from .user_courses_use_case import UserCoursesUseCase
from .user_use_case import UserUseCase

__all__ = [
    "UserCoursesUseCase",
    "UserUseCase",
]
