from .courses import CourseActions

__all__ = ["CourseActions"]
