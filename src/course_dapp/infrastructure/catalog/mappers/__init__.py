from .course_mapper import CourseMapper, LessonMapper

__all__ = [
    "CourseMapper",
    "LessonMapper",
]
