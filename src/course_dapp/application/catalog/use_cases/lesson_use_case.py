"""Use case for adding lessons to courses."""

import structlog

from course_dapp.application.catalog.protocols.course_repository import CourseRepositoryProtocol
from course_dapp.application.catalog.protocols.lesson_repository import LessonRepositoryProtocol
from course_dapp.application.common.result import Failure, Result, Success
from course_dapp.application.identity.services.user_lookup_service import UserLookupService
from course_dapp.domain.catalog.entities.lesson import Lesson
from course_dapp.domain.common.exceptions import DomainError
from course_dapp.domain.common.value_objects.ids import CourseId

logger = structlog.get_logger(__name__)


class LessonUseCase:
    """Use case for lesson creation and listing."""

    def __init__(
        self,
        course_repository: CourseRepositoryProtocol,
        lesson_repository: LessonRepositoryProtocol,
        user_lookup_service: UserLookupService,
    ) -> None:
        """Initialize use case with dependencies."""
        self.course_repository = course_repository
        self.lesson_repository = lesson_repository
        self.user_lookup_service = user_lookup_service

    def create_lesson(
        self,
        course_id: object,
        name: object,
        module: object,
        content: object,
        creator_id: object = None,
        creator_address: object = None,
    ) -> Result[Lesson, str]:
        """
        Create a lesson and append it to a course.

        The creator must exist but is not required to own the course.

        Returns:
            Success with the created lesson, or Failure with an error message
        """
        if not creator_address and not creator_id:
            return Failure("creator id or address is required.")
        if not course_id:
            return Failure("course_id is required.")
        if not name or not module or not content:
            return Failure("lesson name, module, and content are required.")

        creator = self.user_lookup_service.find_user(user_id=creator_id, address=creator_address)
        if not creator:
            return Failure("creator not found.")

        parsed_id = CourseId.parse(course_id)
        course = self.course_repository.find_by_id(parsed_id) if parsed_id else None
        if not course:
            return Failure(f"Course with ID '{course_id}' not found.")

        try:
            lesson = Lesson.create(name=str(name), module=str(module), content=str(content))
        except DomainError as e:
            return Failure(e.message)

        lesson = self.lesson_repository.save(lesson)
        course.add_lesson(lesson)
        logger.info("lesson_created", lesson_id=str(lesson.id), course_id=str(course.id))
        return Success(lesson)

    def get_lessons(self, course_id: object) -> Result[list[Lesson], str]:
        """Return a course's lessons in the order they were added."""
        if not course_id:
            return Failure("course_id is required.")

        parsed_id = CourseId.parse(course_id)
        course = self.course_repository.find_by_id(parsed_id) if parsed_id else None
        if not course:
            return Failure(f"Course with ID '{course_id}' not found.")

        return Success(course.get_lessons())
