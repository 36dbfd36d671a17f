"""Use case for publishing and querying courses."""

import structlog

from course_dapp.application.catalog.protocols.course_repository import CourseRepositoryProtocol
from course_dapp.application.common.result import Failure, Result, Success
from course_dapp.application.identity.services.user_lookup_service import UserLookupService
from course_dapp.domain.catalog.entities.course import Course
from course_dapp.domain.common.exceptions import DomainError
from course_dapp.domain.common.value_objects.ids import CourseId

logger = structlog.get_logger(__name__)


class CourseUseCase:
    """Use case for course creation, updates and queries."""

    def __init__(
        self,
        course_repository: CourseRepositoryProtocol,
        user_lookup_service: UserLookupService,
    ) -> None:
        """Initialize use case with dependencies."""
        self.course_repository = course_repository
        self.user_lookup_service = user_lookup_service

    def create_course(
        self,
        name: object,
        img_url: object,
        description: object,
        creator_id: object = None,
        creator_address: object = None,
    ) -> Result[Course, str]:
        """
        Create a course owned by the creating user.

        Args:
            name: Course name
            img_url: URL of the course image
            description: Course description
            creator_id: ID of the creator (optional if creator_address is given)
            creator_address: Address of the creator (optional if creator_id is given)

        Returns:
            Success with the created course, or Failure with an error message
        """
        if not creator_address and not creator_id:
            return Failure("creator id or address is required.")
        if not name or not img_url or not description:
            return Failure("course name, img_url, and description are required.")

        creator = self.user_lookup_service.find_user(user_id=creator_id, address=creator_address)
        if not creator:
            return Failure("creator not found.")

        try:
            course = Course.create(
                name=str(name),
                img_url=str(img_url),
                description=str(description),
                owner=creator.id,
            )
        except DomainError as e:
            return Failure(e.message)

        course = self.course_repository.save(course)
        logger.info("course_created", course_id=str(course.id), owner=str(creator.id))
        return Success(course)

    def update_course(
        self,
        course_id: object,
        creator_id: object = None,
        creator_address: object = None,
        name: object = None,
        img_url: object = None,
        description: object = None,
    ) -> Result[Course, str]:
        """
        Update a course's details on behalf of its owner.

        Empty fields keep their current value.

        Returns:
            Success with the updated course, or Failure with an error message
        """
        if not creator_address and not creator_id:
            return Failure("creator id or address is required.")
        if not course_id:
            return Failure("course_id is required.")

        creator = self.user_lookup_service.find_user(user_id=creator_id, address=creator_address)
        if not creator:
            return Failure("creator not found.")

        course = self._find_course(course_id)
        if not course:
            return Failure(f"Course with ID '{course_id}' not found.")

        try:
            course.update_details(
                editor=creator.id,
                name=str(name) if name else None,
                img_url=str(img_url) if img_url else None,
                description=str(description) if description else None,
            )
        except DomainError as e:
            logger.warning(
                "course_update_refused", course_id=str(course.id), editor=str(creator.id)
            )
            return Failure(e.message)

        course = self.course_repository.save(course)
        logger.info("course_updated", course_id=str(course.id))
        return Success(course)

    def get_courses(self) -> Result[list[Course], str]:
        return Success(self.course_repository.find_all())

    def get_course(self, course_id: object) -> Result[Course, str]:
        course = self._find_course(course_id)
        if not course:
            return Failure(f"Course with ID '{course_id}' not found.")
        return Success(course)

    def get_creator_courses(self, creator_id: object) -> Result[list[Course], str]:
        """Return the courses owned by the given creator, in creation order."""
        if not creator_id:
            return Failure("creator id is required.")

        creator = self.user_lookup_service.find_user(user_id=creator_id)
        if not creator:
            return Failure("creator not found.")

        return Success(self.course_repository.find_by_owner(creator.id))

    def _find_course(self, course_id: object) -> Course | None:
        parsed_id = CourseId.parse(course_id)
        if parsed_id is None:
            return None
        return self.course_repository.find_by_id(parsed_id)
