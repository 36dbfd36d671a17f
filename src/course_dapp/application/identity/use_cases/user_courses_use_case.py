"""Use case for managing a user's cart, waitlist and enrollments."""

from dataclasses import dataclass

import structlog

from course_dapp.application.catalog.protocols.course_repository import CourseRepositoryProtocol
from course_dapp.application.common.result import Failure, Result, Success
from course_dapp.application.identity.services.user_lookup_service import UserLookupService
from course_dapp.domain.catalog.entities.course import Course
from course_dapp.domain.common.value_objects.ids import CourseId
from course_dapp.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UserCourseTarget:
    """The user and course a cart/waitlist/enrollment request refers to."""

    user: User
    course: Course


class UserCoursesUseCase:
    """Use case for the courses attached to a user."""

    def __init__(
        self,
        user_lookup_service: UserLookupService,
        course_repository: CourseRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_lookup_service = user_lookup_service
        self.course_repository = course_repository

    def _resolve_target(
        self, course_id: object, user_id: object, address: object
    ) -> Result[UserCourseTarget, str]:
        """
        Validate request fields and find the referenced user and course.

        Checks run in a fixed order so the first problem found is the one
        reported: missing user reference, missing course ID, unknown user,
        unknown course.
        """
        if not address and not user_id:
            return Failure("User ID or address is required.")
        if not course_id:
            return Failure("Course ID is required.")

        user = self.user_lookup_service.find_user(user_id=user_id, address=address)
        if not user:
            return Failure("User not found.")

        parsed_course_id = CourseId.parse(course_id)
        course = self.course_repository.find_by_id(parsed_course_id) if parsed_course_id else None
        if not course:
            return Failure("Course not found.")

        return Success(UserCourseTarget(user=user, course=course))

    def add_to_cart(
        self, course_id: object, user_id: object = None, address: object = None
    ) -> Result[Course, str]:
        target = self._resolve_target(course_id, user_id, address)
        if isinstance(target, Failure):
            return target
        target.value.user.add_to_cart(target.value.course)
        logger.info(
            "course_added_to_cart",
            user_id=str(target.value.user.id),
            course_id=str(target.value.course.id),
        )
        return Success(target.value.course)

    def remove_from_cart(
        self, course_id: object, user_id: object = None, address: object = None
    ) -> Result[Course, str]:
        target = self._resolve_target(course_id, user_id, address)
        if isinstance(target, Failure):
            return target
        target.value.user.remove_from_cart(target.value.course.id)
        logger.info(
            "course_removed_from_cart",
            user_id=str(target.value.user.id),
            course_id=str(target.value.course.id),
        )
        return Success(target.value.course)

    def add_to_waitlist(
        self, course_id: object, user_id: object = None, address: object = None
    ) -> Result[Course, str]:
        target = self._resolve_target(course_id, user_id, address)
        if isinstance(target, Failure):
            return target
        target.value.user.add_to_waitlist(target.value.course)
        logger.info(
            "course_added_to_waitlist",
            user_id=str(target.value.user.id),
            course_id=str(target.value.course.id),
        )
        return Success(target.value.course)

    def remove_from_waitlist(
        self, course_id: object, user_id: object = None, address: object = None
    ) -> Result[Course, str]:
        target = self._resolve_target(course_id, user_id, address)
        if isinstance(target, Failure):
            return target
        target.value.user.remove_from_waitlist(target.value.course.id)
        logger.info(
            "course_removed_from_waitlist",
            user_id=str(target.value.user.id),
            course_id=str(target.value.course.id),
        )
        return Success(target.value.course)

    def enroll(
        self,
        course_id: object,
        paid: object,
        user_id: object = None,
        address: object = None,
    ) -> Result[Course, str]:
        """
        Enroll a user in a course.

        Payment is not verified on-chain; the caller states it through
        ``paid`` and an unpaid request is refused without touching the
        user's enrollments.

        Returns:
            Success with the course, or Failure with an error message
        """
        target = self._resolve_target(course_id, user_id, address)
        if isinstance(target, Failure):
            return target
        if not paid:
            return Failure("User has not purchased the course.")

        target.value.user.enroll(target.value.course)
        logger.info(
            "user_enrolled",
            user_id=str(target.value.user.id),
            course_id=str(target.value.course.id),
        )
        return Success(target.value.course)

    def _find_user(self, user_id: object) -> Result[User, str]:
        if not user_id:
            return Failure("User ID or address is required.")
        user = self.user_lookup_service.find_user(user_id=user_id)
        if not user:
            return Failure("User not found.")
        return Success(user)

    def get_cart(self, user_id: object) -> Result[list[Course], str]:
        return self._find_user(user_id).map(lambda user: user.get_cart())

    def get_waitlist(self, user_id: object) -> Result[list[Course], str]:
        return self._find_user(user_id).map(lambda user: user.get_waitlist())

    def get_enrolled(self, user_id: object) -> Result[list[Course], str]:
        return self._find_user(user_id).map(lambda user: user.get_enrolled())
