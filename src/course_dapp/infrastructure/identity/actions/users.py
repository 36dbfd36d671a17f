"""Rollup actions for users and their courses."""

from collections.abc import Callable

from course_dapp.application.identity.use_cases.user_courses_use_case import UserCoursesUseCase
from course_dapp.application.identity.use_cases.user_use_case import UserUseCase
from course_dapp.domain.catalog.entities.course import Course
from course_dapp.domain.identity.entities.user import User
from course_dapp.infrastructure.catalog.mappers.course_mapper import CourseMapper
from course_dapp.infrastructure.catalog.schemas.course_schemas import CourseResponse
from course_dapp.infrastructure.common.schemas.response_wrappers import ActionResponse
from course_dapp.infrastructure.identity.mappers.user_mapper import UserMapper
from course_dapp.infrastructure.identity.schemas.user_schemas import UserResponse
from course_dapp.infrastructure.rollup.registry import ActionData
from course_dapp.infrastructure.rollup.schemas import Status
from course_dapp.infrastructure.rollup.state_handler import RollupStateHandler


class UserActions:
    """
    Handlers for the user actions.

    Each handler takes the request's argument object and finishes through
    the state handler: advance actions with ``advance_wrapper``, inspect
    actions with ``inspect_wrapper``.
    """

    def __init__(
        self,
        state_handler: RollupStateHandler,
        user_use_case: UserUseCase,
        user_courses_use_case: UserCoursesUseCase,
    ) -> None:
        self.state_handler = state_handler
        self.user_use_case = user_use_case
        self.user_courses_use_case = user_courses_use_case
        self.user_mapper = UserMapper()
        self.course_mapper = CourseMapper()

    # --- Advance actions ---

    async def create_user(self, data: ActionData) -> Status:
        """Register a user. Expects ``address``."""
        return await self.state_handler.advance_wrapper(
            lambda: self.user_use_case.create_user(data.get("address")).map(
                self._user_response("User created successfully!")
            )
        )

    async def add_to_waitlist(self, data: ActionData) -> Status:
        """Expects ``course_id`` and either ``address`` or ``id``."""
        return await self.state_handler.advance_wrapper(
            lambda: self.user_courses_use_case.add_to_waitlist(
                data.get("course_id"), user_id=data.get("id"), address=data.get("address")
            ).map(_message("Course added to waitlist successfully!"))
        )

    async def add_to_cart(self, data: ActionData) -> Status:
        """Expects ``course_id`` and either ``address`` or ``id``."""
        return await self.state_handler.advance_wrapper(
            lambda: self.user_courses_use_case.add_to_cart(
                data.get("course_id"), user_id=data.get("id"), address=data.get("address")
            ).map(_message("Course added to cart successfully!"))
        )

    async def remove_from_cart(self, data: ActionData) -> Status:
        """Expects ``course_id`` and either ``address`` or ``id``."""
        return await self.state_handler.advance_wrapper(
            lambda: self.user_courses_use_case.remove_from_cart(
                data.get("course_id"), user_id=data.get("id"), address=data.get("address")
            ).map(_message("Course removed from cart successfully!"))
        )

    async def remove_from_waitlist(self, data: ActionData) -> Status:
        """Expects ``course_id`` and either ``address`` or ``id``."""
        return await self.state_handler.advance_wrapper(
            lambda: self.user_courses_use_case.remove_from_waitlist(
                data.get("course_id"), user_id=data.get("id"), address=data.get("address")
            ).map(_message("Course removed from waitlist successfully!"))
        )

    async def enroll_to_course(self, data: ActionData) -> Status:
        """Expects ``course_id``, ``paid`` and either ``address`` or ``id``."""
        return await self.state_handler.advance_wrapper(
            lambda: self.user_courses_use_case.enroll(
                data.get("course_id"),
                paid=data.get("paid"),
                user_id=data.get("id"),
                address=data.get("address"),
            ).map(
                lambda course: ActionResponse[None](
                    message=f"User has enrolled in {course.name}."
                )
            )
        )

    # --- Inspect actions ---

    async def get_users(self, data: ActionData) -> Status:
        return await self.state_handler.inspect_wrapper(
            lambda: self.user_use_case.get_users().map(
                lambda users: ActionResponse[list[UserResponse]](
                    message="Users retrieved!", data=self.user_mapper.to_schema_list(users)
                )
            )
        )

    async def get_user_by_address(self, data: ActionData) -> Status:
        return await self.state_handler.inspect_wrapper(
            lambda: self.user_use_case.get_user_by_address(data.get("address")).map(
                self._user_response("User retrieved!")
            )
        )

    async def get_user_by_id(self, data: ActionData) -> Status:
        return await self.state_handler.inspect_wrapper(
            lambda: self.user_use_case.get_user_by_id(data.get("id")).map(
                self._user_response("User retrieved!")
            )
        )

    async def get_user_waitlist(self, data: ActionData) -> Status:
        return await self.state_handler.inspect_wrapper(
            lambda: self.user_courses_use_case.get_waitlist(data.get("id")).map(
                self._courses_response("Waitlist retrieved successfully!")
            )
        )

    async def get_user_cart(self, data: ActionData) -> Status:
        return await self.state_handler.inspect_wrapper(
            lambda: self.user_courses_use_case.get_cart(data.get("id")).map(
                self._courses_response("Cart retrieved successfully!")
            )
        )

    async def get_user_enrolled_courses(self, data: ActionData) -> Status:
        return await self.state_handler.inspect_wrapper(
            lambda: self.user_courses_use_case.get_enrolled(data.get("id")).map(
                self._courses_response("Enrolled courses retrieved successfully!")
            )
        )

    def _user_response(self, message: str) -> Callable[[User], ActionResponse[UserResponse]]:
        return lambda user: ActionResponse[UserResponse](
            message=message, data=self.user_mapper.to_schema(user)
        )

    def _courses_response(
        self, message: str
    ) -> Callable[[list[Course]], ActionResponse[list[CourseResponse]]]:
        return lambda courses: ActionResponse[list[CourseResponse]](
            message=message, data=self.course_mapper.to_schema_list(courses)
        )


def _message(message: str) -> Callable[[object], ActionResponse[None]]:
    return lambda _: ActionResponse[None](message=message)
