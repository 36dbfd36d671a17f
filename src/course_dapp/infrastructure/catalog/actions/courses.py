"""Rollup actions for courses and lessons."""

from course_dapp.application.catalog.use_cases.course_use_case import CourseUseCase
from course_dapp.application.catalog.use_cases.lesson_use_case import LessonUseCase
from course_dapp.infrastructure.catalog.mappers.course_mapper import CourseMapper, LessonMapper
from course_dapp.infrastructure.catalog.schemas.course_schemas import (
    CourseResponse,
    LessonResponse,
)
from course_dapp.infrastructure.common.schemas.response_wrappers import ActionResponse
from course_dapp.infrastructure.rollup.registry import ActionData
from course_dapp.infrastructure.rollup.schemas import Status
from course_dapp.infrastructure.rollup.state_handler import RollupStateHandler


class CourseActions:
    """Handlers for the course and lesson actions."""

    def __init__(
        self,
        state_handler: RollupStateHandler,
        course_use_case: CourseUseCase,
        lesson_use_case: LessonUseCase,
    ) -> None:
        self.state_handler = state_handler
        self.course_use_case = course_use_case
        self.lesson_use_case = lesson_use_case
        self.course_mapper = CourseMapper()
        self.lesson_mapper = LessonMapper()

    # --- Advance actions ---

    async def create_course(self, data: ActionData) -> Status:
        """
        Create a course.

        Expects ``name``, ``img_url``, ``description`` and the creator as
        ``creator_address`` or ``creator_id`` (``owner`` is accepted as an
        alias of ``creator_id``).
        """
        return await self.state_handler.advance_wrapper(
            lambda: self.course_use_case.create_course(
                name=data.get("name"),
                img_url=data.get("img_url"),
                description=data.get("description"),
                creator_id=data.get("creator_id") or data.get("owner"),
                creator_address=data.get("creator_address"),
            ).map(
                lambda course: ActionResponse[CourseResponse](
                    message="Course created successfully!",
                    data=self.course_mapper.to_schema(course),
                )
            )
        )

    async def update_course(self, data: ActionData) -> Status:
        """Update a course's name, image or description on behalf of its owner."""
        return await self.state_handler.advance_wrapper(
            lambda: self.course_use_case.update_course(
                course_id=data.get("course_id"),
                creator_id=data.get("creator_id"),
                creator_address=data.get("creator_address"),
                name=data.get("name"),
                img_url=data.get("img_url"),
                description=data.get("description"),
            ).map(
                lambda course: ActionResponse[CourseResponse](
                    message="Course updated successfully!",
                    data=self.course_mapper.to_schema(course),
                )
            )
        )

    async def create_lessons(self, data: ActionData) -> Status:
        """
        Add a lesson to a course.

        Expects ``course_id``, ``name``, ``module``, ``content`` and the
        creator as ``creator_address`` or ``creator_id``.
        """
        return await self.state_handler.advance_wrapper(
            lambda: self.lesson_use_case.create_lesson(
                course_id=data.get("course_id"),
                name=data.get("name"),
                module=data.get("module"),
                content=data.get("content"),
                creator_id=data.get("creator_id"),
                creator_address=data.get("creator_address"),
            ).map(
                lambda lesson: ActionResponse[LessonResponse](
                    message="Lesson created successfully!",
                    data=self.lesson_mapper.to_schema(lesson),
                )
            )
        )

    # --- Inspect actions ---

    async def get_courses(self, data: ActionData) -> Status:
        return await self.state_handler.inspect_wrapper(
            lambda: self.course_use_case.get_courses().map(
                lambda courses: ActionResponse[list[CourseResponse]](
                    message="Courses retrieved!",
                    data=self.course_mapper.to_schema_list(courses),
                )
            )
        )

    async def get_lessons(self, data: ActionData) -> Status:
        return await self.state_handler.inspect_wrapper(
            lambda: self.lesson_use_case.get_lessons(data.get("course_id")).map(
                lambda lessons: ActionResponse[list[LessonResponse]](
                    message="Lessons retrieved!",
                    data=self.lesson_mapper.to_schema_list(lessons),
                )
            )
        )

    async def get_creator_courses(self, data: ActionData) -> Status:
        return await self.state_handler.inspect_wrapper(
            lambda: self.course_use_case.get_creator_courses(data.get("creator_id")).map(
                lambda courses: ActionResponse[list[CourseResponse]](
                    message="Courses retrieved!",
                    data=self.course_mapper.to_schema_list(courses),
                )
            )
        )

    async def get_course_by_id(self, data: ActionData) -> Status:
        return await self.state_handler.inspect_wrapper(
            lambda: self.course_use_case.get_course(data.get("id")).map(
                lambda course: ActionResponse[CourseResponse](
                    message="Course retrieved!",
                    data=self.course_mapper.to_schema(course),
                )
            )
        )
