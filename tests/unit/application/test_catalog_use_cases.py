"""Tests for course and lesson use cases."""

import pytest

from course_dapp.application.catalog.use_cases.course_use_case import CourseUseCase
from course_dapp.application.catalog.use_cases.lesson_use_case import LessonUseCase
from course_dapp.application.common.result import Failure, Success
from course_dapp.application.identity.services.user_lookup_service import UserLookupService
from course_dapp.domain.identity.entities.user import User
from course_dapp.infrastructure.catalog.repositories import CourseRepository, LessonRepository
from course_dapp.infrastructure.identity.repositories import UserRepository

COURSE_FIELDS = {
    "name": "Zero Knowledge Proofs",
    "img_url": "https://example.com/zk.png",
    "description": "From SNARKs to STARKs",
}


@pytest.fixture
def user_repository() -> UserRepository:
    return UserRepository()


@pytest.fixture
def course_repository() -> CourseRepository:
    return CourseRepository()


@pytest.fixture
def course_use_case(
    user_repository: UserRepository, course_repository: CourseRepository
) -> CourseUseCase:
    return CourseUseCase(course_repository, UserLookupService(user_repository))


@pytest.fixture
def lesson_use_case(
    user_repository: UserRepository, course_repository: CourseRepository
) -> LessonUseCase:
    return LessonUseCase(course_repository, LessonRepository(), UserLookupService(user_repository))


@pytest.fixture
def creator(user_repository: UserRepository) -> User:
    return user_repository.save(User.create(address="0xcreator"))


class TestCourseUseCase:
    """Test suite for CourseUseCase."""

    def test_create_course_by_id(self, course_use_case: CourseUseCase, creator: User) -> None:
        result = course_use_case.create_course(creator_id=str(creator.id), **COURSE_FIELDS)

        assert isinstance(result, Success)
        course = result.value
        assert course.owner == creator.id
        assert course.name == COURSE_FIELDS["name"]
        assert course.get_lessons() == []
        assert course_use_case.get_course(str(course.id)) == Success(course)

    def test_create_course_by_address(self, course_use_case: CourseUseCase, creator: User) -> None:
        result = course_use_case.create_course(creator_address="0xcreator", **COURSE_FIELDS)
        assert result.unwrap().owner == creator.id

    def test_create_course_requires_creator(self, course_use_case: CourseUseCase) -> None:
        assert course_use_case.create_course(**COURSE_FIELDS) == Failure(
            "creator id or address is required."
        )

    def test_create_course_requires_fields(
        self, course_use_case: CourseUseCase, creator: User
    ) -> None:
        result = course_use_case.create_course(
            name="", img_url="x", description="y", creator_id=str(creator.id)
        )
        assert result == Failure("course name, img_url, and description are required.")

    def test_create_course_unknown_creator(self, course_use_case: CourseUseCase) -> None:
        result = course_use_case.create_course(creator_address="0xnobody", **COURSE_FIELDS)
        assert result == Failure("creator not found.")

    def test_get_course_unknown(self, course_use_case: CourseUseCase) -> None:
        assert course_use_case.get_course("nope") == Failure("Course with ID 'nope' not found.")

    def test_get_creator_courses(
        self, course_use_case: CourseUseCase, creator: User, user_repository: UserRepository
    ) -> None:
        other = user_repository.save(User.create(address="0xother"))
        mine = course_use_case.create_course(creator_id=str(creator.id), **COURSE_FIELDS).unwrap()
        course_use_case.create_course(creator_id=str(other.id), **COURSE_FIELDS)

        assert course_use_case.get_creator_courses(str(creator.id)) == Success([mine])
        assert len(course_use_case.get_courses().unwrap()) == 2

    def test_update_course_by_owner(self, course_use_case: CourseUseCase, creator: User) -> None:
        course = course_use_case.create_course(creator_id=str(creator.id), **COURSE_FIELDS).unwrap()

        result = course_use_case.update_course(
            course_id=str(course.id), creator_address="0xcreator", name="ZK in Practice"
        )

        assert result.unwrap().name == "ZK in Practice"
        assert result.unwrap().description == COURSE_FIELDS["description"]

    def test_update_course_by_stranger_refused(
        self, course_use_case: CourseUseCase, creator: User, user_repository: UserRepository
    ) -> None:
        stranger = user_repository.save(User.create(address="0xstranger"))
        course = course_use_case.create_course(creator_id=str(creator.id), **COURSE_FIELDS).unwrap()

        result = course_use_case.update_course(
            course_id=str(course.id), creator_id=str(stranger.id), name="Mine now"
        )

        assert result == Failure("Only the course owner can update it.")
        assert course.name == COURSE_FIELDS["name"]


class TestLessonUseCase:
    """Test suite for LessonUseCase."""

    def test_create_lesson_appends_to_course(
        self, course_use_case: CourseUseCase, lesson_use_case: LessonUseCase, creator: User
    ) -> None:
        course = course_use_case.create_course(creator_id=str(creator.id), **COURSE_FIELDS).unwrap()

        first = lesson_use_case.create_lesson(
            course_id=str(course.id),
            name="Circuits",
            module="1",
            content="...",
            creator_id=str(creator.id),
        ).unwrap()
        second = lesson_use_case.create_lesson(
            course_id=str(course.id),
            name="Provers",
            module="1",
            content="...",
            creator_address="0xcreator",
        ).unwrap()

        assert lesson_use_case.get_lessons(str(course.id)) == Success([first, second])

    def test_create_lesson_unknown_course(
        self, lesson_use_case: LessonUseCase, creator: User
    ) -> None:
        result = lesson_use_case.create_lesson(
            course_id="nope", name="n", module="m", content="c", creator_id=str(creator.id)
        )
        assert result == Failure("Course with ID 'nope' not found.")

    def test_create_lesson_requires_fields(
        self, lesson_use_case: LessonUseCase, creator: User
    ) -> None:
        result = lesson_use_case.create_lesson(
            course_id="c", name="n", module="", content="c", creator_id=str(creator.id)
        )
        assert result == Failure("lesson name, module, and content are required.")

    def test_get_lessons_requires_course_id(self, lesson_use_case: LessonUseCase) -> None:
        assert lesson_use_case.get_lessons(None) == Failure("course_id is required.")
