"""Tests for user registration and the user's course collections."""

import pytest

from course_dapp.application.common.result import Failure, Success
from course_dapp.application.identity.services.user_lookup_service import UserLookupService
from course_dapp.application.identity.use_cases.user_courses_use_case import UserCoursesUseCase
from course_dapp.application.identity.use_cases.user_use_case import UserUseCase
from course_dapp.domain.catalog.entities.course import Course
from course_dapp.domain.identity.entities.user import User
from course_dapp.infrastructure.catalog.repositories import CourseRepository
from course_dapp.infrastructure.identity.repositories import UserRepository


@pytest.fixture
def user_repository() -> UserRepository:
    return UserRepository()


@pytest.fixture
def course_repository() -> CourseRepository:
    return CourseRepository()


@pytest.fixture
def user_use_case(user_repository: UserRepository) -> UserUseCase:
    return UserUseCase(user_repository, UserLookupService(user_repository))


@pytest.fixture
def user_courses_use_case(
    user_repository: UserRepository, course_repository: CourseRepository
) -> UserCoursesUseCase:
    return UserCoursesUseCase(UserLookupService(user_repository), course_repository)


@pytest.fixture
def learner(user_repository: UserRepository) -> User:
    return user_repository.save(User.create(address="0xlearner"))


@pytest.fixture
def course(course_repository: CourseRepository, user_repository: UserRepository) -> Course:
    creator = user_repository.save(User.create(address="0xcreator"))
    return course_repository.save(
        Course.create(
            name="Vyper", img_url="https://example.com/v.png", description="d", owner=creator.id
        )
    )


class TestUserUseCase:
    """Test suite for UserUseCase."""

    def test_create_user(self, user_use_case: UserUseCase, user_repository: UserRepository) -> None:
        result = user_use_case.create_user("0xabc")

        assert isinstance(result, Success)
        assert result.value.address == "0xabc"
        assert user_repository.find_by_id(result.value.id) is result.value

    def test_create_user_requires_address(self, user_use_case: UserUseCase) -> None:
        assert user_use_case.create_user(None) == Failure("User address is required.")
        assert user_use_case.create_user("") == Failure("User address is required.")

    def test_duplicate_addresses_allowed(
        self, user_use_case: UserUseCase, user_repository: UserRepository
    ) -> None:
        user_use_case.create_user("0xabc")
        user_use_case.create_user("0xabc")
        assert len(user_repository) == 2

    def test_get_users(self, user_use_case: UserUseCase) -> None:
        user_use_case.create_user("0x1")
        user_use_case.create_user("0x2")

        result = user_use_case.get_users()
        assert [user.address for user in result.unwrap()] == ["0x1", "0x2"]

    def test_get_user_by_address(self, user_use_case: UserUseCase, learner: User) -> None:
        assert user_use_case.get_user_by_address("0xlearner") == Success(learner)
        assert user_use_case.get_user_by_address("0xnobody") == Failure(
            "User with address '0xnobody' not found."
        )

    def test_get_user_by_id(self, user_use_case: UserUseCase, learner: User) -> None:
        assert user_use_case.get_user_by_id(str(learner.id)) == Success(learner)
        assert user_use_case.get_user_by_id("missing") == Failure(
            "User with ID 'missing' not found."
        )


class TestUserCoursesUseCase:
    """Test suite for UserCoursesUseCase."""

    def test_add_to_cart_by_id(
        self, user_courses_use_case: UserCoursesUseCase, learner: User, course: Course
    ) -> None:
        result = user_courses_use_case.add_to_cart(str(course.id), user_id=str(learner.id))

        assert result == Success(course)
        assert learner.get_cart() == [course]

    def test_add_to_cart_by_address_is_idempotent(
        self, user_courses_use_case: UserCoursesUseCase, learner: User, course: Course
    ) -> None:
        user_courses_use_case.add_to_cart(str(course.id), address="0xlearner")
        user_courses_use_case.add_to_cart(str(course.id), address="0xlearner")

        assert learner.get_cart() == [course]

    def test_remove_from_cart(
        self, user_courses_use_case: UserCoursesUseCase, learner: User, course: Course
    ) -> None:
        learner.add_to_cart(course)
        user_courses_use_case.remove_from_cart(str(course.id), user_id=str(learner.id))
        assert learner.get_cart() == []

    def test_waitlist(
        self, user_courses_use_case: UserCoursesUseCase, learner: User, course: Course
    ) -> None:
        user_courses_use_case.add_to_waitlist(str(course.id), user_id=str(learner.id))
        assert user_courses_use_case.get_waitlist(str(learner.id)) == Success([course])

        user_courses_use_case.remove_from_waitlist(str(course.id), user_id=str(learner.id))
        assert user_courses_use_case.get_waitlist(str(learner.id)) == Success([])

    @pytest.mark.parametrize(
        ("course_id", "user_id", "address", "message"),
        [
            ("c", None, None, "User ID or address is required."),
            (None, "u", None, "Course ID is required."),
            ("c", None, "0xnobody", "User not found."),
        ],
    )
    def test_validation_order(
        self,
        user_courses_use_case: UserCoursesUseCase,
        course_id: str | None,
        user_id: str | None,
        address: str | None,
        message: str,
    ) -> None:
        result = user_courses_use_case.add_to_cart(course_id, user_id=user_id, address=address)
        assert result == Failure(message)

    def test_unknown_course(self, user_courses_use_case: UserCoursesUseCase, learner: User) -> None:
        result = user_courses_use_case.add_to_cart("missing", user_id=str(learner.id))
        assert result == Failure("Course not found.")

    def test_enroll_paid(
        self, user_courses_use_case: UserCoursesUseCase, learner: User, course: Course
    ) -> None:
        result = user_courses_use_case.enroll(str(course.id), paid=True, user_id=str(learner.id))

        assert result == Success(course)
        assert user_courses_use_case.get_enrolled(str(learner.id)) == Success([course])

    def test_enroll_unpaid_refused(
        self, user_courses_use_case: UserCoursesUseCase, learner: User, course: Course
    ) -> None:
        result = user_courses_use_case.enroll(str(course.id), paid=False, user_id=str(learner.id))

        assert result == Failure("User has not purchased the course.")
        assert learner.get_enrolled() == []

    def test_collection_queries_require_known_user(
        self, user_courses_use_case: UserCoursesUseCase
    ) -> None:
        assert user_courses_use_case.get_cart(None) == Failure("User ID or address is required.")
        assert user_courses_use_case.get_cart("missing") == Failure("User not found.")
