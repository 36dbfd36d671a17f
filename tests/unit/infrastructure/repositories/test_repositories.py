"""Tests for the in-memory repositories."""

from course_dapp.domain.catalog.entities.course import Course
from course_dapp.domain.catalog.entities.lesson import Lesson
from course_dapp.domain.common.value_objects.ids import UserId
from course_dapp.domain.identity.entities.user import User
from course_dapp.infrastructure.catalog.repositories import CourseRepository, LessonRepository
from course_dapp.infrastructure.identity.repositories import UserRepository


class TestUserRepository:
    """Test suite for UserRepository."""

    def test_save_and_find_by_id(self) -> None:
        repository = UserRepository()
        user = repository.save(User.create(address="0xabc"))

        assert repository.find_by_id(user.id) is user
        assert repository.find_by_id(UserId.generate()) is None

    def test_find_by_address_returns_first_match(self) -> None:
        repository = UserRepository()
        first = repository.save(User.create(address="0xabc"))
        repository.save(User.create(address="0xabc"))

        assert repository.find_by_address("0xabc") is first
        assert repository.find_by_address("0xdef") is None

    def test_find_all_is_snapshot(self) -> None:
        repository = UserRepository()
        repository.save(User.create(address="0x1"))
        snapshot = repository.find_all()
        repository.save(User.create(address="0x2"))

        assert len(snapshot) == 1
        assert len(repository) == 2

    def test_save_replaces_same_id(self) -> None:
        repository = UserRepository()
        user = repository.save(User.create(address="0x1"))
        repository.save(user)

        assert repository.find_all() == [user]


class TestCourseRepository:
    """Test suite for CourseRepository."""

    def test_find_by_owner(self) -> None:
        repository = CourseRepository()
        owner, other = UserId.generate(), UserId.generate()
        first = repository.save(Course.create(name="A", img_url="i", description="d", owner=owner))
        repository.save(Course.create(name="B", img_url="i", description="d", owner=other))
        third = repository.save(Course.create(name="C", img_url="i", description="d", owner=owner))

        assert repository.find_by_owner(owner) == [first, third]
        assert repository.find_by_owner(UserId.generate()) == []


class TestLessonRepository:
    """Test suite for LessonRepository."""

    def test_save_and_find(self) -> None:
        repository = LessonRepository()
        lesson = repository.save(Lesson.create(name="L", module="M", content="C"))

        assert repository.find_by_id(lesson.id) is lesson
        assert repository.find_all() == [lesson]
