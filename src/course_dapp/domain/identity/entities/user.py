"""User entity for learners and course creators."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from course_dapp.domain.catalog.entities.course import Course
from course_dapp.domain.common.entity import Entity
from course_dapp.domain.common.exceptions import ValidationError
from course_dapp.domain.common.value_objects.ids import CourseId, UserId


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User identified by an external wallet address.

    Business Rules:
    - Address cannot be empty; uniqueness is not enforced
    - Cart, waitlist and enrolled courses are insertion-ordered and hold
      each course at most once (re-adding overwrites in place)
    """

    id: UserId
    address: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    cart: dict[CourseId, Course] = field(default_factory=dict, repr=False)
    waitlist: dict[CourseId, Course] = field(default_factory=dict, repr=False)
    enrolled: dict[CourseId, Course] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.address:
            raise ValidationError("Address cannot be empty", field="address", value=self.address)

    def add_to_cart(self, course: Course) -> None:
        self.cart[course.id] = course

    def remove_from_cart(self, course_id: CourseId) -> None:
        self.cart.pop(course_id, None)

    def add_to_waitlist(self, course: Course) -> None:
        self.waitlist[course.id] = course

    def remove_from_waitlist(self, course_id: CourseId) -> None:
        self.waitlist.pop(course_id, None)

    def enroll(self, course: Course) -> None:
        self.enrolled[course.id] = course

    def get_cart(self) -> list[Course]:
        return list(self.cart.values())

    def get_waitlist(self) -> list[Course]:
        return list(self.waitlist.values())

    def get_enrolled(self) -> list[Course]:
        return list(self.enrolled.values())

    @classmethod
    def create(cls, address: str) -> "User":
        """
        Create a new user.

        Args:
            address: External identity of the user (e.g. "0x...")

        Returns:
            New User instance with a generated ID

        Raises:
            ValidationError: If address is empty
        """
        return cls(id=UserId.generate(), address=address)
