"""Course entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from course_dapp.domain.catalog.entities.lesson import Lesson
from course_dapp.domain.catalog.exceptions import NotCourseOwnerError
from course_dapp.domain.common.entity import Entity
from course_dapp.domain.common.exceptions import ValidationError
from course_dapp.domain.common.value_objects.ids import CourseId, LessonId, UserId


@dataclass(eq=False)
class Course(Entity[CourseId]):
    """
    Course published by a user.

    Business Rules:
    - Name, image URL and description cannot be empty
    - The owner is the creating user's ID; it is not re-checked later
    - Lessons are kept in insertion order, at most once per lesson ID
    """

    id: CourseId
    name: str
    img_url: str
    description: str
    owner: UserId
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    lessons: dict[LessonId, Lesson] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        for field_name in ("name", "img_url", "description"):
            if not getattr(self, field_name):
                raise ValidationError(
                    f"Course {field_name} cannot be empty", field=field_name
                )

    def add_lesson(self, lesson: Lesson) -> None:
        """Add a lesson; re-adding the same lesson replaces it in place."""
        self.lessons[lesson.id] = lesson

    def remove_lesson(self, lesson_id: LessonId) -> None:
        """Detach a lesson from the course. Unknown IDs are ignored."""
        self.lessons.pop(lesson_id, None)

    def get_lessons(self) -> list[Lesson]:
        """Return the lessons in the order they were added."""
        return list(self.lessons.values())

    def update_details(
        self,
        editor: UserId,
        name: str | None = None,
        img_url: str | None = None,
        description: str | None = None,
    ) -> None:
        """
        Update course details.

        Empty or missing values leave the current value untouched.

        Args:
            editor: ID of the user requesting the change
            name: New course name
            img_url: New image URL
            description: New description

        Raises:
            NotCourseOwnerError: If editor is not the course owner
        """
        if not self.is_owned_by(editor):
            raise NotCourseOwnerError
        if name:
            self.name = name
        if img_url:
            self.img_url = img_url
        if description:
            self.description = description

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner == user_id

    @classmethod
    def create(cls, name: str, img_url: str, description: str, owner: UserId) -> "Course":
        """Create a new course with a freshly generated ID and no lessons."""
        return cls(
            id=CourseId.generate(),
            name=name,
            img_url=img_url,
            description=description,
            owner=owner,
        )
