"""Lesson entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from course_dapp.domain.common.entity import Entity
from course_dapp.domain.common.exceptions import ValidationError
from course_dapp.domain.common.value_objects.ids import LessonId


@dataclass(eq=False)
class Lesson(Entity[LessonId]):
    """
    A single lesson inside a course.

    A lesson belongs to the course whose lesson set it was added to and
    keeps no reference back to it.
    """

    id: LessonId
    name: str
    module: str
    content: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate invariants."""
        for field_name in ("name", "module", "content"):
            if not getattr(self, field_name):
                raise ValidationError(
                    f"Lesson {field_name} cannot be empty", field=field_name
                )

    @classmethod
    def create(cls, name: str, module: str, content: str) -> "Lesson":
        """Create a new lesson with a freshly generated ID."""
        return cls(id=LessonId.generate(), name=name, module=module, content=content)
