"""Identity domain layer."""

from course_dapp.domain.identity.entities.user import User

__all__ = [
    "User",
]
