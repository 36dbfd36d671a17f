"""Identity context schemas."""

from course_dapp.infrastructure.identity.schemas.user_schemas import UserResponse

__all__ = [
    "UserResponse",
]
