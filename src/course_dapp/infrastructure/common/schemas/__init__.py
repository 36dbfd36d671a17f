"""Common infrastructure schemas."""

from course_dapp.infrastructure.common.schemas.response_wrappers import (
    ActionResponse,
    ErrorResponse,
)

__all__ = [
    "ActionResponse",
    "ErrorResponse",
]
