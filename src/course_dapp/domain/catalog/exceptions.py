"""Catalog domain exceptions."""

from course_dapp.domain.common.exceptions import AuthorizationError


class NotCourseOwnerError(AuthorizationError):
    """Raised when someone other than the owner tries to change a course."""

    def __init__(self) -> None:
        super().__init__("Only the course owner can update it.")
