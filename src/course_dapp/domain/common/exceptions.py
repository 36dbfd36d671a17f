"""
Domain layer exceptions.

Raised by entities when an invariant would be broken. Use cases catch them
and turn them into Failure results carrying ``message``.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(DomainError):
    """
    Raised when an entity is built with invalid data.

    Example: A lesson with an empty module name.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message, {"field": field} if field else None)
        self.field = field
        self.value = value


class AuthorizationError(DomainError):
    """Raised when a user may not change an entity."""
