"""Custom exception hierarchy for the course dApp."""


class CourseDappError(Exception):
    """Base exception for all course dApp infrastructure errors."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class RollupTransportError(CourseDappError):
    """The rollup host answered a notice, report or finish call with an error status."""

    def __init__(self, status_code: int, body: str) -> None:
        """Initialize with the host's status code and response text."""
        self.status_code = status_code
        self.body = body
        super().__init__(f"Rollup host answered with status {status_code}: {body}")


class InvalidRequestError(CourseDappError):
    """A request from the rollup host could not be decoded."""

    def __init__(self, reason: str) -> None:
        """Initialize with the reason decoding failed."""
        self.reason = reason
        super().__init__(f"Invalid request payload: {reason}")
