"""Typed rejections raised by the session engine."""


class MatchSessionsError(Exception):
    """Base class for terminal, user-facing engine failures."""

    message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class SessionNotFoundError(MatchSessionsError):
    """No session matches the given identifier."""

    message = "Session not found"


class AttendanceNotFoundError(MatchSessionsError):
    """No attendance matches both the session and attendance ids."""

    message = "Attendance not found"


class ForbiddenError(MatchSessionsError):
    """The supplied code does not grant the requested right."""

    message = "Invalid code"


class SessionFullError(MatchSessionsError):
    """The session already holds its maximum number of attendees."""

    message = "Session is full"


class InvalidInputError(MatchSessionsError):
    """The request payload has an invalid shape or value."""

    message = "Invalid input"
