from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when the identity provider rejects a sign-in."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class CheckInError(DomainError):
    """A check-in was refused. The message is shown to the student as-is."""

    default_message = "Check-in refused."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class NotAuthenticated(CheckInError):
    default_message = "Please sign in first."


class NoClassToday(CheckInError):
    default_message = "No class today (M/W/F)."


class WindowClosed(CheckInError):
    default_message = "Attendance window closed (10:30-14:00)."


class NoPasswordAssigned(CheckInError):
    default_message = "No password for today."


class WrongPassword(CheckInError):
    default_message = "Incorrect password. Try again."
