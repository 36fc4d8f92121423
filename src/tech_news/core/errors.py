"""Domain errors raised by services and translated at the API boundary."""

from __future__ import annotations

from fastapi import status


class TechNewsError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TechNewsError):
    """A schema constraint was violated (bad URL, duplicate email, short text)."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request data"


class AuthFailed(TechNewsError):
    """Login credentials did not match a user."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Incorrect email or password"


class AuthRequired(TechNewsError):
    """A mutating action was attempted without a logged-in session."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "You must be logged in to do that"


class NotFound(TechNewsError):
    """No row matched the requested id."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConstraintViolation(TechNewsError):
    """A foreign key referenced a row that does not exist."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Referenced record does not exist"


class InternalError(TechNewsError):
    """The store failed in a way the caller cannot fix."""


__all__ = [
    "TechNewsError",
    "ValidationError",
    "AuthFailed",
    "AuthRequired",
    "NotFound",
    "ConstraintViolation",
    "InternalError",
]
