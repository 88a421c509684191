"""Domain exceptions mapped to HTTP status codes at the request boundary."""
from __future__ import annotations

from fastapi import status


class ProfileHubError(Exception):
    """Base class for errors that carry a client-facing message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ProfileHubError):
    """Required input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class ConflictError(ProfileHubError):
    """The record being created collides with an existing one."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Email already registered."


class AuthError(ProfileHubError):
    """Bad credentials, a missing session, or a session pointing nowhere."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not logged in."


class InternalError(ProfileHubError):
    """Storage or hashing failure. The message is never sent to the client."""
