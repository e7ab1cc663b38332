"""Exception hierarchy for userhub.

Every error carries the HTTP status it maps to and the message shown to the
caller. Handlers in ``userhub.main`` turn them into ``{"message": ...}`` bodies.
"""

from typing import Optional


class UserHubError(Exception):
    """Base exception for all userhub errors."""

    status_code: int = 500
    default_message: str = "Something went wrong"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        details: Optional[dict[str, object]] = None,
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details or {}


class ConfigurationError(UserHubError):
    """Raised when a required setting (e.g. the signing secret) is missing."""


class AuthenticationError(UserHubError):
    """Raised when an email/password pair does not match a user."""

    status_code = 401
    default_message = "Invalid credentials"


class AuthorizationError(UserHubError):
    """Raised when a request cannot prove who it is acting for."""

    status_code = 401
    default_message = "Unauthorized"


class MissingTokenError(AuthorizationError):
    default_message = "Authorization token missing"


class InvalidTokenError(AuthorizationError):
    """Bad signature, malformed token, expired token, or missing claims."""

    default_message = "Invalid token"


class NotFoundError(UserHubError):
    status_code = 404
    default_message = "User not found"


class ConflictError(UserHubError):
    status_code = 409
    default_message = "Resource already exists"
