"""
Error taxonomy for tasktrack.

Services raise these; they never carry HTTP status codes. The mapping
from error kind to response lives in ``tasktrack.core.error_handlers``.
"""

from typing import Any, Optional


class TaskTrackError(Exception):
    """Base exception for all tasktrack errors."""

    default_message = "Internal Server Error"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(TaskTrackError):
    """Input validation failed."""

    default_message = "Invalid request body"


class InvalidCredentialsError(TaskTrackError):
    """Login failed. Same message for unknown email and wrong password."""

    default_message = "Invalid email or password"

    def __init__(self):
        super().__init__(code="INVALID_CREDENTIALS")


class AuthenticationError(TaskTrackError):
    """Request is not authenticated (missing, invalid or expired token)."""

    default_message = "Authentication required"


class MissingTokenError(AuthenticationError):
    def __init__(self, message: str = "Authentication required. Please log in."):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    def __init__(self, message: str = "Token expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class ForbiddenError(TaskTrackError):
    """Authenticated, but not the owner of the resource."""

    default_message = "You do not have permission to access this resource"


class NotFoundError(TaskTrackError):
    """Resource not found."""

    default_message = "Resource not found"


class ConflictError(TaskTrackError):
    """Unique constraint collision (duplicate email)."""

    default_message = "Resource already exists"


class ConfigError(TaskTrackError):
    """Server is missing required configuration (eg. a signing secret)."""

    default_message = "Server authentication not configured"
