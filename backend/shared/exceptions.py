"""
Base exception classes for the DevConnect backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps ``status_code`` onto the HTTP response, so modules never
raise HTTP exceptions themselves.
"""

from typing import Optional, Any


class DevConnectError(Exception):
    """
    Base exception for all DevConnect errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging and diagnostics."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(DevConnectError):
    """Resource not found."""

    status_code = 404


class ValidationError(DevConnectError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(DevConnectError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(DevConnectError):
    """Authorization failed (acting on a resource owned by someone else)."""

    status_code = 401


class StorageError(DevConnectError):
    """The backing store failed or returned inconsistent data."""

    status_code = 500


class ExternalServiceError(DevConnectError):
    """Error communicating with an external service."""

    status_code = 500

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
