"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers, which turn them into HTTP responses. Client-facing messages
are deliberately generic; ``code`` and ``details`` are for logs only.
"""

from shared.exceptions import (
    AuthenticationError,
    DevConnectError,
    StorageError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a session token is malformed or its signature is wrong."""

    def __init__(self, reason: str = ""):
        super().__init__(
            "Token is not valid",
            code="INVALID_TOKEN",
            details={"reason": reason} if reason else None,
        )


class ExpiredTokenError(InvalidTokenError):
    """Raised when a session token is past its expiry."""

    def __init__(self):
        super().__init__("expired")
        self.code = "TOKEN_EXPIRED"


class MissingTokenError(AuthenticationError):
    """Raised when no session token is provided."""

    def __init__(self):
        super().__init__("No token, authorization denied", code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised on login with an unknown email or a wrong password.

    Both cases share this one error so the response cannot be used to
    discover which emails are registered.
    """

    status_code = 400

    def __init__(self):
        super().__init__("Invalid Credentials", code="INVALID_CREDENTIALS")


class UserAlreadyExistsError(ValidationError):
    """Raised when registering an email that is already taken."""

    def __init__(self):
        super().__init__(
            "User already exists",
            code="USER_EXISTS",
            details={"field": "email"},
        )


class UserNotFoundError(StorageError):
    """Raised when a verified token subject has no user record."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class TokenConfigurationError(DevConnectError):
    """Raised when no signing secret is configured."""

    def __init__(self):
        super().__init__(
            "Token signing secret is not configured",
            code="TOKEN_NOT_CONFIGURED",
        )


class TokenSigningError(DevConnectError):
    """Raised when a token cannot be signed."""

    def __init__(self, reason: str):
        super().__init__(
            "Failed to sign session token",
            code="TOKEN_SIGNING_FAILED",
            details={"reason": reason},
        )
