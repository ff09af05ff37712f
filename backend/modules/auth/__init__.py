"""
Authentication module.

Handles registration, login, session tokens and the auth middleware's
token validation.

Public API:
- IAuthService: Interface for auth operations
- User: Public user record (no password)
- PasswordHasher, TokenIssuer, TokenVerifier: Building blocks
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import (
    LoginRequest,
    RegisterRequest,
    TokenPayload,
    TokenResponse,
    TokenSettings,
    User,
    UserRecord,
)
from .password import PasswordHasher
from .tokens import TokenIssuer, TokenVerifier
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
    TokenConfigurationError,
    TokenSigningError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "LoginRequest",
    "RegisterRequest",
    "TokenPayload",
    "TokenResponse",
    "TokenSettings",
    "User",
    "UserRecord",
    # Building blocks
    "PasswordHasher",
    "TokenIssuer",
    "TokenVerifier",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "TokenConfigurationError",
    "TokenSigningError",
]
