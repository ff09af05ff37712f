"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and keeps user records behind one owner.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import LoginRequest, RegisterRequest, TokenResponse, User


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> TokenResponse:
        """
        Create an account and return a session token.

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        ...

    async def login(self, request: LoginRequest) -> TokenResponse:
        """
        Authenticate with email and password and return a session token.

        Raises:
            InvalidCredentialsError: For an unknown email or a wrong password
        """
        ...

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a session token and return the authenticated caller.

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...

    async def get_current_user(self, user_id: str) -> User:
        """
        Get the caller's own user record.

        Raises:
            UserNotFoundError: If the verified subject has no record
        """
        ...

    async def delete_user(self, user_id: str) -> None:
        """Delete a user account."""
        ...
