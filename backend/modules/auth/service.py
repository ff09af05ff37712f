"""
Authentication service implementation.

Registers and logs in users against the user repository and issues
stateless session tokens.
"""

import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from shared.models import AuthenticatedUser

from .avatar import gravatar_url
from .exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .interfaces import IAuthService
from .models import LoginRequest, RegisterRequest, TokenResponse, User
from .password import PasswordHasher
from .repository import UserRepository
from .tokens import TokenIssuer, TokenVerifier

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Passwords are bcrypt-hashed and tokens are HS256 JWTs. Hashing is CPU
    bound, so it runs in the threadpool.
    """

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
        verifier: TokenVerifier,
    ):
        self._users = users
        self._hasher = hasher
        self._issuer = issuer
        self._verifier = verifier

    async def register(self, request: RegisterRequest) -> TokenResponse:
        """Create a user, then sign a token for it."""
        if await self._users.find_by_email(request.email) is not None:
            raise UserAlreadyExistsError()

        password_hash = await run_in_threadpool(self._hasher.hash, request.password)
        user = await self._users.insert(
            name=request.name,
            email=request.email,
            password_hash=password_hash,
            avatar=gravatar_url(request.email),
        )
        logger.info(f"Registered user {user.id}")

        # Not transactional: if signing fails the account exists and the
        # client has to log in.
        return TokenResponse(token=self._issuer.issue(user.id))

    async def login(self, request: LoginRequest) -> TokenResponse:
        """Check credentials and sign a token."""
        user = await self._users.find_by_email(request.email)
        if user is None:
            raise InvalidCredentialsError()

        matched = await run_in_threadpool(
            self._hasher.verify, request.password, user.password_hash
        )
        if not matched:
            logger.info(f"Failed login for user {user.id}")
            raise InvalidCredentialsError()

        logger.info(f"Login: {user.id}")
        return TokenResponse(token=self._issuer.issue(user.id))

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        return self._verifier.verify(token)

    async def get_current_user(self, user_id: str) -> User:
        user = await self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.to_public()

    async def delete_user(self, user_id: str) -> None:
        await self._users.delete(user_id)
        logger.info(f"Deleted user {user_id}")
