"""
Session token issuing and verification.

Tokens are JWTs signed with a server-held HMAC secret. They carry the
user ID as ``sub`` plus ``iat``, ``exp`` and a random ``jti``. Nothing is
stored server-side: a token is valid iff its signature checks out and it
has not expired.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from shared.models import AuthenticatedUser

from .exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    TokenConfigurationError,
    TokenSigningError,
)
from .models import TokenPayload, TokenSettings

REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class TokenIssuer:
    """Mints signed, time-limited session tokens."""

    def __init__(self, settings: TokenSettings):
        self._settings = settings

    def issue(self, user_id: str, ttl_seconds: Optional[int] = None) -> str:
        """
        Create a token for ``user_id``.

        Args:
            user_id: Subject to embed
            ttl_seconds: Lifetime override; defaults to the configured TTL

        Raises:
            TokenConfigurationError: If no secret is configured
            TokenSigningError: If the token cannot be signed
        """
        if not self._settings.secret:
            raise TokenConfigurationError()

        ttl = self._settings.expires_in if ttl_seconds is None else ttl_seconds
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(seconds=ttl),
            "jti": uuid.uuid4().hex,
        }

        try:
            return jwt.encode(
                payload,
                self._settings.secret,
                algorithm=self._settings.algorithm,
            )
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
            raise TokenSigningError(str(e)) from e


class TokenVerifier:
    """Validates presented session tokens."""

    def __init__(self, settings: TokenSettings):
        self._settings = settings

    def decode(self, token: Optional[str]) -> TokenPayload:
        """
        Decode and validate a token.

        Raises:
            MissingTokenError: If no token was presented
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the token is malformed or tampered with
        """
        if not token:
            raise MissingTokenError()
        if not self._settings.secret:
            raise TokenConfigurationError()

        try:
            claims = jwt.decode(
                token,
                self._settings.secret,
                algorithms=[self._settings.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        try:
            return TokenPayload(**claims)
        except ValueError as e:
            raise InvalidTokenError(str(e))

    def verify(self, token: Optional[str]) -> AuthenticatedUser:
        """Decode a token and return the caller it identifies."""
        payload = self.decode(token)
        return AuthenticatedUser(id=payload.sub)
