"""
Session token authentication middleware.

Extracts the token from the request and resolves the caller through the
auth service.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)

# Older clients send the raw token in this header
legacy_token_header = APIKeyHeader(name="x-auth-token", auto_error=False)


def extract_token(
    credentials: Optional[HTTPAuthorizationCredentials],
    legacy_token: Optional[str],
) -> Optional[str]:
    """Prefer the Authorization header; fall back to x-auth-token."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return legacy_token or None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    legacy_token: Optional[str] = Depends(legacy_token_header),
    service: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. Raises
    MissingTokenError or InvalidTokenError, which the API error handlers
    turn into 401 responses.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = extract_token(credentials, legacy_token)
    return await service.validate_token(token)
