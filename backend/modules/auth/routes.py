"""
Auth API endpoints.

Route prefix: /api/auth
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import LoginRequest, RegisterRequest, TokenResponse, User

router = APIRouter()


@router.post("/register", response_model=TokenResponse)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Register a new user and return a session token."""
    return await service.register(request)


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Log in with email and password and return a session token."""
    return await service.login(request)


@router.get("/me", response_model=User)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> User:
    """
    Get the authenticated user.

    Requires authentication. The password is never included.
    """
    return await service.get_current_user(user.id)
