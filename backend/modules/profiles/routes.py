"""
Profile API endpoints.

Route prefix: /api/profile
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_profile_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IProfileService
from .models import (
    EducationRequest,
    ExperienceRequest,
    GitHubRepository,
    Profile,
    ProfileRequest,
)

router = APIRouter()


@router.get("/me", response_model=Profile)
async def get_my_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """Get the current user's profile."""
    return await service.get_my_profile(user.id)


@router.post("", response_model=Profile)
async def upsert_profile(
    request: ProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """Create or update the current user's profile."""
    return await service.upsert_profile(user.id, request)


@router.get("", response_model=list[Profile])
async def list_profiles(
    service: IProfileService = Depends(get_profile_service),
) -> list[Profile]:
    """Get all profiles. Public."""
    return await service.list_profiles()


@router.get("/user/{user_id}", response_model=Profile)
async def get_profile_by_user(
    user_id: str,
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """Get a profile by user ID. Public."""
    return await service.get_profile_by_user(user_id)


@router.delete("", response_model=MessageResponse)
async def delete_account(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete the current user's posts, profile and account."""
    await service.delete_account(user.id)
    return MessageResponse(msg="User deleted")


@router.put("/experience", response_model=Profile)
async def add_experience(
    request: ExperienceRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.add_experience(user.id, request)


@router.delete("/experience/{experience_id}", response_model=Profile)
async def remove_experience(
    experience_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.remove_experience(user.id, experience_id)


@router.put("/education", response_model=Profile)
async def add_education(
    request: EducationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.add_education(user.id, request)


@router.delete("/education/{education_id}", response_model=Profile)
async def remove_education(
    education_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.remove_education(user.id, education_id)


@router.get("/github/{username}", response_model=list[GitHubRepository])
async def get_github_repositories(
    username: str,
    service: IProfileService = Depends(get_profile_service),
) -> list[GitHubRepository]:
    """List a GitHub user's most recent public repositories. Public."""
    return await service.get_github_repositories(username)
