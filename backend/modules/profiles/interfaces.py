"""
Profiles module interface.

The API layer depends on IProfileService for all profile operations.
"""

from typing import Protocol, runtime_checkable

from .models import (
    EducationRequest,
    ExperienceRequest,
    GitHubRepository,
    Profile,
    ProfileRequest,
)


@runtime_checkable
class IProfileService(Protocol):
    """Interface for profile operations."""

    async def get_my_profile(self, user_id: str) -> Profile:
        """
        Get the caller's profile.

        Raises:
            ProfileNotFoundError: If the caller has not created one
        """
        ...

    async def upsert_profile(self, user_id: str, request: ProfileRequest) -> Profile:
        """
        Create the caller's profile, or update it if it exists.

        Only non-empty fields are written; social links are replaced as a
        whole.
        """
        ...

    async def list_profiles(self) -> list[Profile]:
        """Get every profile."""
        ...

    async def get_profile_by_user(self, user_id: str) -> Profile:
        """
        Get the profile of any user.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def delete_account(self, user_id: str) -> None:
        """Delete the caller's posts, profile and user record."""
        ...

    async def add_experience(self, user_id: str, request: ExperienceRequest) -> Profile:
        """Prepend an experience entry to the caller's profile."""
        ...

    async def remove_experience(self, user_id: str, experience_id: str) -> Profile:
        """
        Remove an experience entry.

        Raises:
            ExperienceNotFoundError: If no entry has that ID
        """
        ...

    async def add_education(self, user_id: str, request: EducationRequest) -> Profile:
        """Prepend an education entry to the caller's profile."""
        ...

    async def remove_education(self, user_id: str, education_id: str) -> Profile:
        """
        Remove an education entry.

        Raises:
            EducationNotFoundError: If no entry has that ID
        """
        ...

    async def get_github_repositories(self, username: str) -> list[GitHubRepository]:
        """
        List a GitHub user's recent public repositories.

        Raises:
            GitHubUserNotFoundError: If GitHub has no such user
        """
        ...
