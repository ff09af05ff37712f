"""
Profile service implementation.

Every mutation follows the same steps: load the caller's profile, change
one field, write it back.
"""

import logging
from typing import Any

from .exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    ProfileNotFoundError,
)
from .github import GitHubClient
from .interfaces import IProfileService
from .models import (
    EducationRequest,
    ExperienceRequest,
    GitHubRepository,
    Profile,
    ProfileRequest,
)
from .repository import ProfileRepository

logger = logging.getLogger(__name__)

NO_PROFILE_MESSAGE = "There is no profile for this user"

# Optional scalar fields copied from the request when non-empty
PROFILE_TEXT_FIELDS = ("company", "website", "location", "status", "bio", "githubusername")


class ProfileService(IProfileService):
    """Profile service with Supabase backend."""

    def __init__(
        self,
        repository: ProfileRepository,
        posts: Any,    # IPostService - injected
        auth: Any,     # IAuthService - injected
        github: GitHubClient,
    ):
        self._repository = repository
        self._posts = posts
        self._auth = auth
        self._github = github

    async def get_my_profile(self, user_id: str) -> Profile:
        profile = await self._repository.get_by_user(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id, NO_PROFILE_MESSAGE)
        return profile

    async def upsert_profile(self, user_id: str, request: ProfileRequest) -> Profile:
        fields = self._build_fields(request)

        if await self._repository.get_by_user(user_id) is not None:
            return await self._repository.update(user_id, fields)

        profile = await self._repository.create(user_id, fields)
        logger.info(f"Created profile {profile.id} for user {user_id}")
        return profile

    async def list_profiles(self) -> list[Profile]:
        return await self._repository.list_all()

    async def get_profile_by_user(self, user_id: str) -> Profile:
        profile = await self._repository.get_by_user(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def delete_account(self, user_id: str) -> None:
        await self._posts.delete_user_posts(user_id)
        await self._repository.delete_by_user(user_id)
        await self._auth.delete_user(user_id)

    async def add_experience(self, user_id: str, request: ExperienceRequest) -> Profile:
        profile = await self.get_my_profile(user_id)
        entries = [request.to_entry(), *profile.experience]
        return await self._repository.update(
            user_id, {"experience": self._dump(entries)}
        )

    async def remove_experience(self, user_id: str, experience_id: str) -> Profile:
        profile = await self.get_my_profile(user_id)
        remaining = [e for e in profile.experience if e.id != experience_id]
        if len(remaining) == len(profile.experience):
            raise ExperienceNotFoundError(experience_id)
        return await self._repository.update(
            user_id, {"experience": self._dump(remaining)}
        )

    async def add_education(self, user_id: str, request: EducationRequest) -> Profile:
        profile = await self.get_my_profile(user_id)
        entries = [request.to_entry(), *profile.education]
        return await self._repository.update(
            user_id, {"education": self._dump(entries)}
        )

    async def remove_education(self, user_id: str, education_id: str) -> Profile:
        profile = await self.get_my_profile(user_id)
        remaining = [e for e in profile.education if e.id != education_id]
        if len(remaining) == len(profile.education):
            raise EducationNotFoundError(education_id)
        return await self._repository.update(
            user_id, {"education": self._dump(remaining)}
        )

    async def get_github_repositories(self, username: str) -> list[GitHubRepository]:
        return await self._github.list_repositories(username)

    @staticmethod
    def _build_fields(request: ProfileRequest) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        for name in PROFILE_TEXT_FIELDS:
            value = getattr(request, name)
            if value:
                fields[name] = value
        fields["skills"] = request.skill_list()
        fields["social"] = request.social_links()
        return fields

    @staticmethod
    def _dump(entries: list) -> list[dict[str, Any]]:
        return [entry.model_dump(mode="json", by_alias=True) for entry in entries]
