"""
Profile repository for database access.

Profiles are read together with their owner's name and avatar through a
PostgREST embed of the ``users`` table.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.exceptions import StorageError
from shared.repository import BaseRepository, UNIQUE_VIOLATION

from .models import Education, Experience, Profile, ProfileOwner, SocialLinks

PROFILE_SELECT = "*, user:users(id, name, avatar)"


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for profile data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying user ownership.
    """

    table_name = "profiles"

    async def get_by_user(self, user_id: str) -> Optional[Profile]:
        """Get the profile owned by ``user_id``, or None."""
        if not self.is_valid_id(user_id):
            return None
        result = await self._execute(
            self._table().select(PROFILE_SELECT).eq("user_id", user_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    async def list_all(self) -> list[Profile]:
        """All profiles, newest first."""
        result = await self._execute(
            self._table().select(PROFILE_SELECT).order("date", desc=True)
        )
        return [self._map_to_profile(row) for row in result.data]

    async def create(self, user_id: str, fields: dict[str, Any]) -> Profile:
        """
        Create the user's profile.

        A concurrent create for the same user hits the unique index on
        ``user_id``; the second writer then updates instead.
        """
        data = {"user_id": user_id, "experience": [], "education": [], **fields}
        try:
            await self._execute(self._table().insert(data))
        except APIError as e:
            if e.code != UNIQUE_VIOLATION:
                raise
            return await self.update(user_id, fields)
        return await self._require(user_id)

    async def update(self, user_id: str, fields: dict[str, Any]) -> Profile:
        """Set ``fields`` on the user's profile and return the result."""
        await self._execute(self._table().update(fields).eq("user_id", user_id))
        return await self._require(user_id)

    async def delete_by_user(self, user_id: str) -> None:
        if not self.is_valid_id(user_id):
            return
        await self._execute(self._table().delete().eq("user_id", user_id))

    async def _require(self, user_id: str) -> Profile:
        profile = await self.get_by_user(user_id)
        if profile is None:
            raise StorageError(
                "Profile disappeared after write",
                details={"user_id": user_id},
            )
        return profile

    def _map_to_profile(self, data: dict[str, Any]) -> Profile:
        """Map database row (with embedded owner) to Profile model."""
        owner = data.get("user") or {"id": str(data["user_id"]), "name": ""}
        return Profile(
            id=str(data["id"]),
            user=ProfileOwner(
                id=str(owner["id"]),
                name=owner.get("name", ""),
                avatar=owner.get("avatar"),
            ),
            company=data.get("company"),
            website=data.get("website"),
            location=data.get("location"),
            status=data["status"],
            skills=data.get("skills") or [],
            bio=data.get("bio"),
            githubusername=data.get("githubusername"),
            social=SocialLinks(**(data.get("social") or {})),
            experience=[Experience(**e) for e in data.get("experience") or []],
            education=[Education(**e) for e in data.get("education") or []],
            date=data.get("date"),
        )
