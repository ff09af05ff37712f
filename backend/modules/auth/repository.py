"""
User repository for database access.

The only writer of the ``users`` table. Email uniqueness is enforced by a
unique index; a violation on insert is reported as UserAlreadyExistsError
so a registration race looks the same as a normal duplicate.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, UNIQUE_VIOLATION

from .exceptions import UserAlreadyExistsError
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """Repository for user records."""

    table_name = "users"

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        """Get a user by (normalized) email, or None."""
        result = await self._execute(
            self._table().select("*").eq("email", email).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    async def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Get a user by ID, or None (also for malformed IDs)."""
        if not self.is_valid_id(user_id):
            return None
        result = await self._execute(
            self._table().select("*").eq("id", user_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    async def insert(
        self,
        name: str,
        email: str,
        password_hash: str,
        avatar: Optional[str] = None,
    ) -> UserRecord:
        """
        Create a user record.

        The ID and registration date are assigned by the database.

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        data = {
            "name": name,
            "email": email,
            "password": password_hash,
            "avatar": avatar,
        }
        try:
            result = await self._execute(self._table().insert(data))
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise UserAlreadyExistsError() from e
            raise
        return self._map_to_user(result.data[0])

    async def delete(self, user_id: str) -> None:
        """Delete a user record. Profiles and posts cascade."""
        if not self.is_valid_id(user_id):
            return
        await self._execute(self._table().delete().eq("id", user_id))

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password_hash=data["password"],
            avatar=data.get("avatar"),
            date=data.get("date"),
        )
