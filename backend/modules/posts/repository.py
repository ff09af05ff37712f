"""
Post repository for database access.
"""

from typing import Any, Optional

from shared.exceptions import StorageError
from shared.repository import BaseRepository

from .models import Comment, Like, Post


class PostRepository(BaseRepository[Post]):
    """
    Repository for post data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying user ownership.
    """

    table_name = "posts"

    async def create(
        self,
        user_id: str,
        text: str,
        name: str,
        avatar: Optional[str] = None,
    ) -> Post:
        """Create a post. ID and date are assigned by the database."""
        data = {
            "user_id": user_id,
            "text": text,
            "name": name,
            "avatar": avatar,
            "likes": [],
            "comments": [],
        }
        result = await self._execute(self._table().insert(data))
        if not result.data:
            raise StorageError("Insert returned no row", details={"table": self.table_name})
        return self._map_to_post(result.data[0])

    async def list_all(self) -> list[Post]:
        """All posts, newest first."""
        result = await self._execute(
            self._table().select("*").order("date", desc=True)
        )
        return [self._map_to_post(row) for row in result.data]

    async def get_by_id(self, post_id: str) -> Optional[Post]:
        """Get a post by ID, or None (also for malformed IDs)."""
        if not self.is_valid_id(post_id):
            return None
        result = await self._execute(
            self._table().select("*").eq("id", post_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_post(result.data[0])

    async def update(self, post_id: str, fields: dict[str, Any]) -> Post:
        """Set ``fields`` on a post and return the updated post."""
        result = await self._execute(
            self._table().update(fields).eq("id", post_id)
        )
        if not result.data:
            raise StorageError(
                "Post disappeared during update",
                details={"post_id": post_id},
            )
        return self._map_to_post(result.data[0])

    async def delete(self, post_id: str) -> None:
        await self._execute(self._table().delete().eq("id", post_id))

    async def delete_by_user(self, user_id: str) -> None:
        """Delete every post written by ``user_id``."""
        if not self.is_valid_id(user_id):
            return
        await self._execute(self._table().delete().eq("user_id", user_id))

    def _map_to_post(self, data: dict[str, Any]) -> Post:
        """Map database row to Post model."""
        return Post(
            id=str(data["id"]),
            user=str(data["user_id"]),
            text=data["text"],
            name=data["name"],
            avatar=data.get("avatar"),
            likes=[Like(**like) for like in data.get("likes") or []],
            comments=[Comment(**comment) for comment in data.get("comments") or []],
            date=data.get("date"),
        )
