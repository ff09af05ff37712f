"""
Post service implementation.
"""

import logging
from typing import Any

from .exceptions import (
    CommentNotFoundError,
    NotCommentOwnerError,
    NotPostOwnerError,
    PostAlreadyLikedError,
    PostNotFoundError,
    PostNotLikedError,
)
from .interfaces import IPostService
from .models import Comment, CommentRequest, Like, Post, PostRequest
from .repository import PostRepository

logger = logging.getLogger(__name__)


class PostService(IPostService):
    """
    Post service with Supabase backend.

    Likes and comments are read-modify-write on the post row; two
    concurrent likes on the same post can lose one of them.
    """

    def __init__(
        self,
        repository: PostRepository,
        auth: Any,  # IAuthService - injected
    ):
        self._repository = repository
        self._auth = auth

    async def create_post(self, user_id: str, request: PostRequest) -> Post:
        author = await self._auth.get_current_user(user_id)
        post = await self._repository.create(
            user_id=user_id,
            text=request.text,
            name=author.name,
            avatar=author.avatar,
        )
        logger.info(f"User {user_id} created post {post.id}")
        return post

    async def list_posts(self) -> list[Post]:
        return await self._repository.list_all()

    async def get_post(self, post_id: str) -> Post:
        post = await self._repository.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def delete_post(self, user_id: str, post_id: str) -> None:
        post = await self.get_post(post_id)
        if post.user != user_id:
            raise NotPostOwnerError(post_id, user_id)
        await self._repository.delete(post_id)
        logger.info(f"User {user_id} deleted post {post_id}")

    async def like_post(self, user_id: str, post_id: str) -> list[Like]:
        post = await self.get_post(post_id)
        if any(like.user == user_id for like in post.likes):
            raise PostAlreadyLikedError(post_id)

        likes = [Like(user=user_id), *post.likes]
        updated = await self._repository.update(
            post_id, {"likes": self._dump(likes)}
        )
        return updated.likes

    async def unlike_post(self, user_id: str, post_id: str) -> list[Like]:
        post = await self.get_post(post_id)
        likes = [like for like in post.likes if like.user != user_id]
        if len(likes) == len(post.likes):
            raise PostNotLikedError(post_id)

        updated = await self._repository.update(
            post_id, {"likes": self._dump(likes)}
        )
        return updated.likes

    async def add_comment(
        self, user_id: str, post_id: str, request: CommentRequest
    ) -> list[Comment]:
        post = await self.get_post(post_id)
        author = await self._auth.get_current_user(user_id)

        comment = Comment(
            user=user_id,
            text=request.text,
            name=author.name,
            avatar=author.avatar,
        )
        updated = await self._repository.update(
            post_id, {"comments": self._dump([comment, *post.comments])}
        )
        return updated.comments

    async def remove_comment(
        self, user_id: str, post_id: str, comment_id: str
    ) -> list[Comment]:
        post = await self.get_post(post_id)

        comment = next((c for c in post.comments if c.id == comment_id), None)
        if comment is None:
            raise CommentNotFoundError(post_id, comment_id)
        if comment.user != user_id:
            raise NotCommentOwnerError(comment_id, user_id)

        remaining = [c for c in post.comments if c.id != comment_id]
        updated = await self._repository.update(
            post_id, {"comments": self._dump(remaining)}
        )
        return updated.comments

    async def delete_user_posts(self, user_id: str) -> None:
        await self._repository.delete_by_user(user_id)

    @staticmethod
    def _dump(items: list) -> list[dict[str, Any]]:
        return [item.model_dump(mode="json") for item in items]
