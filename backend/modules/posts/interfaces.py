"""
Posts module interface.

The API layer depends on IPostService for all feed operations. The
profiles module uses ``delete_user_posts`` when an account is removed.
"""

from typing import Protocol, runtime_checkable

from .models import Comment, CommentRequest, Like, Post, PostRequest


@runtime_checkable
class IPostService(Protocol):
    """Interface for post operations."""

    async def create_post(self, user_id: str, request: PostRequest) -> Post:
        """Create a post signed with the author's current name and avatar."""
        ...

    async def list_posts(self) -> list[Post]:
        """Get all posts, newest first."""
        ...

    async def get_post(self, post_id: str) -> Post:
        """
        Get a post.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        ...

    async def delete_post(self, user_id: str, post_id: str) -> None:
        """
        Delete a post written by the caller.

        Raises:
            PostNotFoundError: If the post does not exist
            NotPostOwnerError: If the caller is not the author
        """
        ...

    async def like_post(self, user_id: str, post_id: str) -> list[Like]:
        """
        Add the caller's like.

        Raises:
            PostAlreadyLikedError: If the caller already likes the post
        """
        ...

    async def unlike_post(self, user_id: str, post_id: str) -> list[Like]:
        """
        Remove the caller's like.

        Raises:
            PostNotLikedError: If the caller does not like the post
        """
        ...

    async def add_comment(
        self, user_id: str, post_id: str, request: CommentRequest
    ) -> list[Comment]:
        """Prepend a comment and return all comments."""
        ...

    async def remove_comment(
        self, user_id: str, post_id: str, comment_id: str
    ) -> list[Comment]:
        """
        Remove one of the caller's comments.

        Raises:
            CommentNotFoundError: If the comment does not exist
            NotCommentOwnerError: If the caller did not write it
        """
        ...

    async def delete_user_posts(self, user_id: str) -> None:
        """Delete every post written by a user."""
        ...
