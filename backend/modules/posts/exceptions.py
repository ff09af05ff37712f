"""
Posts module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError, ValidationError


class PostNotFoundError(NotFoundError):
    """Raised when a post does not exist."""

    def __init__(self, post_id: str):
        super().__init__(
            "Post not found",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )


class NotPostOwnerError(AuthorizationError):
    """Raised when a user acts on a post they did not write."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(
            "User not authorized",
            code="NOT_POST_OWNER",
            details={"post_id": post_id, "user_id": user_id},
        )


class PostAlreadyLikedError(ValidationError):
    def __init__(self, post_id: str):
        super().__init__(
            "Post already liked",
            code="POST_ALREADY_LIKED",
            details={"post_id": post_id},
        )


class PostNotLikedError(ValidationError):
    def __init__(self, post_id: str):
        super().__init__(
            "Post has not yet been liked",
            code="POST_NOT_LIKED",
            details={"post_id": post_id},
        )


class CommentNotFoundError(NotFoundError):
    """Raised when a comment does not exist on the post."""

    def __init__(self, post_id: str, comment_id: str):
        super().__init__(
            "Comment does not exist",
            code="COMMENT_NOT_FOUND",
            details={"post_id": post_id, "comment_id": comment_id},
        )


class NotCommentOwnerError(AuthorizationError):
    def __init__(self, comment_id: str, user_id: str):
        super().__init__(
            "User not authorized",
            code="NOT_COMMENT_OWNER",
            details={"comment_id": comment_id, "user_id": user_id},
        )
