"""
Posts module.

Handles the post feed: posts, likes and comments.

Public API:
- IPostService: Interface for post operations
- Post, Like, Comment: Feed models
- PostRequest, CommentRequest: Request bodies
"""

from .interfaces import IPostService
from .models import Comment, CommentRequest, Like, Post, PostRequest
from .exceptions import (
    PostNotFoundError,
    NotPostOwnerError,
    PostAlreadyLikedError,
    PostNotLikedError,
    CommentNotFoundError,
    NotCommentOwnerError,
)

__all__ = [
    # Interface
    "IPostService",
    # Models
    "Comment",
    "CommentRequest",
    "Like",
    "Post",
    "PostRequest",
    # Exceptions
    "PostNotFoundError",
    "NotPostOwnerError",
    "PostAlreadyLikedError",
    "PostNotLikedError",
    "CommentNotFoundError",
    "NotCommentOwnerError",
]
