"""
Posts module data models.

Likes and comments are embedded in the post row. Both lists are kept
newest-first.
"""

import uuid
from datetime import datetime, timezone
from typing import Annotated, Optional
from pydantic import BaseModel, Field

from shared.validation import RuleModel, required


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Like(BaseModel):
    """A like, identified by the user who gave it."""

    user: str


class Comment(BaseModel):
    """A comment with a snapshot of its author's name and avatar."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user: str
    text: str
    name: str
    avatar: Optional[str] = None
    date: datetime = Field(default_factory=utc_now)


class Post(BaseModel):
    """A post in the feed."""

    id: str = Field(..., description="Post ID (UUID)")
    user: str = Field(..., description="Author's user ID")
    text: str
    name: str = Field(..., description="Author's name at posting time")
    avatar: Optional[str] = None
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    date: Optional[datetime] = None


class PostRequest(RuleModel):
    """Request to create a post."""

    text: Annotated[str, required("Text is required")] = ""


class CommentRequest(RuleModel):
    """Request to comment on a post."""

    text: Annotated[str, required("Text is required")] = ""
