"""
Post API endpoints.

Route prefix: /api/posts

All endpoints require authentication.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_post_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IPostService
from .models import Comment, CommentRequest, Like, Post, PostRequest

router = APIRouter()


@router.post("", response_model=Post)
async def create_post(
    request: PostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    """Create a post as the current user."""
    return await service.create_post(user.id, request)


@router.get("", response_model=list[Post])
async def list_posts(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Post]:
    """Get all posts, newest first."""
    return await service.list_posts()


@router.get("/{post_id}", response_model=Post)
async def get_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    return await service.get_post(post_id)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete a post. Only its author may delete it."""
    await service.delete_post(user.id, post_id)
    return MessageResponse(msg="Post removed")


@router.put("/likes/{post_id}", response_model=list[Like])
async def like_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Like]:
    return await service.like_post(user.id, post_id)


@router.put("/unlikes/{post_id}", response_model=list[Like])
async def unlike_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Like]:
    return await service.unlike_post(user.id, post_id)


@router.post("/comment/{post_id}", response_model=list[Comment])
async def add_comment(
    post_id: str,
    request: CommentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Comment]:
    """Comment on a post; returns the post's comments, newest first."""
    return await service.add_comment(user.id, post_id, request)


@router.delete("/comment/{post_id}/{comment_id}", response_model=list[Comment])
async def remove_comment(
    post_id: str,
    comment_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> list[Comment]:
    """Delete a comment. Only its author may delete it."""
    return await service.remove_comment(user.id, post_id, comment_id)
