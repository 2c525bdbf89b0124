"""
Community feed endpoints.

POST /api/posts                 — create a post (auth, 201)
GET  /api/posts                 — all posts, newest first (public)
POST /api/posts/{id}/like       — toggle the caller's like (auth)
POST /api/posts/{id}/comments   — append a comment (auth)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from dependencies import CurrentUser, get_post_service
from schemas.dto.requests.post import AddCommentRequest, CreatePostRequest
from schemas.dto.responses.common import AUTH_ERROR_RESPONSES
from schemas.dto.responses.post import CommentsResponse, LikesResponse, PostResponse
from services.post_service import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"], responses=AUTH_ERROR_RESPONSES)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    body: CreatePostRequest,
    user: CurrentUser,
    posts: PostService = Depends(get_post_service),
) -> PostResponse:
    return await posts.create_post(user, body.content, body.image)


@router.get("", response_model=list[PostResponse])
async def list_posts(posts: PostService = Depends(get_post_service)) -> list[PostResponse]:
    return await posts.list_posts()


@router.post("/{post_id}/like", response_model=LikesResponse)
async def toggle_like(
    post_id: str, user: CurrentUser, posts: PostService = Depends(get_post_service)
) -> LikesResponse:
    return LikesResponse(likes=await posts.toggle_like(user, post_id))


@router.post("/{post_id}/comments", response_model=CommentsResponse)
async def add_comment(
    post_id: str,
    body: AddCommentRequest,
    user: CurrentUser,
    posts: PostService = Depends(get_post_service),
) -> CommentsResponse:
    return CommentsResponse(comments=await posts.add_comment(user, post_id, body.content))
