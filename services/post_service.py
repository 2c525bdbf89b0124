"""
Community feed: posts, like toggling and comments.

Author expansion only ever exposes username and profile picture.
"""

from __future__ import annotations

from itertools import chain
from typing import Optional

from bson import ObjectId

from errors import NotFoundError, ValidationError
from repositories.post_repository import PostRepository
from repositories.user_repository import UserRepository
from schemas.dto.responses.post import CommentResponse, PostResponse
from schemas.models.base import parse_object_id
from schemas.models.post import CommentDoc, PostDoc
from schemas.models.user import UserDoc
from shared.datetime_utils import utc_now
from shared.logging import get_logger
from shared.validators import is_blank

log = get_logger(__name__)


class PostService:
    def __init__(self, post_repo: PostRepository, user_repo: UserRepository) -> None:
        self._posts = post_repo
        self._users = user_repo

    async def create_post(
        self, user: UserDoc, content: Optional[str], image: Optional[str] = None
    ) -> PostResponse:
        if is_blank(content):
            raise ValidationError("Content is required", field="content")

        post = await self._posts.insert(
            PostDoc(
                user_id=user.id,
                content=content,
                image=image or None,
                created_at=utc_now(),
            )
        )
        log.info("post_created", post_id=str(post.id), user_id=str(user.id))
        return PostResponse.from_doc(post, await self._profiles_for([post]))

    async def list_posts(self) -> list[PostResponse]:
        """All posts, newest first, authors and comment authors expanded."""
        posts = await self._posts.list_newest()
        profiles = await self._profiles_for(posts)
        return [PostResponse.from_doc(p, profiles) for p in posts]

    async def toggle_like(self, user: UserDoc, post_id: str) -> list[str]:
        """Add the user's like if absent, remove it if present; returns the likes."""
        oid = self._post_id(post_id)
        while True:
            likes = await self._posts.add_like(oid, user.id)
            if likes is not None:
                action = "liked"
                break
            likes = await self._posts.remove_like(oid, user.id)
            if likes is not None:
                action = "unliked"
                break
            # Neither conditional update matched: the post is gone, or a
            # concurrent toggle flipped membership between the two calls.
            if not await self._posts.exists(oid):
                raise NotFoundError("Post not found")

        log.info("post_like_toggled", post_id=post_id, user_id=str(user.id), action=action)
        return [str(uid) for uid in likes]

    async def add_comment(
        self, user: UserDoc, post_id: str, content: Optional[str]
    ) -> list[CommentResponse]:
        if is_blank(content):
            raise ValidationError("Content is required", field="content")
        oid = self._post_id(post_id)

        post = await self._posts.push_comment(
            oid, CommentDoc(user_id=user.id, content=content, created_at=utc_now())
        )
        if post is None:
            raise NotFoundError("Post not found")

        log.info("post_commented", post_id=post_id, user_id=str(user.id))
        profiles = await self._users.public_profiles(c.user_id for c in post.comments)
        return [CommentResponse.from_doc(c, profiles) for c in post.comments]

    @staticmethod
    def _post_id(post_id: str) -> ObjectId:
        oid = parse_object_id(post_id)
        if oid is None:
            raise NotFoundError("Post not found")
        return oid

    async def _profiles_for(self, posts: list[PostDoc]) -> dict[ObjectId, dict]:
        user_ids = chain(
            (p.user_id for p in posts),
            (c.user_id for p in posts for c in p.comments),
        )
        return await self._users.public_profiles(user_ids)
