"""
Response DTOs for the community feed.

PostResponse      — POST /api/posts (201), GET /api/posts
LikesResponse     — POST /api/posts/{id}/like
CommentsResponse  — POST /api/posts/{id}/comments
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from schemas.dto.responses.user import AuthorResponse
from schemas.models.post import CommentDoc, PostDoc


def _author(user_id: ObjectId, profiles: dict[ObjectId, dict]) -> Union[AuthorResponse, str]:
    profile = profiles.get(user_id)
    if profile is None:
        return str(user_id)
    return AuthorResponse.from_profile(profile)


class CommentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    user: Union[AuthorResponse, str]
    content: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @classmethod
    def from_doc(
        cls, doc: CommentDoc, profiles: dict[ObjectId, dict]
    ) -> "CommentResponse":
        return cls(
            id=str(doc.id),
            user=_author(doc.user_id, profiles),
            content=doc.content,
            created_at=doc.created_at,
        )


class PostResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    user: Union[AuthorResponse, str]
    content: str
    image: Optional[str] = None
    likes: list[str] = []
    comments: list[CommentResponse] = []
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @classmethod
    def from_doc(cls, doc: PostDoc, profiles: dict[ObjectId, dict]) -> "PostResponse":
        """Expand the author and comment authors from *profiles* (id → public fields)."""
        return cls(
            id=str(doc.id),
            user=_author(doc.user_id, profiles),
            content=doc.content,
            image=doc.image,
            likes=[str(uid) for uid in doc.likes],
            comments=[CommentResponse.from_doc(c, profiles) for c in doc.comments],
            created_at=doc.created_at,
        )


class LikesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    likes: list[str]


class CommentsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    comments: list[CommentResponse]
