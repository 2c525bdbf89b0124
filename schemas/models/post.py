"""
Post document model.

Maps to the `posts` MongoDB collection.

likes holds user ids with set semantics (maintained with $addToSet/$pull).
comments is an append-only embedded array (maintained with $push).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from schemas.models.base import MongoBaseModel, PyObjectId


class CommentDoc(BaseModel):
    """Embedded comment sub-document."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    id: PyObjectId = Field(default_factory=ObjectId, alias="_id")
    user_id: PyObjectId
    content: str
    created_at: Optional[datetime] = None


class PostDoc(MongoBaseModel):
    """Document model for the `posts` collection."""

    user_id: PyObjectId
    content: str
    image: Optional[str] = None
    likes: list[PyObjectId] = []
    comments: list[CommentDoc] = []
    created_at: Optional[datetime] = None
