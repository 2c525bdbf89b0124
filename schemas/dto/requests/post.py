"""Request DTOs for community feed endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class CreatePostRequest(BaseModel):
    """Request body for POST /api/posts."""

    model_config = ConfigDict(populate_by_name=True)

    content: Optional[str] = None
    image: Optional[str] = None


class AddCommentRequest(BaseModel):
    """Request body for POST /api/posts/{id}/comments."""

    model_config = ConfigDict(populate_by_name=True)

    content: Optional[str] = None
