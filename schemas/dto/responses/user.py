"""
Response DTOs describing users.

UserResponse   — full profile: /users/me, /users/profile, verify, expanded booking owner
AuthorResponse — public slice shown next to posts and comments
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.models.user import UserDoc


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    email: str
    username: Optional[str] = None
    profile_picture: Optional[str] = Field(default=None, alias="profilePicture")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @classmethod
    def from_doc(cls, doc: UserDoc) -> "UserResponse":
        return cls(
            id=str(doc.id),
            email=doc.email,
            username=doc.username,
            profile_picture=doc.profile_picture,
            created_at=doc.created_at,
        )


class AuthorResponse(BaseModel):
    """Display name and avatar only; email is never exposed in the feed."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: Optional[str] = None
    profile_picture: Optional[str] = Field(default=None, alias="profilePicture")

    @classmethod
    def from_profile(cls, profile: dict) -> "AuthorResponse":
        """Build from a raw ``users`` document projected to the public fields."""
        return cls(
            id=str(profile["_id"]),
            username=profile.get("username"),
            profile_picture=profile.get("profile_picture"),
        )
