"""Request DTOs for user endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UpdateProfileRequest(BaseModel):
    """Request body for PUT /api/users/profile.

    Only provided, non-empty fields are applied.
    """

    model_config = ConfigDict(populate_by_name=True)

    username: Optional[str] = None
    profile_picture: Optional[str] = Field(default=None, alias="profilePicture")

    def to_updates(self) -> dict:
        """Return the stored-field updates for the fields that carry a value."""
        updates: dict = {}
        if self.username:
            updates["username"] = self.username
        if self.profile_picture:
            updates["profile_picture"] = self.profile_picture
        return updates
