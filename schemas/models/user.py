"""
User document model.

Maps to the `users` MongoDB collection. A user is created the first time an
email asks for a sign-in code; username and profile picture are filled in
later through the profile endpoint.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from schemas.models.base import MongoBaseModel


class UserDoc(MongoBaseModel):
    """Document model for the `users` collection (email is unique)."""

    email: str
    username: Optional[str] = None
    profile_picture: Optional[str] = None
    created_at: Optional[datetime] = None
