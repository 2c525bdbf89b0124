"""Profile updates for the authenticated user."""

from __future__ import annotations

from errors import NotFoundError
from repositories.user_repository import UserRepository
from schemas.models.user import UserDoc
from shared.logging import get_logger

log = get_logger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository) -> None:
        self._users = user_repo

    async def update_profile(self, user: UserDoc, updates: dict) -> UserDoc:
        updated = await self._users.update_profile(user.id, updates)
        if updated is None:
            raise NotFoundError("User not found")
        log.info("profile_updated", user_id=str(user.id), fields=sorted(updates))
        return updated
