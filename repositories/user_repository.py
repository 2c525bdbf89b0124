"""Data access for the `users` collection."""

from __future__ import annotations

from typing import Iterable, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from schemas.models.user import UserDoc
from shared.datetime_utils import utc_now

USERS_COLLECTION = "users"

_PUBLIC_PROFILE_PROJECTION = {"username": 1, "profile_picture": 1}


class UserRepository:
    def __init__(self, db) -> None:
        self._col = db[USERS_COLLECTION]

    async def find_or_create(self, email: str) -> UserDoc:
        """Return the user for *email*, inserting it first if absent.

        A single upsert keeps repeated sign-ins from ever producing a second
        user. Two concurrent first sign-ins can still collide on the unique
        email index; the loser simply reads the winner's document.
        """
        try:
            doc = await self._col.find_one_and_update(
                {"email": email},
                {
                    "$setOnInsert": {
                        "username": None,
                        "profile_picture": None,
                        "created_at": utc_now(),
                    }
                },
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            doc = await self._col.find_one({"email": email})
        return UserDoc.from_mongo(doc)

    async def find_by_id(self, user_id: ObjectId) -> Optional[UserDoc]:
        return UserDoc.from_mongo(await self._col.find_one({"_id": user_id}))

    async def public_profiles(
        self, user_ids: Iterable[ObjectId]
    ) -> dict[ObjectId, dict]:
        """Map user id → ``{_id, username, profile_picture}`` for feed display."""
        ids = list({uid for uid in user_ids})
        if not ids:
            return {}
        cursor = self._col.find({"_id": {"$in": ids}}, _PUBLIC_PROFILE_PROJECTION)
        docs = await cursor.to_list(length=None)
        return {doc["_id"]: doc for doc in docs}

    async def update_profile(
        self, user_id: ObjectId, updates: dict
    ) -> Optional[UserDoc]:
        if not updates:
            return await self.find_by_id(user_id)
        doc = await self._col.find_one_and_update(
            {"_id": user_id},
            {"$set": updates},
            return_document=ReturnDocument.AFTER,
        )
        return UserDoc.from_mongo(doc)
