"""Data access for the `posts` collection.

Likes and comments are changed with single-document update operators so
concurrent toggles and appends never overwrite each other.
"""

from __future__ import annotations

from typing import Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from schemas.models.post import CommentDoc, PostDoc

POSTS_COLLECTION = "posts"


class PostRepository:
    def __init__(self, db) -> None:
        self._col = db[POSTS_COLLECTION]

    async def insert(self, post: PostDoc) -> PostDoc:
        result = await self._col.insert_one(post.to_mongo())
        return post.model_copy(update={"id": result.inserted_id})

    async def list_newest(self) -> list[PostDoc]:
        cursor = self._col.find({}).sort([("created_at", DESCENDING), ("_id", DESCENDING)])
        return [PostDoc.from_mongo(doc) for doc in await cursor.to_list(length=None)]

    async def exists(self, post_id: ObjectId) -> bool:
        return await self._col.count_documents({"_id": post_id}, limit=1) > 0

    async def add_like(self, post_id: ObjectId, user_id: ObjectId) -> Optional[list]:
        """Add *user_id* to likes if absent. Returns the new likes, None if not added."""
        doc = await self._col.find_one_and_update(
            {"_id": post_id, "likes": {"$ne": user_id}},
            {"$addToSet": {"likes": user_id}},
            projection={"likes": 1},
            return_document=ReturnDocument.AFTER,
        )
        return None if doc is None else doc.get("likes", [])

    async def remove_like(self, post_id: ObjectId, user_id: ObjectId) -> Optional[list]:
        """Remove *user_id* from likes if present. Returns the new likes, None if not removed."""
        doc = await self._col.find_one_and_update(
            {"_id": post_id, "likes": user_id},
            {"$pull": {"likes": user_id}},
            projection={"likes": 1},
            return_document=ReturnDocument.AFTER,
        )
        return None if doc is None else doc.get("likes", [])

    async def push_comment(
        self, post_id: ObjectId, comment: CommentDoc
    ) -> Optional[PostDoc]:
        doc = await self._col.find_one_and_update(
            {"_id": post_id},
            {"$push": {"comments": comment.model_dump(by_alias=True)}},
            return_document=ReturnDocument.AFTER,
        )
        return PostDoc.from_mongo(doc)
