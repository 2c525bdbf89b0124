"""Data access for the `plans` collection."""

from __future__ import annotations

from typing import Iterable, Optional

from bson import ObjectId
from pymongo import ASCENDING

from schemas.models.plan import PlanDoc

PLANS_COLLECTION = "plans"


class PlanRepository:
    def __init__(self, db) -> None:
        self._col = db[PLANS_COLLECTION]

    async def list_by_price(self) -> list[PlanDoc]:
        cursor = self._col.find({}).sort([("price", ASCENDING), ("_id", ASCENDING)])
        return [PlanDoc.from_mongo(doc) for doc in await cursor.to_list(length=None)]

    async def find_by_id(self, plan_id: ObjectId) -> Optional[PlanDoc]:
        return PlanDoc.from_mongo(await self._col.find_one({"_id": plan_id}))

    async def find_by_ids(self, plan_ids: Iterable[ObjectId]) -> dict[ObjectId, PlanDoc]:
        ids = list({pid for pid in plan_ids})
        if not ids:
            return {}
        cursor = self._col.find({"_id": {"$in": ids}})
        docs = await cursor.to_list(length=None)
        return {doc["_id"]: PlanDoc.from_mongo(doc) for doc in docs}

    async def count(self) -> int:
        return await self._col.count_documents({})

    async def insert_many(self, plans: Iterable[PlanDoc]) -> int:
        docs = [plan.to_mongo() for plan in plans]
        if not docs:
            return 0
        result = await self._col.insert_many(docs)
        return len(result.inserted_ids)
