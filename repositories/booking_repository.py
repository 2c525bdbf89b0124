"""Data access for the `bookings` collection."""

from __future__ import annotations

from typing import Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from schemas.models.booking import BOOKING_STATUS_CANCELLED, BookingDoc

BOOKINGS_COLLECTION = "bookings"


class BookingRepository:
    def __init__(self, db) -> None:
        self._col = db[BOOKINGS_COLLECTION]

    async def insert(self, booking: BookingDoc) -> BookingDoc:
        result = await self._col.insert_one(booking.to_mongo())
        return booking.model_copy(update={"id": result.inserted_id})

    async def list_for_user(self, user_id: ObjectId) -> list[BookingDoc]:
        cursor = self._col.find({"user_id": user_id}).sort(
            [("created_at", DESCENDING), ("_id", DESCENDING)]
        )
        return [BookingDoc.from_mongo(doc) for doc in await cursor.to_list(length=None)]

    async def cancel(
        self, booking_id: ObjectId, user_id: ObjectId
    ) -> Optional[BookingDoc]:
        """Mark the caller's booking cancelled; None when it is not theirs or absent."""
        doc = await self._col.find_one_and_update(
            {"_id": booking_id, "user_id": user_id},
            {"$set": {"status": BOOKING_STATUS_CANCELLED}},
            return_document=ReturnDocument.AFTER,
        )
        return BookingDoc.from_mongo(doc)
