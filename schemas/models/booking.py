"""
Booking document model.

Maps to the `bookings` MongoDB collection.

status lifecycle: pending → confirmed (set at creation) → cancelled (by the
owner; terminal). Nothing currently leaves a booking in pending.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from schemas.models.base import MongoBaseModel, PyObjectId

BOOKING_STATUS_PENDING = "pending"
BOOKING_STATUS_CONFIRMED = "confirmed"
BOOKING_STATUS_CANCELLED = "cancelled"

BookingStatus = Literal["pending", "confirmed", "cancelled"]


class BookingDoc(MongoBaseModel):
    """Document model for the `bookings` collection."""

    user_id: PyObjectId
    plan_id: PyObjectId
    date: str
    time: str
    status: BookingStatus = BOOKING_STATUS_PENDING
    special_requests: Optional[str] = None
    created_at: Optional[datetime] = None
