"""Request DTOs for booking endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateBookingRequest(BaseModel):
    """Request body for POST /api/bookings.

    ``plan`` is the plan id; ``date`` is ``YYYY-MM-DD`` and ``time`` a slot
    label such as ``"10:00 AM"`` (both stored as given).
    """

    model_config = ConfigDict(populate_by_name=True)

    plan: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    special_requests: Optional[str] = Field(default=None, alias="specialRequests")
