"""
Response DTO for bookings.

``user`` and ``plan`` are either expanded objects or bare id strings,
depending on the endpoint:

POST /api/bookings              — plan and user expanded
GET  /api/bookings/user         — plan expanded, user as id
PUT  /api/bookings/{id}/cancel  — plan expanded, user as id
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from schemas.dto.responses.plan import PlanResponse
from schemas.dto.responses.user import UserResponse
from schemas.models.booking import BookingDoc, BookingStatus


class BookingResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    user: Union[UserResponse, str]
    plan: Union[PlanResponse, str]
    date: str
    time: str
    status: BookingStatus
    special_requests: Optional[str] = Field(default=None, alias="specialRequests")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @classmethod
    def from_doc(
        cls,
        doc: BookingDoc,
        plan: Optional[PlanResponse] = None,
        user: Optional[UserResponse] = None,
    ) -> "BookingResponse":
        return cls(
            id=str(doc.id),
            user=user if user is not None else str(doc.user_id),
            plan=plan if plan is not None else str(doc.plan_id),
            date=doc.date,
            time=doc.time,
            status=doc.status,
            special_requests=doc.special_requests,
            created_at=doc.created_at,
        )
