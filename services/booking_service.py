"""
Visit bookings.

New bookings go straight to ``confirmed``; the only later transition is the
owner cancelling, which is terminal and safe to repeat.
"""

from __future__ import annotations

from typing import Optional

from errors import NotFoundError, ValidationError
from repositories.booking_repository import BookingRepository
from repositories.plan_repository import PlanRepository
from schemas.dto.responses.booking import BookingResponse
from schemas.dto.responses.plan import PlanResponse
from schemas.dto.responses.user import UserResponse
from schemas.models.base import parse_object_id
from schemas.models.booking import BOOKING_STATUS_CONFIRMED, BookingDoc
from schemas.models.user import UserDoc
from shared.datetime_utils import utc_now
from shared.logging import get_logger
from shared.validators import is_blank

log = get_logger(__name__)


class BookingService:
    def __init__(
        self, booking_repo: BookingRepository, plan_repo: PlanRepository
    ) -> None:
        self._bookings = booking_repo
        self._plans = plan_repo

    async def create_booking(
        self,
        user: UserDoc,
        plan: Optional[str],
        date: Optional[str],
        time: Optional[str],
        special_requests: Optional[str] = None,
    ) -> BookingResponse:
        if is_blank(plan) or is_blank(date) or is_blank(time):
            raise ValidationError("Plan, date, and time are required")

        plan_id = parse_object_id(plan.strip())
        if plan_id is None:
            raise ValidationError("plan is not a valid id", field="plan")
        plan_doc = await self._plans.find_by_id(plan_id)
        if plan_doc is None:
            raise NotFoundError("Plan not found", field="plan")

        special_requests = (special_requests or "").strip() or None
        booking = await self._bookings.insert(
            BookingDoc(
                user_id=user.id,
                plan_id=plan_id,
                date=date.strip(),
                time=time.strip(),
                status=BOOKING_STATUS_CONFIRMED,
                special_requests=special_requests,
                created_at=utc_now(),
            )
        )
        log.info(
            "booking_created",
            booking_id=str(booking.id),
            user_id=str(user.id),
            plan_id=str(plan_id),
        )
        return BookingResponse.from_doc(
            booking,
            plan=PlanResponse.from_doc(plan_doc),
            user=UserResponse.from_doc(user),
        )

    async def list_user_bookings(self, user: UserDoc) -> list[BookingResponse]:
        """The user's bookings, newest first, with plans expanded."""
        bookings = await self._bookings.list_for_user(user.id)
        plans = await self._plans.find_by_ids(b.plan_id for b in bookings)
        return [self._with_plan(b, plans) for b in bookings]

    async def cancel_booking(self, user: UserDoc, booking_id: str) -> BookingResponse:
        oid = parse_object_id(booking_id)
        booking = await self._bookings.cancel(oid, user.id) if oid is not None else None
        if booking is None:
            raise NotFoundError("Booking not found")
        log.info("booking_cancelled", booking_id=str(booking.id), user_id=str(user.id))
        plans = await self._plans.find_by_ids([booking.plan_id])
        return self._with_plan(booking, plans)

    @staticmethod
    def _with_plan(booking: BookingDoc, plans: dict) -> BookingResponse:
        plan = plans.get(booking.plan_id)
        return BookingResponse.from_doc(
            booking, plan=PlanResponse.from_doc(plan) if plan is not None else None
        )
