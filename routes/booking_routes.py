"""
Booking endpoints (authenticated).

POST /api/bookings              — book a visit (201)
GET  /api/bookings/user         — the caller's bookings, newest first
PUT  /api/bookings/{id}/cancel  — cancel one of the caller's bookings
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from dependencies import CurrentUser, get_booking_service
from schemas.dto.requests.booking import CreateBookingRequest
from schemas.dto.responses.booking import BookingResponse
from schemas.dto.responses.common import AUTH_ERROR_RESPONSES
from services.booking_service import BookingService

router = APIRouter(prefix="/api/bookings", tags=["bookings"], responses=AUTH_ERROR_RESPONSES)


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    body: CreateBookingRequest,
    user: CurrentUser,
    bookings: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    return await bookings.create_booking(
        user, body.plan, body.date, body.time, body.special_requests
    )


@router.get("/user", response_model=list[BookingResponse])
async def list_my_bookings(
    user: CurrentUser, bookings: BookingService = Depends(get_booking_service)
) -> list[BookingResponse]:
    return await bookings.list_user_bookings(user)


@router.put("/{booking_id}/cancel", response_model=BookingResponse)
async def cancel_booking(
    booking_id: str,
    user: CurrentUser,
    bookings: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    return await bookings.cancel_booking(user, booking_id)
