"""
Booking form helpers: the bookable time slots and dates, and pre-submit checks.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from client.errors import ClientValidationError

TIME_SLOTS: tuple[str, ...] = (
    "10:00 AM",
    "11:00 AM",
    "12:00 PM",
    "1:00 PM",
    "2:00 PM",
    "3:00 PM",
    "4:00 PM",
    "5:00 PM",
    "6:00 PM",
)

BOOKING_WINDOW_DAYS = 14


def available_dates(today: Optional[date] = None, days: int = BOOKING_WINDOW_DAYS) -> list[str]:
    """ISO dates from *today* onward, *days* entries long."""
    today = today or date.today()
    return [(today + timedelta(days=i)).isoformat() for i in range(days)]


def validate_booking_form(
    plan_id: Optional[str], date_value: Optional[str], time_value: Optional[str]
) -> None:
    """Raise ClientValidationError naming the first missing selection."""
    if not plan_id:
        raise ClientValidationError("Please select a plan", field="plan")
    if not date_value:
        raise ClientValidationError("Please select a date", field="date")
    if not time_value:
        raise ClientValidationError("Please select a time", field="time")
