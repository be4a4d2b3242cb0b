"""Service for deciding whether a proposed call fits into a day."""

from __future__ import annotations

import logging
from datetime import date

from call_scheduler.domain.grid import closing_minutes, is_grid_time, time_to_minutes
from call_scheduler.domain.models import (
    Booking,
    BookingDecision,
    CallType,
    RejectionCode,
    duration_for,
)

logger = logging.getLogger(__name__)


def _overlaps(start: int, end: int, booking: Booking) -> bool:
    booking_start = time_to_minutes(booking.time)
    booking_end = booking_start + booking.duration
    return start < booking_end and booking_start < end


def find_conflicts(
    time: str,
    call_type: CallType,
    occupied: list[Booking],
) -> list[Booking]:
    """Return every booking in *occupied* that overlaps the proposed call.

    Overlap rule: conflict if new_start < existing_end AND existing_start < new_end.
    Exact boundary touches (end == start) are NOT considered conflicts.
    """
    start = time_to_minutes(time)
    end = start + duration_for(call_type)
    return [b for b in occupied if _overlaps(start, end, b)]


def validate_booking(
    day: date,
    time: str,
    call_type: CallType,
    occupied: list[Booking],
) -> BookingDecision:
    """Decide whether a *call_type* call at *time* on *day* can be placed.

    *occupied* is the day's full occupancy, direct and recurring. The first
    conflicting booking found is the one named in the reason.
    """
    if not is_grid_time(time):
        return BookingDecision.reject(
            RejectionCode.INVALID_TIME, f"{time} is not a bookable slot"
        )

    start = time_to_minutes(time)
    end = start + duration_for(call_type)

    for booking in occupied:
        if booking.time == time:
            return BookingDecision.reject(
                RejectionCode.SLOT_TAKEN, "Time slot already booked"
            )
        if _overlaps(start, end, booking):
            return BookingDecision.reject(
                RejectionCode.OVERLAP,
                f"Would overlap with existing {booking.call_type} call at {booking.time}",
            )

    if end > closing_minutes():
        return BookingDecision.reject(
            RejectionCode.AFTER_HOURS, "Booking extends beyond business hours"
        )

    logger.debug("%s %s call fits on %s", time, call_type, day)
    return BookingDecision.accept()
