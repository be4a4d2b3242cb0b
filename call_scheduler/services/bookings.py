"""Booking operations exposed to the HTTP layer.

Every call reloads the day's bookings from the store; nothing is cached.
Creation is a plain check-then-write with no lock, so two concurrent requests
for the same slot can both pass validation. A store that needs a hard
guarantee should refuse a second insert for the same ``(date, time)``.
"""

from __future__ import annotations

import logging
from datetime import date

from call_scheduler.domain.errors import BookingValidationError, SlotConflictError
from call_scheduler.domain.models import (
    Booking,
    BookingDecision,
    CalendarDay,
    CalendarStats,
    CallType,
    CreateBookingRequest,
    RejectionCode,
)
from call_scheduler.repos.base import BookingStore
from call_scheduler.services.calendar import calendar_stats, render_day
from call_scheduler.services.conflicts import find_conflicts, validate_booking
from call_scheduler.services.occupancy import occupied_bookings_for

logger = logging.getLogger(__name__)


def get_calendar_day(day: date, store: BookingStore) -> CalendarDay:
    return render_day(day, occupied_bookings_for(day, store))


def get_calendar_stats(day: date, store: BookingStore) -> CalendarStats:
    return calendar_stats(get_calendar_day(day, store))


def check_availability(
    day: date, time: str, call_type: CallType, store: BookingStore
) -> BookingDecision:
    return validate_booking(day, time, call_type, occupied_bookings_for(day, store))


def create_booking(request: CreateBookingRequest, store: BookingStore) -> Booking:
    """Validate *request* against the day's occupancy and store it.

    Raises ``BookingValidationError`` when the time is not a grid slot and
    ``SlotConflictError`` when the slot cannot take the call. Nothing is
    written in either case.
    """
    occupied = occupied_bookings_for(request.date, store)
    decision = validate_booking(request.date, request.time, request.call_type, occupied)

    if not decision.accepted:
        if decision.code == RejectionCode.INVALID_TIME:
            raise BookingValidationError(decision.reason)
        overlapping = find_conflicts(request.time, request.call_type, occupied)
        logger.info(
            "Rejected %s call on %s at %s: %s (overlapping: %s)",
            request.call_type,
            request.date,
            request.time,
            decision.reason,
            [b.id for b in overlapping],
        )
        raise SlotConflictError(decision.reason)

    booking = Booking(**request.model_dump())
    store.add(booking)
    logger.info(
        "Booked %s call %s for client %s on %s at %s",
        booking.call_type,
        booking.id,
        booking.client_id,
        booking.date,
        booking.time,
    )
    return booking


def delete_booking(booking_id: str, store: BookingStore) -> None:
    """Delete a booking, and with it its whole series. Unknown ids are a no-op."""
    if store.get(booking_id) is None:
        logger.debug("Delete of unknown booking %s ignored", booking_id)
    else:
        logger.info("Deleted booking %s", booking_id)
    store.delete(booking_id)
