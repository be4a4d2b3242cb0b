"""Service for collecting everything that occupies a given day."""

from __future__ import annotations

from datetime import date

from call_scheduler.domain.models import Booking
from call_scheduler.repos.base import BookingStore
from call_scheduler.services.recurrence import occurrences_on_date


def occupied_bookings_for(day: date, store: BookingStore) -> list[Booking]:
    """Direct bookings on *day* plus recurring occurrences, unique by id.

    A recurring booking's anchor date is returned by both queries; it is kept
    once.
    """
    seen: dict[str, Booking] = {}
    for booking in store.list_by_date(day):
        seen.setdefault(booking.id, booking)
    for booking in occurrences_on_date(day, store):
        seen.setdefault(booking.id, booking)
    return list(seen.values())
