"""Service for expanding weekly follow-up series into per-date occurrences."""

from __future__ import annotations

from datetime import date, datetime

from dateutil.rrule import WEEKLY, rrule

from call_scheduler.domain.models import Booking, day_of_week
from call_scheduler.repos.base import BookingStore


def _midnight(day: date) -> datetime:
    return datetime.combine(day, datetime.min.time())


def weekly_rule(booking: Booking) -> rrule:
    """Open-ended weekly rule anchored at the booking's date."""
    return rrule(WEEKLY, dtstart=_midnight(booking.date))


def occurs_on(booking: Booking, day: date) -> bool:
    """Return True if *booking* has an occurrence on *day*.

    A one-off booking occurs only on its own date. A recurring booking occurs
    on its anchor date and every seventh day after it, never before it.
    """
    if not booking.is_recurring:
        return booking.date == day
    if day < booking.date:
        return False
    hit = weekly_rule(booking).after(_midnight(day), inc=True)
    return hit is not None and hit.date() == day


def occurrences_on_date(day: date, store: BookingStore) -> list[Booking]:
    """Return every stored recurring booking with an occurrence on *day*."""
    return [
        booking
        for booking in store.list_recurring(day_of_week(day))
        if occurs_on(booking, day)
    ]
