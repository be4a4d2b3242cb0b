"""Service for rendering a day's bookings onto the slot grid."""

from __future__ import annotations

from datetime import date

from call_scheduler.domain.grid import TIME_SLOTS
from call_scheduler.domain.models import Booking, CalendarDay, CalendarStats, TimeSlot


def render_day(day: date, occupied: list[Booking]) -> CalendarDay:
    """Project *occupied* onto the 28-slot grid for *day*.

    A booking marks only the slot equal to its own start time. The second
    half of a 40-minute call stays ``available`` here even though
    ``validate_booking`` refuses to book it.
    """
    by_time: dict[str, Booking] = {}
    for booking in occupied:
        by_time.setdefault(booking.time, booking)

    slots = []
    for slot_time in TIME_SLOTS:
        booking = by_time.get(slot_time)
        slots.append(
            TimeSlot(time=slot_time, available=booking is None, booking=booking)
        )
    return CalendarDay(date=day, time_slots=slots)


def calendar_stats(calendar_day: CalendarDay) -> CalendarStats:
    """Count the booked slots of a rendered day."""
    booked = [s.booking for s in calendar_day.time_slots if s.booking is not None]
    recurring = sum(1 for b in booked if b.is_recurring)
    return CalendarStats(
        total_today=len(booked),
        total_recurring=recurring,
        total_one_time=len(booked) - recurring,
    )
