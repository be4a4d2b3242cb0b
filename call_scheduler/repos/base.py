"""Storage interfaces the scheduling services depend on."""

from __future__ import annotations

from datetime import date
from typing import Protocol

from call_scheduler.domain.models import Booking


class BookingStore(Protocol):
    def add(self, booking: Booking) -> None: ...

    def get(self, booking_id: str) -> Booking | None: ...

    def list_all(self) -> list[Booking]: ...

    def list_by_date(self, day: date) -> list[Booking]:
        """Bookings anchored on *day*, recurring or not."""
        ...

    def list_recurring(self, weekday: int) -> list[Booking]:
        """Recurring bookings whose pattern falls on *weekday* (Sunday = 0)."""
        ...

    def delete(self, booking_id: str) -> None: ...

