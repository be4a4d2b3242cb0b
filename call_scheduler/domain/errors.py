"""Errors raised by the scheduling services."""

from __future__ import annotations


class SchedulerError(Exception):
    """Base class for scheduling failures."""


class BookingValidationError(SchedulerError, ValueError):
    """Malformed date or time, missing field or unknown call type."""


class SlotConflictError(SchedulerError):
    """The requested slot cannot take the call."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class StorageUnavailableError(SchedulerError):
    """The booking or client store could not be reached."""
