"""Domain models for the call scheduling system."""

from __future__ import annotations

import re
import uuid
from datetime import date, datetime, timezone
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

try:
    from enum import StrEnum
except ImportError:  # pragma: no cover - fallback for older Python runtimes

    class StrEnum(str, Enum):
        pass


ONBOARDING_MINUTES = 40
FOLLOW_UP_MINUTES = 20

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class CallType(StrEnum):
    ONBOARDING = "onboarding"
    FOLLOW_UP = "follow-up"


class RejectionCode(StrEnum):
    INVALID_TIME = "invalid_time"
    SLOT_TAKEN = "slot_taken"
    OVERLAP = "overlap"
    AFTER_HOURS = "after_hours"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def day_of_week(day: date) -> int:
    """Weekday number with Sunday = 0 and Saturday = 6."""
    return (day.weekday() + 1) % 7


def parse_day(raw: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string.

    Raises ``ValueError`` for anything else, including ``2024-1-5`` and
    impossible dates such as ``2024-02-30``.
    """
    if not isinstance(raw, str) or not _DATE_RE.match(raw):
        raise ValueError("Invalid date format. Use YYYY-MM-DD")
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError("Invalid date format. Use YYYY-MM-DD") from None


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire and snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Client(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    name: str
    phone: str


class RecurringPattern(CamelModel):
    frequency: Literal["weekly"] = "weekly"
    day_of_week: int = Field(ge=0, le=6)


class Booking(CamelModel):
    """A stored booking.

    A follow-up booking stands for its whole weekly series; occurrences are
    never stored. ``duration``, ``is_recurring`` and ``recurring_pattern`` are
    derived from ``call_type`` and ``date`` on every read.
    """

    id: str = Field(default_factory=_new_id)
    client_id: str
    client_name: str
    client_phone: str
    call_type: CallType
    date: date
    time: str
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @computed_field(alias="duration")
    @property
    def duration(self) -> int:
        return duration_for(self.call_type)

    @computed_field(alias="isRecurring")
    @property
    def is_recurring(self) -> bool:
        return self.call_type == CallType.FOLLOW_UP

    @computed_field(alias="recurringPattern")
    @property
    def recurring_pattern(self) -> RecurringPattern | None:
        if not self.is_recurring:
            return None
        return RecurringPattern(day_of_week=day_of_week(self.date))


def duration_for(call_type: CallType) -> int:
    if call_type == CallType.ONBOARDING:
        return ONBOARDING_MINUTES
    return FOLLOW_UP_MINUTES


class TimeSlot(CamelModel):
    time: str
    available: bool
    booking: Booking | None = None


class CalendarDay(CamelModel):
    date: date
    time_slots: list[TimeSlot]


class CalendarStats(CamelModel):
    total_today: int = 0
    total_recurring: int = 0
    total_one_time: int = 0


class BookingDecision(BaseModel):
    """Outcome of validating a proposed booking against a day's occupancy."""

    accepted: bool
    reason: str | None = None
    code: RejectionCode | None = None

    @classmethod
    def accept(cls) -> BookingDecision:
        return cls(accepted=True)

    @classmethod
    def reject(cls, code: RejectionCode, reason: str) -> BookingDecision:
        return cls(accepted=False, code=code, reason=reason)


# ---------------------------------------------------------------------------
# Request / Response DTOs
# ---------------------------------------------------------------------------


class CreateBookingRequest(CamelModel):
    client_id: str = Field(min_length=1)
    client_name: str = Field(min_length=1)
    client_phone: str = Field(min_length=1)
    call_type: CallType
    date: date
    time: str = Field(min_length=1)

    @field_validator("date", mode="before")
    @classmethod
    def _strict_date(cls, value: object) -> object:
        if isinstance(value, date):
            return value
        return parse_day(value)


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: datetime = Field(default_factory=_utcnow)
