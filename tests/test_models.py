"""Tests for booking derivations and wire format."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from call_scheduler.domain.models import (
    Booking,
    CallType,
    CreateBookingRequest,
    day_of_week,
    parse_day,
)


def _booking(call_type: CallType, day: date = date(2024, 1, 15)) -> Booking:
    return Booking(
        client_id="c1",
        client_name="Priya Patel",
        client_phone="+91-9876543213",
        call_type=call_type,
        date=day,
        time="11:10",
    )


def test_onboarding_is_forty_minutes_and_one_off():
    booking = _booking(CallType.ONBOARDING)
    assert booking.duration == 40
    assert booking.is_recurring is False
    assert booking.recurring_pattern is None


def test_follow_up_is_twenty_minutes_and_weekly():
    booking = _booking(CallType.FOLLOW_UP)
    assert booking.duration == 20
    assert booking.is_recurring is True
    assert booking.recurring_pattern is not None
    assert booking.recurring_pattern.frequency == "weekly"
    # 2024-01-15 is a Monday
    assert booking.recurring_pattern.day_of_week == 1


def test_day_of_week_counts_from_sunday():
    assert day_of_week(date(2024, 1, 14)) == 0  # Sunday
    assert day_of_week(date(2024, 1, 15)) == 1  # Monday
    assert day_of_week(date(2024, 1, 20)) == 6  # Saturday


def test_dump_uses_camel_case_and_includes_derived_fields():
    body = _booking(CallType.FOLLOW_UP).model_dump(mode="json", by_alias=True)

    assert body["clientId"] == "c1"
    assert body["callType"] == "follow-up"
    assert body["date"] == "2024-01-15"
    assert body["duration"] == 20
    assert body["isRecurring"] is True
    assert body["recurringPattern"] == {"frequency": "weekly", "dayOfWeek": 1}
    assert "createdAt" in body
    assert "updatedAt" in body


def test_parse_day_accepts_iso_date():
    assert parse_day("2024-01-15") == date(2024, 1, 15)


@pytest.mark.parametrize("raw", ["2024-1-15", "15-01-2024", "2024-02-30", "tomorrow", ""])
def test_parse_day_rejects_malformed_dates(raw: str):
    with pytest.raises(ValueError, match="YYYY-MM-DD"):
        parse_day(raw)


def test_create_request_accepts_camel_case_payload():
    request = CreateBookingRequest.model_validate(
        {
            "clientId": "c1",
            "clientName": "Priya Patel",
            "clientPhone": "+91-9876543213",
            "callType": "onboarding",
            "date": "2024-01-15",
            "time": "10:30",
        }
    )
    assert request.call_type == CallType.ONBOARDING
    assert request.date == date(2024, 1, 15)


def test_create_request_rejects_unknown_call_type():
    with pytest.raises(ValidationError):
        CreateBookingRequest.model_validate(
            {
                "clientId": "c1",
                "clientName": "Priya Patel",
                "clientPhone": "+91-9876543213",
                "callType": "check-in",
                "date": "2024-01-15",
                "time": "10:30",
            }
        )
