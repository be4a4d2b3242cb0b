"""Tests for the conflict validator."""

from __future__ import annotations

from datetime import date
from itertools import product

from call_scheduler.domain.grid import TIME_SLOTS
from call_scheduler.domain.models import Booking, CallType, RejectionCode
from call_scheduler.services.conflicts import find_conflicts, validate_booking

DAY = date(2024, 1, 15)


def _make_booking(time: str, call_type: CallType = CallType.ONBOARDING) -> Booking:
    return Booking(
        client_id="c1",
        client_name="Existing",
        client_phone="+91-9876543210",
        call_type=call_type,
        date=DAY,
        time=time,
    )


def test_empty_day_accepts():
    decision = validate_booking(DAY, "10:30", CallType.ONBOARDING, [])
    assert decision.accepted is True
    assert decision.reason is None


def test_same_start_time_is_already_booked():
    existing = [_make_booking("12:10", CallType.FOLLOW_UP)]
    decision = validate_booking(DAY, "12:10", CallType.FOLLOW_UP, existing)
    assert decision.accepted is False
    assert decision.code == RejectionCode.SLOT_TAKEN
    assert decision.reason == "Time slot already booked"


def test_follow_up_inside_onboarding_overlaps():
    """10:30 onboarding runs to 11:10, so 10:50 is taken."""
    existing = [_make_booking("10:30")]
    decision = validate_booking(DAY, "10:50", CallType.FOLLOW_UP, existing)
    assert decision.accepted is False
    assert decision.code == RejectionCode.OVERLAP
    assert decision.reason == "Would overlap with existing onboarding call at 10:30"


def test_onboarding_running_into_next_booking_overlaps():
    existing = [_make_booking("11:10", CallType.FOLLOW_UP)]
    decision = validate_booking(DAY, "10:50", CallType.ONBOARDING, existing)
    assert decision.accepted is False
    assert decision.reason == "Would overlap with existing follow-up call at 11:10"


def test_exact_boundary_no_conflict():
    """A call starting when the previous one ends does not conflict."""
    existing = [_make_booking("10:30")]
    decision = validate_booking(DAY, "11:10", CallType.ONBOARDING, existing)
    assert decision.accepted is True


def test_onboarding_at_last_slot_runs_past_closing():
    decision = validate_booking(DAY, "19:30", CallType.ONBOARDING, [])
    assert decision.accepted is False
    assert decision.code == RejectionCode.AFTER_HOURS
    assert decision.reason == "Booking extends beyond business hours"


def test_follow_up_at_last_slot_fits():
    assert validate_booking(DAY, "19:30", CallType.FOLLOW_UP, []).accepted is True


def test_onboarding_ending_at_closing_fits():
    assert validate_booking(DAY, "19:10", CallType.ONBOARDING, []).accepted is True


def test_off_grid_time_is_invalid():
    for time in ("10:00", "10:40", "20:00", "noon"):
        decision = validate_booking(DAY, time, CallType.FOLLOW_UP, [])
        assert decision.accepted is False
        assert decision.code == RejectionCode.INVALID_TIME


def test_find_conflicts_lists_every_overlap():
    existing = [
        _make_booking("10:30", CallType.FOLLOW_UP),
        _make_booking("10:50", CallType.FOLLOW_UP),
        _make_booking("11:50", CallType.FOLLOW_UP),
    ]
    conflicts = find_conflicts("10:30", CallType.ONBOARDING, existing)
    assert [b.time for b in conflicts] == ["10:30", "10:50"]


def test_overlap_is_symmetric():
    """If A conflicts with B then B conflicts with A, for every grid pair."""
    call_types = list(CallType)
    for a_time, b_time, a_type, b_type in product(
        TIME_SLOTS, TIME_SLOTS, call_types, call_types
    ):
        a = _make_booking(a_time, a_type)
        b = _make_booking(b_time, b_type)
        a_hits_b = bool(find_conflicts(a_time, a_type, [b]))
        b_hits_a = bool(find_conflicts(b_time, b_type, [a]))
        assert a_hits_b == b_hits_a, (a_time, a_type, b_time, b_type)
