"""The fixed daily slot grid."""

from __future__ import annotations

SLOT_STEP_MINUTES = 20

TIME_SLOTS: tuple[str, ...] = (
    "10:30", "10:50", "11:10", "11:30", "11:50",
    "12:10", "12:30", "12:50", "13:10", "13:30",
    "13:50", "14:10", "14:30", "14:50", "15:10",
    "15:30", "15:50", "16:10", "16:30", "16:50",
    "17:10", "17:30", "17:50", "18:10", "18:30",
    "18:50", "19:10", "19:30",
)  # fmt: skip

LAST_SLOT = TIME_SLOTS[-1]


def time_to_minutes(value: str) -> int:
    """Minutes since midnight for an ``HH:MM`` string."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def is_grid_time(value: str) -> bool:
    return value in TIME_SLOTS


def closing_minutes() -> int:
    """Latest minute a call may end at: the last slot plus one step."""
    return time_to_minutes(LAST_SLOT) + SLOT_STEP_MINUTES
