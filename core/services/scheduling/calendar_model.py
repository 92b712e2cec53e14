"""
Synthetic planning calendar.

Every month has 30 days and weekends sit at fixed offsets inside the month
(6/7, 13/14, 20/21, 27/28). It is not a real calendar: no variable month
lengths and no holidays. Swapping in a real calendar only requires replacing
this module.
"""
from __future__ import annotations

DAYS_PER_MONTH = 30

SATURDAY_OFFSETS = frozenset({6, 13, 20, 27})
SUNDAY_OFFSETS = frozenset({7, 14, 21, 28})
WEEKEND_OFFSETS = SATURDAY_OFFSETS | SUNDAY_OFFSETS


def day_in_month(day: int) -> int:
    return ((day - 1) % DAYS_PER_MONTH) + 1


def is_saturday(day: int) -> bool:
    return day_in_month(day) in SATURDAY_OFFSETS


def is_sunday(day: int) -> bool:
    return day_in_month(day) in SUNDAY_OFFSETS


def is_weekend_day(day: int) -> bool:
    return day_in_month(day) in WEEKEND_OFFSETS


def is_working_day(day: int, work_saturday: bool, work_sunday: bool) -> bool:
    if is_saturday(day):
        return work_saturday
    if is_sunday(day):
        return work_sunday
    return True


def days_off_per_week(work_saturday: bool, work_sunday: bool) -> int:
    """Non-working days in one synthetic week (days 1..7)."""
    return sum(
        1 for day in range(1, 8) if not is_working_day(day, work_saturday, work_sunday)
    )


__all__ = [
    "DAYS_PER_MONTH",
    "SATURDAY_OFFSETS",
    "SUNDAY_OFFSETS",
    "WEEKEND_OFFSETS",
    "day_in_month",
    "is_saturday",
    "is_sunday",
    "is_weekend_day",
    "is_working_day",
    "days_off_per_week",
]
