from __future__ import annotations

import math

from core.services.scheduling.calendar_model import days_off_per_week

DAILY_HOUR_CAP = 8
WORKING_DAYS_PER_WEEK = 5


def base_duration(hours_required: float) -> int:
    return math.ceil(float(hours_required) / DAILY_HOUR_CAP)


def compute_duration(hours_required: float, work_saturday: bool, work_sunday: bool) -> int:
    """
    Whole calendar days needed for `hours_required` hours of training.

    Skipped weekends are approximated with a uniform five-working-day cadence:
    every full block of five working days gains the excluded weekend days.
    The day-by-day calendar is intentionally not walked; plan totals depend on
    this exact figure.
    """
    duration = base_duration(hours_required)
    days_off = days_off_per_week(work_saturday, work_sunday)
    if days_off:
        duration += (duration // WORKING_DAYS_PER_WEEK) * days_off
    return max(1, duration)


__all__ = ["DAILY_HOUR_CAP", "WORKING_DAYS_PER_WEEK", "base_duration", "compute_duration"]
