from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from core.services.scheduling.aggregator import is_schedulable
from core.services.scheduling.duration import DAILY_HOUR_CAP, compute_duration
from core.services.scheduling.models import ScheduledTask, TrainingRequirement

# remaining hours are rounded to this many places between days
_HOURS_PRECISION = 6


def distribute_hours(hours_required: float, duration_days: int) -> Tuple[float, ...]:
    """
    Front-fill `hours_required` over `duration_days` days, up to the daily cap
    each day. Days after the hours run out hold 0.

    >>> distribute_hours(20, 3)
    (8, 8, 4)
    """
    remaining = round(float(hours_required), _HOURS_PRECISION)
    daily: List[float] = []
    for index in range(duration_days):
        if index == duration_days - 1:
            # last day takes whatever is left so no hours are lost
            today = remaining
        else:
            today = min(DAILY_HOUR_CAP, remaining)
        today = max(0.0, today)
        daily.append(_tidy(today))
        remaining = round(remaining - today, _HOURS_PRECISION)
    return tuple(daily)


def _tidy(value: float) -> float:
    if float(value).is_integer():
        return int(value)
    return value


def schedule_requirements(
    requirements: Iterable[TrainingRequirement],
    work_saturday: bool,
    work_sunday: bool,
) -> List[ScheduledTask]:
    """
    Greedy sequential packer.

    Requirements are taken strictly in the given order; each one starts on its
    resource's next free day and pushes that cursor by its duration. Tasks of
    different resources are independent and may overlap in time.
    """
    next_free_day: Dict[int, int] = {}
    tasks: List[ScheduledTask] = []

    for requirement in requirements:
        if not is_schedulable(requirement):
            continue
        resource_id = requirement.resource_id
        duration = compute_duration(requirement.hours_required, work_saturday, work_sunday)
        start_day = next_free_day.get(resource_id, 1)
        next_free_day[resource_id] = start_day + duration

        tasks.append(
            ScheduledTask(
                resource_id=resource_id,
                item_id=requirement.item_id,
                item_kind=requirement.item_kind,
                plan_id=requirement.plan_id,
                hours_required=requirement.hours_required,
                start_day=start_day,
                duration_days=duration,
                hours_per_day=distribute_hours(requirement.hours_required, duration),
                item_name=requirement.item_name,
                resource_name=requirement.resource_name,
            )
        )

    return tasks


__all__ = ["distribute_hours", "schedule_requirements"]
