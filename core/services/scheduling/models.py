from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from core.domain.enums import ItemKind


@dataclass(frozen=True)
class TrainingRequirement:
    """One resource x item x plan row of training work still to be scheduled."""

    resource_id: Optional[int]
    item_id: int
    item_kind: ItemKind
    plan_id: int
    hours_required: float
    item_name: str = ""
    resource_name: str = ""


@dataclass(frozen=True)
class ScheduledTask:
    resource_id: int
    item_id: int
    item_kind: ItemKind
    plan_id: int
    hours_required: float
    start_day: int
    duration_days: int
    hours_per_day: Tuple[float, ...]
    item_name: str = ""
    resource_name: str = ""

    @property
    def end_day(self) -> int:
        return self.start_day + self.duration_days - 1

    @property
    def task_key(self) -> str:
        return f"{self.item_kind.value}-{self.item_id}-plan{self.plan_id}"


@dataclass(frozen=True)
class GanttResource:
    resource_id: int
    resource_name: str
    total_hours: float
    tasks: Tuple[ScheduledTask, ...] = field(default_factory=tuple)

    @property
    def total_days(self) -> int:
        return max((task.end_day for task in self.tasks), default=0)


@dataclass(frozen=True)
class PlanGanttData:
    plan_id: int
    plan_name: str
    resources: Tuple[GanttResource, ...]
    total_days: int

    @property
    def total_hours(self) -> float:
        return sum(resource.total_hours for resource in self.resources)

    @property
    def tasks(self) -> Tuple[ScheduledTask, ...]:
        return tuple(task for resource in self.resources for task in resource.tasks)


__all__ = [
    "TrainingRequirement",
    "ScheduledTask",
    "GanttResource",
    "PlanGanttData",
]
