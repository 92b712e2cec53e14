from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from core.services.scheduling.models import GanttResource, PlanGanttData, ScheduledTask

DEFAULT_TOTAL_DAYS = 90

_DEFAULT_PLAN_NAMES = {
    1: "Standard",
    2: "Extended",
    3: "Advanced",
    4: "Shadowing",
}


def plan_display_name(plan_id: int, name: Optional[str] = None) -> str:
    if name and name.strip():
        return name.strip()
    return _DEFAULT_PLAN_NAMES.get(plan_id, f"Plan {plan_id}")


def project_plan(
    tasks: Iterable[ScheduledTask],
    plan_id: int,
    plan_name: Optional[str] = None,
) -> PlanGanttData:
    """
    Fold scheduled tasks into per-resource rows for one plan.

    Resources keep the order in which they first appear in `tasks`; each
    resource's tasks are ordered by start day. A plan without tasks gets a
    default width of three synthetic months.
    """
    by_resource: Dict[int, List[ScheduledTask]] = {}
    names: Dict[int, str] = {}
    for task in tasks:
        by_resource.setdefault(task.resource_id, []).append(task)
        if task.resource_name and task.resource_id not in names:
            names[task.resource_id] = task.resource_name

    resources = []
    for resource_id, resource_tasks in by_resource.items():
        ordered = sorted(resource_tasks, key=lambda t: t.start_day)
        resources.append(
            GanttResource(
                resource_id=resource_id,
                resource_name=names.get(resource_id, f"Resource {resource_id}"),
                total_hours=sum(t.hours_required for t in ordered),
                tasks=tuple(ordered),
            )
        )

    end_days = [task.end_day for resource in resources for task in resource.tasks]
    total_days = max(end_days) if end_days else DEFAULT_TOTAL_DAYS

    return PlanGanttData(
        plan_id=plan_id,
        plan_name=plan_display_name(plan_id, plan_name),
        resources=tuple(resources),
        total_days=total_days,
    )


def plan_hours(plan: PlanGanttData) -> float:
    """Aggregate hours shown in the plan header."""
    return plan.total_hours


__all__ = ["DEFAULT_TOTAL_DAYS", "plan_display_name", "plan_hours", "project_plan"]
