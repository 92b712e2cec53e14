"""Presentation-only row state kept outside the scheduling data."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import AbstractSet, List

from core.services.scheduling.models import GanttResource, PlanGanttData


@dataclass(frozen=True)
class ResourceRow:
    resource: GanttResource
    expanded: bool = True

    def toggled(self) -> "ResourceRow":
        return replace(self, expanded=not self.expanded)


def rows_for_plan(plan: PlanGanttData, collapsed_ids: AbstractSet[int] = frozenset()) -> List[ResourceRow]:
    return [
        ResourceRow(resource=resource, expanded=resource.resource_id not in collapsed_ids)
        for resource in plan.resources
    ]


__all__ = ["ResourceRow", "rows_for_plan"]
