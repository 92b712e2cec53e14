from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional

from core.domain.quote import AreaCost
from core.services.scheduling.models import GanttResource, PlanGanttData

# one travel day before and one after the on-site stay
TRAVEL_DAYS = 2


@dataclass(frozen=True)
class TripCosts:
    accommodation_food: float = 0.0
    allowance: float = 0.0
    pocket_money: float = 0.0

    @property
    def total(self) -> float:
        return self.accommodation_food + self.allowance + self.pocket_money


@dataclass(frozen=True)
class ResourceCostLine:
    resource_id: int
    resource_name: str
    hourly_rate: float
    total_hours: float
    training_days: int
    business_trip_days: int
    training_cost: float
    trip_costs: TripCosts

    @property
    def total_cost(self) -> float:
        return self.training_cost + self.trip_costs.total


@dataclass(frozen=True)
class PlanCostSummary:
    plan_id: int
    plan_name: str
    training_days: int
    lines: List[ResourceCostLine]

    @property
    def total_training_cost(self) -> float:
        return sum(line.training_cost for line in self.lines)

    @property
    def total_trip_cost(self) -> float:
        return sum(line.trip_costs.total for line in self.lines)

    @property
    def total_cost(self) -> float:
        return self.total_training_cost + self.total_trip_cost


def training_days(resource: GanttResource) -> int:
    """Distinct days on which the resource actually trains."""
    days = set()
    for task in resource.tasks:
        for offset, hours in enumerate(task.hours_per_day):
            if hours > 0:
                days.add(task.start_day + offset)
    return len(days)


def business_trip_days(resource: GanttResource) -> int:
    """
    One trip covering the whole stay: first start day to last end day, plus
    TRAVEL_DAYS. Gaps between tasks count as trip days; this is not the
    largest single task duration plus TRAVEL_DAYS.
    """
    if not resource.tasks:
        return 0
    first = min(task.start_day for task in resource.tasks)
    last = max(task.end_day for task in resource.tasks)
    return (last - first + 1) + TRAVEL_DAYS


def _trip_costs(days: int, area_cost: Optional[AreaCost]) -> TripCosts:
    if area_cost is None or days <= 0:
        return TripCosts()
    return TripCosts(
        accommodation_food=days * area_cost.daily_accommodation_food_cost,
        allowance=days * area_cost.daily_allowance,
        pocket_money=days * area_cost.daily_pocket_money,
    )


def summarize_plan_costs(
    plan: PlanGanttData,
    hourly_rates: Mapping[int, float],
    area_cost: Optional[AreaCost] = None,
) -> PlanCostSummary:
    lines: List[ResourceCostLine] = []
    for resource in plan.resources:
        rate = float(hourly_rates.get(resource.resource_id, 0.0) or 0.0)
        trip_days = business_trip_days(resource)
        lines.append(
            ResourceCostLine(
                resource_id=resource.resource_id,
                resource_name=resource.resource_name,
                hourly_rate=rate,
                total_hours=resource.total_hours,
                training_days=training_days(resource),
                business_trip_days=trip_days,
                training_cost=resource.total_hours * rate,
                trip_costs=_trip_costs(trip_days, area_cost),
            )
        )
    return PlanCostSummary(
        plan_id=plan.plan_id,
        plan_name=plan.plan_name,
        training_days=plan.total_days if plan.resources else 0,
        lines=lines,
    )


__all__ = [
    "TRAVEL_DAYS",
    "TripCosts",
    "ResourceCostLine",
    "PlanCostSummary",
    "training_days",
    "business_trip_days",
    "summarize_plan_costs",
]
