from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from core.exceptions import NotFoundError
from core.interfaces import (
    AreaCostRepository,
    QuoteRepository,
    ResourceRepository,
    TrainingPlanRepository,
    TrainingRequirementQuery,
    TrainingTopicRepository,
)
from core.models import ItemKind, Quote
from core.services.scheduling.aggregator import aggregate_requirements, group_by_plan
from core.services.scheduling.costs import PlanCostSummary, summarize_plan_costs
from core.services.scheduling.models import PlanGanttData, TrainingRequirement
from core.services.scheduling.projector import plan_hours, project_plan
from core.services.scheduling.recompute import CancelToken, RecomputeCoordinator
from core.services.scheduling.scheduler import schedule_requirements

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuoteSchedule:
    """Output contract handed to the presentation layer."""

    quote_id: str
    work_on_saturday: bool
    work_on_sunday: bool
    gantt_by_plan: Dict[int, PlanGanttData] = field(default_factory=dict)
    hours_by_plan: Dict[int, float] = field(default_factory=dict)


@dataclass(frozen=True)
class QuoteTopicLine:
    plan_id: int
    item_kind: ItemKind
    item_id: int
    item_name: str
    topic_text: str


def build_plan_schedule(
    requirements: Iterable[TrainingRequirement],
    plan_id: int,
    plan_name: Optional[str],
    work_saturday: bool,
    work_sunday: bool,
) -> PlanGanttData:
    """Aggregate, schedule and project one plan. Pure; never raises for empty input."""
    inputs = aggregate_requirements(requirements, plan_id=plan_id)
    tasks = schedule_requirements(inputs, work_saturday, work_sunday)
    return project_plan(tasks, plan_id, plan_name)


class QuoteScheduleService:
    def __init__(
        self,
        quote_repo: QuoteRepository,
        plan_repo: TrainingPlanRepository,
        resource_repo: ResourceRepository,
        requirement_query: TrainingRequirementQuery,
        area_cost_repo: AreaCostRepository | None = None,
        topic_repo: TrainingTopicRepository | None = None,
    ):
        self._quote_repo = quote_repo
        self._plan_repo = plan_repo
        self._resource_repo = resource_repo
        self._requirement_query = requirement_query
        self._area_cost_repo = area_cost_repo
        self._topic_repo = topic_repo

    def _get_quote(self, quote_id: str) -> Quote:
        quote = self._quote_repo.get(quote_id)
        if quote is None:
            raise NotFoundError("Quote not found.", code="QUOTE_NOT_FOUND")
        return quote

    def _plan_names(self) -> Dict[int, str]:
        return {plan.id: plan.name for plan in self._plan_repo.list_all()}

    def build_quote_schedule(
        self,
        quote_id: str,
        plan_ids: Optional[Sequence[int]] = None,
        work_on_saturday: Optional[bool] = None,
        work_on_sunday: Optional[bool] = None,
        token: Optional[CancelToken] = None,
    ) -> QuoteSchedule:
        """
        Recompute every plan of a quote from scratch.

        Requirements are read once through the read model. Weekend flags come
        from the quote unless overridden. Listed plans without requirements
        still get a default (empty) timeline.
        """
        quote = self._get_quote(quote_id)
        work_sat = quote.work_on_saturday if work_on_saturday is None else work_on_saturday
        work_sun = quote.work_on_sunday if work_on_sunday is None else work_on_sunday

        requirements = self._requirement_query.list_for_quote(quote_id)
        if token is not None:
            token.raise_if_cancelled()

        by_plan = group_by_plan(requirements)
        selected = list(plan_ids) if plan_ids is not None else sorted(by_plan)
        names = self._plan_names()

        gantt_by_plan: Dict[int, PlanGanttData] = {}
        hours_by_plan: Dict[int, float] = {}
        for plan_id in selected:
            if token is not None:
                token.raise_if_cancelled()
            plan = build_plan_schedule(
                by_plan.get(plan_id, []),
                plan_id,
                names.get(plan_id),
                work_sat,
                work_sun,
            )
            gantt_by_plan[plan_id] = plan
            hours_by_plan[plan_id] = plan_hours(plan)

        logger.info(
            "Scheduled quote %s: %s plan(s), %s requirement(s), saturday=%s sunday=%s",
            quote_id,
            len(gantt_by_plan),
            len(requirements),
            work_sat,
            work_sun,
        )
        return QuoteSchedule(
            quote_id=quote_id,
            work_on_saturday=work_sat,
            work_on_sunday=work_sun,
            gantt_by_plan=gantt_by_plan,
            hours_by_plan=hours_by_plan,
        )

    def recompute(
        self,
        coordinator: RecomputeCoordinator[QuoteSchedule],
        quote_id: str,
        **kwargs,
    ) -> bool:
        """Synchronous begin/compute/publish cycle; returns whether the result was accepted."""
        ticket = coordinator.begin()
        schedule = self.build_quote_schedule(quote_id, token=ticket.token, **kwargs)
        return coordinator.publish(ticket, schedule)

    def build_cost_summaries(
        self,
        quote_id: str,
        schedule: Optional[QuoteSchedule] = None,
    ) -> List[PlanCostSummary]:
        quote = self._get_quote(quote_id)
        schedule = schedule or self.build_quote_schedule(quote_id)

        rates = {r.id: r.hourly_rate for r in self._resource_repo.list_all()}
        area_cost = None
        if quote.area_id is not None and self._area_cost_repo is not None:
            area_cost = self._area_cost_repo.get(quote.area_id)

        return [
            summarize_plan_costs(plan, rates, area_cost)
            for plan in schedule.gantt_by_plan.values()
        ]

    def list_quote_topics(
        self,
        quote_id: str,
        plan_ids: Optional[Sequence[int]] = None,
    ) -> Dict[int, List[QuoteTopicLine]]:
        """
        Training topics of the items on a quote, grouped by plan.

        Items follow the quote's selection order (machines, then software,
        then always-included software); topics of one item keep their
        display_order. Every requested plan gets an entry, possibly empty.
        """
        quote = self._get_quote(quote_id)
        if plan_ids is None:
            plan_ids = [plan.id for plan in self._plan_repo.list_all()]
        if self._topic_repo is None:
            return {plan_id: [] for plan_id in plan_ids}

        item_order: Dict[Tuple[ItemKind, int], int] = {}
        for kind, item_ids in (
            (ItemKind.MACHINE, quote.machine_type_ids),
            (ItemKind.SOFTWARE, quote.software_type_ids),
        ):
            for item_id in item_ids:
                item_order.setdefault((kind, item_id), len(item_order))
        item_names: Dict[Tuple[ItemKind, int], str] = {}
        for req in self._requirement_query.list_for_quote(quote_id):
            key = (req.item_kind, req.item_id)
            item_order.setdefault(key, len(item_order))
            item_names.setdefault(key, req.item_name)

        topics_by_plan: Dict[int, List[QuoteTopicLine]] = {}
        for plan_id in plan_ids:
            topics = [
                t for t in self._topic_repo.list_for_plan(plan_id)
                if (t.item_kind, t.item_id) in item_order
            ]
            # stable sort keeps display_order within one item
            topics.sort(key=lambda t: item_order[(t.item_kind, t.item_id)])
            topics_by_plan[plan_id] = [
                QuoteTopicLine(
                    plan_id=plan_id,
                    item_kind=t.item_kind,
                    item_id=t.item_id,
                    item_name=item_names.get((t.item_kind, t.item_id)) or f"{t.item_kind.value} {t.item_id}",
                    topic_text=t.topic_text,
                )
                for t in topics
            ]
        return topics_by_plan

    def get_quote(self, quote_id: str) -> Quote:
        return self._get_quote(quote_id)


__all__ = ["QuoteSchedule", "QuoteScheduleService", "QuoteTopicLine", "build_plan_schedule"]
