from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List

from core.models import Quote
from core.services.scheduling import PlanCostSummary, QuoteSchedule, QuoteTopicLine


@dataclass
class QuoteReportContext:
    quote: Quote
    schedule: QuoteSchedule
    costs: List[PlanCostSummary] = field(default_factory=list)
    topics: Dict[int, List[QuoteTopicLine]] = field(default_factory=dict)
    generated_on: date = field(default_factory=date.today)

    @property
    def total_hours(self) -> float:
        return sum(self.schedule.hours_by_plan.values())

    @property
    def has_topics(self) -> bool:
        return any(self.topics.values())

    def cost_for_plan(self, plan_id: int) -> PlanCostSummary | None:
        for summary in self.costs:
            if summary.plan_id == plan_id:
                return summary
        return None

    def topics_for_plan(self, plan_id: int) -> List[QuoteTopicLine]:
        return self.topics.get(plan_id, [])
