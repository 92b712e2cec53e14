from .aggregator import aggregate_requirements, group_by_plan
from .calendar_model import (
    day_in_month,
    days_off_per_week,
    is_saturday,
    is_sunday,
    is_weekend_day,
    is_working_day,
)
from .costs import PlanCostSummary, ResourceCostLine, TripCosts, summarize_plan_costs
from .duration import DAILY_HOUR_CAP, compute_duration
from .models import GanttResource, PlanGanttData, ScheduledTask, TrainingRequirement
from .projector import DEFAULT_TOTAL_DAYS, plan_display_name, plan_hours, project_plan
from .recompute import CancelToken, JobCancelledError, RecomputeCoordinator, RecomputeTicket
from .scheduler import distribute_hours, schedule_requirements
from .service import QuoteSchedule, QuoteScheduleService, QuoteTopicLine, build_plan_schedule
from .view_state import ResourceRow, rows_for_plan

__all__ = [
    "aggregate_requirements",
    "group_by_plan",
    "day_in_month",
    "days_off_per_week",
    "is_saturday",
    "is_sunday",
    "is_weekend_day",
    "is_working_day",
    "PlanCostSummary",
    "ResourceCostLine",
    "TripCosts",
    "summarize_plan_costs",
    "DAILY_HOUR_CAP",
    "compute_duration",
    "GanttResource",
    "PlanGanttData",
    "ScheduledTask",
    "TrainingRequirement",
    "DEFAULT_TOTAL_DAYS",
    "plan_display_name",
    "plan_hours",
    "project_plan",
    "CancelToken",
    "JobCancelledError",
    "RecomputeCoordinator",
    "RecomputeTicket",
    "distribute_hours",
    "schedule_requirements",
    "QuoteSchedule",
    "QuoteScheduleService",
    "QuoteTopicLine",
    "build_plan_schedule",
    "ResourceRow",
    "rows_for_plan",
]
