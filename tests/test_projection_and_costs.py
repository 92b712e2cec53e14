import pytest

from core.models import AreaCost, ItemKind
from core.services.scheduling import (
    DEFAULT_TOTAL_DAYS,
    GanttResource,
    ResourceRow,
    ScheduledTask,
    plan_display_name,
    plan_hours,
    project_plan,
    rows_for_plan,
    schedule_requirements,
    summarize_plan_costs,
)
from core.services.scheduling.costs import business_trip_days, training_days


def _plan(reqs, plan_id=1, name=None, sat=False, sun=False):
    return project_plan(schedule_requirements(reqs, sat, sun), plan_id, name)


def test_empty_plan_defaults_to_ninety_days():
    plan = project_plan([], 1)
    assert plan.total_days == DEFAULT_TOTAL_DAYS == 90
    assert plan.resources == ()
    assert plan_hours(plan) == 0


def test_resources_keep_first_appearance_order(make_requirement):
    plan = _plan([make_requirement(2, 8), make_requirement(1, 16), make_requirement(2, 4, item_id=2)])

    assert [r.resource_id for r in plan.resources] == [2, 1]
    assert plan.resources[0].total_hours == 12
    assert [t.start_day for t in plan.resources[0].tasks] == [1, 2]
    assert plan.total_days == 2
    assert plan_hours(plan) == 28


def test_plan_display_name_fallbacks():
    assert plan_display_name(1) == "Standard"
    assert plan_display_name(2) == "Extended"
    assert plan_display_name(3) == "Advanced"
    assert plan_display_name(4) == "Shadowing"
    assert plan_display_name(9) == "Plan 9"
    assert plan_display_name(1, "  Custom ") == "Custom"
    assert plan_display_name(1, "   ") == "Standard"


def test_row_state_wraps_resources_without_touching_them(make_requirement):
    plan = _plan([make_requirement(1, 8), make_requirement(2, 8)])

    rows = rows_for_plan(plan, collapsed_ids={2})
    assert [row.expanded for row in rows] == [True, False]

    toggled = rows[1].toggled()
    assert isinstance(toggled, ResourceRow)
    assert toggled.expanded is True
    assert toggled.resource is plan.resources[1]
    assert rows_for_plan(plan) == [ResourceRow(r) for r in plan.resources]


def test_trip_days_span_first_to_last_day_plus_travel(make_requirement):
    plan = _plan([make_requirement(1, 16), make_requirement(1, 8, item_id=2)])
    resource = plan.resources[0]

    assert training_days(resource) == 3
    assert business_trip_days(resource) == 5


def test_trip_days_count_the_whole_stay_including_gaps():
    tasks = (
        ScheduledTask(1, 1, ItemKind.MACHINE, 1, 16, start_day=1, duration_days=2, hours_per_day=(8, 8)),
        ScheduledTask(1, 2, ItemKind.MACHINE, 1, 8, start_day=6, duration_days=1, hours_per_day=(8,)),
    )
    resource = GanttResource(resource_id=1, resource_name="Alice", total_hours=24, tasks=tasks)

    # days 1..6 plus travel, not the longest task (2) plus travel
    assert business_trip_days(resource) == 8
    assert training_days(resource) == 3


def test_training_days_skip_empty_weekend_slots(make_requirement):
    plan = _plan([make_requirement(1, 40)])
    resource = plan.resources[0]

    assert resource.tasks[0].duration_days == 7
    assert training_days(resource) == 5
    assert business_trip_days(resource) == 9


def test_summarize_plan_costs(make_requirement):
    plan = _plan([make_requirement(1, 16), make_requirement(1, 8, item_id=2), make_requirement(2, 8)])
    area = AreaCost(id=1, area_name="North", daily_accommodation_food_cost=100.0, daily_allowance=20.0, daily_pocket_money=5.0)

    summary = summarize_plan_costs(plan, {1: 50.0, 2: 40.0}, area)

    alice, bob = summary.lines
    assert alice.training_cost == pytest.approx(24 * 50.0)
    assert alice.trip_costs.total == pytest.approx(5 * 125.0)
    assert bob.business_trip_days == 3
    assert bob.total_cost == pytest.approx(8 * 40.0 + 3 * 125.0)
    assert summary.training_days == 3
    assert summary.total_cost == pytest.approx(alice.total_cost + bob.total_cost)


def test_costs_without_area_or_rate(make_requirement):
    plan = _plan([make_requirement(1, 8)])
    summary = summarize_plan_costs(plan, {})

    assert summary.lines[0].training_cost == 0
    assert summary.total_trip_cost == 0
    assert summarize_plan_costs(project_plan([], 2), {}).training_days == 0
