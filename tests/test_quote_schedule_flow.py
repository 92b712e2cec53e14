import pytest

from core.exceptions import NotFoundError
from core.models import ItemKind
from core.services.scheduling import RecomputeCoordinator
from infra.db.requirements import DEFAULT_SOFTWARE_HOURS


def test_requirements_follow_quote_selection_order(services, quote_setup):
    query = services["schedule_service"]._requirement_query
    reqs = query.list_for_quote(quote_setup["quote"].id)

    assert [(r.item_kind, r.item_id, r.resource_id) for r in reqs] == [
        (ItemKind.MACHINE, quote_setup["lathe"].id, quote_setup["alice"].id),
        (ItemKind.MACHINE, quote_setup["mill"].id, quote_setup["alice"].id),
        (ItemKind.MACHINE, quote_setup["mill"].id, quote_setup["bob"].id),
        (ItemKind.SOFTWARE, quote_setup["cam"].id, quote_setup["bob"].id),
    ]
    assert [r.hours_required for r in reqs] == [16, 8, 8, DEFAULT_SOFTWARE_HOURS]
    assert reqs[0].item_name == "Lathe"
    assert reqs[0].resource_name == "Alice"


def test_reordering_machines_changes_priority(services, quote_setup):
    qs = services["quote_service"]
    quote_id = quote_setup["quote"].id
    qs.select_machines(quote_id, [quote_setup["mill"].id, quote_setup["lathe"].id])

    schedule = services["schedule_service"].build_quote_schedule(quote_id)
    alice = schedule.gantt_by_plan[1].resources[0]

    assert alice.resource_name == "Alice"
    assert [(t.item_name, t.start_day) for t in alice.tasks] == [("Mill", 1), ("Lathe", 2)]


def test_build_quote_schedule(services, quote_setup):
    schedule = services["schedule_service"].build_quote_schedule(quote_setup["quote"].id)

    assert list(schedule.gantt_by_plan) == [1]
    plan = schedule.gantt_by_plan[1]
    assert plan.plan_name == "Standard"
    assert [r.resource_name for r in plan.resources] == ["Alice", "Bob"]

    alice, bob = plan.resources
    assert [(t.start_day, t.duration_days) for t in alice.tasks] == [(1, 2), (3, 1)]
    assert [(t.start_day, t.hours_per_day) for t in bob.tasks] == [(1, (8,)), (2, (2,))]
    assert plan.total_days == 3
    assert schedule.hours_by_plan == {1: 34}


def test_listed_plans_without_requirements_get_empty_timeline(services, quote_setup):
    schedule = services["schedule_service"].build_quote_schedule(quote_setup["quote"].id, plan_ids=[1, 2])

    empty = schedule.gantt_by_plan[2]
    assert empty.plan_name == "Extended"
    assert empty.resources == ()
    assert empty.total_days == 90
    assert schedule.hours_by_plan[2] == 0


def test_weekend_policy_comes_from_quote_unless_overridden(services, quote_setup):
    qs = services["quote_service"]
    cs = services["catalog_service"]
    quote_id = quote_setup["quote"].id
    cs.set_training_offer(1, ItemKind.MACHINE, quote_setup["lathe"].id, 40)

    schedule = services["schedule_service"].build_quote_schedule(quote_id)
    assert schedule.gantt_by_plan[1].resources[0].tasks[0].duration_days == 7

    qs.set_weekend_policy(quote_id, work_on_saturday=True, work_on_sunday=True)
    schedule = services["schedule_service"].build_quote_schedule(quote_id)
    assert schedule.work_on_saturday and schedule.work_on_sunday
    assert schedule.gantt_by_plan[1].resources[0].tasks[0].duration_days == 5

    overridden = services["schedule_service"].build_quote_schedule(quote_id, work_on_sunday=False)
    assert overridden.gantt_by_plan[1].resources[0].tasks[0].duration_days == 6


def test_always_included_software_is_scheduled_after_selection(services, quote_setup):
    cs = services["catalog_service"]
    safety = cs.create_software_type("Safety basics", always_included=True)
    cs.set_training_offer(1, ItemKind.SOFTWARE, safety.id, 4)
    cs.add_requirement(ItemKind.SOFTWARE, safety.id, 1, quote_setup["alice"].id)

    schedule = services["schedule_service"].build_quote_schedule(quote_setup["quote"].id)
    alice = schedule.gantt_by_plan[1].resources[0]

    assert alice.tasks[-1].item_name == "Safety basics"
    assert alice.tasks[-1].start_day == 4
    assert schedule.hours_by_plan[1] == 38


def test_unassigned_requirement_is_not_scheduled(services, quote_setup):
    cs = services["catalog_service"]
    cs.add_requirement(ItemKind.MACHINE, quote_setup["lathe"].id, 1, resource_id=None)

    schedule = services["schedule_service"].build_quote_schedule(quote_setup["quote"].id)
    assert schedule.hours_by_plan[1] == 34


def test_unknown_quote_raises_not_found(services):
    with pytest.raises(NotFoundError) as exc:
        services["schedule_service"].build_quote_schedule("missing")
    assert exc.value.code == "QUOTE_NOT_FOUND"
    assert services["schedule_service"]._requirement_query.list_for_quote("missing") == []


def test_cost_summaries_use_rates_and_area(services, quote_setup):
    summaries = services["schedule_service"].build_cost_summaries(quote_setup["quote"].id)

    assert len(summaries) == 1
    alice, bob = summaries[0].lines
    assert alice.training_cost == pytest.approx(24 * 50.0)
    assert alice.business_trip_days == 5
    assert alice.trip_costs.total == pytest.approx(5 * 125.0)
    assert bob.training_cost == pytest.approx(10 * 40.0)
    assert bob.business_trip_days == 4


def test_recompute_publishes_latest_result(services, quote_setup):
    coordinator = RecomputeCoordinator()
    accepted = services["schedule_service"].recompute(coordinator, quote_setup["quote"].id)

    assert accepted is True
    assert coordinator.current().hours_by_plan == {1: 34}
    assert coordinator.result_generation == 1
