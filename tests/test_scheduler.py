import pytest

from core.models import ItemKind
from core.services.scheduling import (
    aggregate_requirements,
    distribute_hours,
    group_by_plan,
    schedule_requirements,
)


def _by_resource(tasks):
    out = {}
    for task in tasks:
        out.setdefault(task.resource_id, []).append(task)
    return out


def test_same_resource_is_packed_back_to_back(make_requirement):
    tasks = schedule_requirements(
        [make_requirement(1, 16, item_id=1), make_requirement(1, 8, item_id=2)],
        work_saturday=False,
        work_sunday=False,
    )

    assert [(t.start_day, t.duration_days) for t in tasks] == [(1, 2), (3, 1)]
    assert tasks[0].hours_per_day == (8, 8)
    assert tasks[1].hours_per_day == (8,)
    assert tasks[1].end_day == 3


def test_same_resource_is_packed_back_to_back_with_weekends_worked(make_requirement):
    tasks = schedule_requirements(
        [make_requirement(1, 16, item_id=1), make_requirement(1, 8, item_id=2)],
        work_saturday=True,
        work_sunday=True,
    )

    assert [(t.start_day, t.duration_days) for t in tasks] == [(1, 2), (3, 1)]
    assert [t.hours_per_day for t in tasks] == [(8, 8), (8,)]


def test_resources_are_scheduled_independently(make_requirement):
    tasks = schedule_requirements(
        [make_requirement(1, 16), make_requirement(2, 8), make_requirement(2, 8, item_id=2)],
        work_saturday=True,
        work_sunday=True,
    )

    by_resource = _by_resource(tasks)
    assert [t.start_day for t in by_resource[1]] == [1]
    assert [t.start_day for t in by_resource[2]] == [1, 2]


def test_tasks_of_one_resource_never_overlap(make_requirement):
    reqs = [make_requirement(r, h, item_id=i) for i, (r, h) in enumerate(
        [(1, 40), (2, 12.5), (1, 3), (2, 80), (1, 100), (3, 1)], start=1
    )]
    tasks = schedule_requirements(reqs, work_saturday=False, work_sunday=False)

    for resource_tasks in _by_resource(tasks).values():
        ordered = sorted(resource_tasks, key=lambda t: t.start_day)
        for prev, nxt in zip(ordered, ordered[1:]):
            assert prev.end_day < nxt.start_day


def test_daily_hours_add_up_and_respect_the_cap(make_requirement):
    reqs = [make_requirement(1, h, item_id=i) for i, h in enumerate([40, 12.5, 3, 0.25, 100], start=1)]
    tasks = schedule_requirements(reqs, work_saturday=False, work_sunday=False)

    for task in tasks:
        assert len(task.hours_per_day) == task.duration_days
        assert sum(task.hours_per_day) == pytest.approx(task.hours_required)
        assert all(0 <= h <= 8 for h in task.hours_per_day)


def test_fractional_hours_keep_remainder_on_last_day(make_requirement):
    task = schedule_requirements([make_requirement(1, 12.5)], False, False)[0]
    assert task.duration_days == 2
    assert task.hours_per_day == (8, 4.5)


def test_distribute_hours_trailing_days_are_empty():
    assert distribute_hours(40, 7) == (8, 8, 8, 8, 8, 0, 0)
    assert distribute_hours(20, 3) == (8, 8, 4)
    assert distribute_hours(0.5, 1) == (0.5,)


def test_unassigned_and_empty_requirements_are_skipped(make_requirement):
    tasks = schedule_requirements(
        [make_requirement(None, 8), make_requirement(1, 0), make_requirement(1, -2), make_requirement(1, 8)],
        False,
        False,
    )
    assert len(tasks) == 1
    assert tasks[0].start_day == 1


def test_zeroing_one_requirement_leaves_other_resources_unchanged(make_requirement):
    base = [make_requirement(1, 16, item_id=1), make_requirement(2, 24, item_id=2), make_requirement(1, 8, item_id=3)]
    changed = [base[0], make_requirement(2, 0, item_id=2), base[2]]

    before = _by_resource(schedule_requirements(base, False, False))
    after = _by_resource(schedule_requirements(changed, False, False))

    assert after[1] == before[1]
    assert 2 not in after


def test_scheduling_is_deterministic(make_requirement):
    reqs = [make_requirement(r, h, item_id=i) for i, (r, h) in enumerate([(1, 30), (2, 5), (1, 9)], start=1)]
    assert schedule_requirements(reqs, True, False) == schedule_requirements(reqs, True, False)


def test_input_order_is_the_scheduling_priority(make_requirement):
    first = make_requirement(1, 8, item_id=10)
    second = make_requirement(1, 8, item_id=2)

    tasks = schedule_requirements([first, second], False, False)
    assert [t.item_id for t in tasks] == [10, 2]
    assert [t.start_day for t in tasks] == [1, 2]


def test_aggregate_filters_by_plan_and_keeps_order(make_requirement):
    records = [
        make_requirement(1, 8, item_id=1, plan_id=1),
        make_requirement(2, 8, item_id=2, plan_id=2),
        make_requirement(None, 8, item_id=3, plan_id=1),
        make_requirement(3, 4, item_id=4, plan_id=1, kind=ItemKind.SOFTWARE),
    ]

    kept = aggregate_requirements(records, plan_id=1)
    assert [r.item_id for r in kept] == [1, 4]

    grouped = group_by_plan(records)
    assert list(grouped) == [1, 2]
    assert [r.item_id for r in grouped[1]] == [1, 3, 4]


def test_task_key_identifies_kind_item_and_plan(make_requirement):
    task = schedule_requirements([make_requirement(1, 8, item_id=7, plan_id=3, kind=ItemKind.SOFTWARE)], False, False)[0]
    assert task.task_key == "software-7-plan3"
