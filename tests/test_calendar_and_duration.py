from core.services.scheduling.calendar_model import (
    day_in_month,
    days_off_per_week,
    is_saturday,
    is_sunday,
    is_weekend_day,
    is_working_day,
)
from core.services.scheduling.duration import base_duration, compute_duration


def test_weekend_offsets_repeat_every_thirty_days():
    assert is_saturday(6) and is_sunday(7)
    assert is_saturday(27) and is_sunday(28)
    assert day_in_month(36) == 6
    assert is_saturday(36) and is_sunday(37)
    assert not is_weekend_day(29)
    assert not is_weekend_day(30)
    assert not is_weekend_day(1)


def test_working_day_respects_weekend_flags():
    assert is_working_day(5, False, False)
    assert not is_working_day(6, False, False)
    assert is_working_day(6, True, False)
    assert not is_working_day(7, True, False)
    assert is_working_day(7, False, True)


def test_days_off_per_week_counts_first_week():
    assert days_off_per_week(False, False) == 2
    assert days_off_per_week(True, False) == 1
    assert days_off_per_week(False, True) == 1
    assert days_off_per_week(True, True) == 0


def test_compute_duration_examples():
    assert compute_duration(40, True, True) == 5
    assert compute_duration(40, False, False) == 7
    assert compute_duration(80, True, False) == 12
    assert compute_duration(80, False, False) == 14


def test_compute_duration_short_blocks_do_not_gain_weekend_days():
    # fewer than five working days: no weekend padding
    assert compute_duration(16, False, False) == 2
    assert compute_duration(32, False, False) == 4


def test_compute_duration_never_below_one_day():
    assert compute_duration(0, False, False) == 1
    assert compute_duration(0.5, True, True) == 1
    assert compute_duration(-3, False, False) == 1


def test_base_duration_rounds_up_to_whole_days():
    assert base_duration(8) == 1
    assert base_duration(8.01) == 2
    assert base_duration(12.5) == 2
