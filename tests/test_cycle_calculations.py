"""Tests for cycle day, phase and medication schedule calculations."""

from datetime import date, datetime, timedelta
from types import SimpleNamespace

import pytest

from medcycle.utils.cycle_calculations import (
    CyclePhase,
    FREQUENCIES,
    NO_CYCLE_LABEL,
    calendar_phase_for,
    cycle_day_for,
    phase_for,
    phase_label,
    should_take,
)

TODAY = date(2025, 3, 20)


def make_cycle(period_start_date=None, cycle_length=28):
    """Plain stand-in for a CycleTracking row."""
    return SimpleNamespace(period_start_date=period_start_date, cycle_length=cycle_length)


# ---------------------------------------------------------------------------
# cycle_day_for
# ---------------------------------------------------------------------------


class TestCycleDayFor:

    def test_start_date_is_day_one(self):
        assert cycle_day_for(TODAY, make_cycle(TODAY)) == 1

    def test_ten_days_after_start(self):
        assert cycle_day_for(TODAY, make_cycle(TODAY - timedelta(days=10))) == 11

    def test_last_day_of_cycle(self):
        assert cycle_day_for(TODAY, make_cycle(TODAY - timedelta(days=27))) == 28

    def test_wraps_into_next_cycle(self):
        assert cycle_day_for(TODAY, make_cycle(TODAY - timedelta(days=28))) == 1
        assert cycle_day_for(TODAY, make_cycle(TODAY - timedelta(days=61))) == 6

    def test_uses_recorded_cycle_length(self):
        assert cycle_day_for(TODAY, make_cycle(TODAY - timedelta(days=30), cycle_length=35)) == 31
        assert cycle_day_for(TODAY, make_cycle(TODAY - timedelta(days=35), cycle_length=35)) == 1

    def test_no_record(self):
        assert cycle_day_for(TODAY, None) is None

    def test_record_without_start_date(self):
        assert cycle_day_for(TODAY, make_cycle(None)) is None

    def test_reference_before_start(self):
        assert cycle_day_for(TODAY, make_cycle(TODAY + timedelta(days=1))) is None

    @pytest.mark.parametrize("cycle_length", [None, 0, -5])
    def test_missing_or_non_positive_length_defaults_to_28(self, cycle_length):
        cycle = make_cycle(TODAY - timedelta(days=28), cycle_length=cycle_length)
        assert cycle_day_for(TODAY, cycle) == 1

    def test_record_missing_cycle_length_attribute(self):
        cycle = SimpleNamespace(period_start_date=TODAY - timedelta(days=3))
        assert cycle_day_for(TODAY, cycle) == 4

    def test_time_of_day_does_not_shift_the_day(self):
        start = datetime(2025, 3, 10, 22, 30)
        early_same_day = datetime(2025, 3, 10, 6, 0)
        early_next_day = datetime(2025, 3, 11, 0, 5)

        assert cycle_day_for(early_same_day, make_cycle(start)) == 1
        assert cycle_day_for(early_next_day, make_cycle(start)) == 2

    def test_mixed_date_and_datetime(self):
        assert cycle_day_for(datetime(2025, 3, 20, 8, 0), make_cycle(date(2025, 3, 18))) == 3
        assert cycle_day_for(date(2025, 3, 20), make_cycle(datetime(2025, 3, 18, 23, 59))) == 3

    @pytest.mark.parametrize("cycle_length", [1, 21, 28, 35])
    def test_always_within_cycle_length(self, cycle_length):
        start = date(2025, 1, 1)
        for offset in range(0, 100):
            day = cycle_day_for(start + timedelta(days=offset), make_cycle(start, cycle_length))
            assert 1 <= day <= cycle_length

    def test_repeated_calls_agree(self):
        cycle = make_cycle(TODAY - timedelta(days=17))
        assert cycle_day_for(TODAY, cycle) == cycle_day_for(TODAY, cycle) == 18


# ---------------------------------------------------------------------------
# phase_for / phase_label / calendar_phase_for
# ---------------------------------------------------------------------------


class TestPhaseFor:

    @pytest.mark.parametrize("cycle_day,expected", [
        (1, CyclePhase.MENSTRUAL),
        (5, CyclePhase.MENSTRUAL),
        (6, CyclePhase.FOLLICULAR),
        (13, CyclePhase.FOLLICULAR),
        (14, CyclePhase.OVULATION),
        (15, CyclePhase.OVULATION),
        (16, CyclePhase.LUTEAL),
        (28, CyclePhase.LUTEAL),
        (45, CyclePhase.LUTEAL),
    ])
    def test_boundaries(self, cycle_day, expected):
        assert phase_for(cycle_day) == expected

    def test_none(self):
        assert phase_for(None) is None

    def test_defined_for_every_positive_day(self):
        for cycle_day in range(1, 121):
            assert phase_for(cycle_day) in CyclePhase

    def test_label(self):
        assert phase_label(11) == 'Follicular Phase - Day 11'
        assert phase_label(3) == 'Menstrual Phase - Day 3'
        assert phase_label(None) == NO_CYCLE_LABEL

    @pytest.mark.parametrize("cycle_day,expected", [
        (None, None),
        (2, 'period'),
        (10, 'follicular'),
        (14, 'ovulation'),
        (20, 'luteal'),
    ])
    def test_calendar_tags(self, cycle_day, expected):
        assert calendar_phase_for(cycle_day) == expected


# ---------------------------------------------------------------------------
# should_take
# ---------------------------------------------------------------------------


class TestShouldTake:

    @pytest.mark.parametrize("frequency", list(FREQUENCIES) + ['unknown-tag'])
    def test_everything_due_without_cycle_data(self, frequency):
        assert should_take(frequency, None) is True

    @pytest.mark.parametrize("frequency,cycle_day,expected", [
        ('cycle-days-1-14', 14, True),
        ('cycle-days-1-14', 15, False),
        ('cycle-days-15-28', 15, True),
        ('cycle-days-15-28', 14, False),
        ('during-period', 5, True),
        ('during-period', 6, False),
        ('daily', 1, True),
        ('unknown-tag', 20, True),
    ])
    def test_scenarios(self, frequency, cycle_day, expected):
        assert should_take(frequency, cycle_day) is expected

    @pytest.mark.parametrize("frequency", ['daily', 'every-other-day', 'weekly', 'as-needed', 'custom'])
    def test_non_cycle_frequencies_always_due(self, frequency):
        for cycle_day in range(1, 29):
            assert should_take(frequency, cycle_day) is True


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------


def test_ten_days_into_cycle():
    cycle = make_cycle(TODAY - timedelta(days=10), cycle_length=28)

    cycle_day = cycle_day_for(TODAY, cycle)
    assert cycle_day == 11
    assert phase_for(cycle_day) == CyclePhase.FOLLICULAR
    assert should_take('during-period', cycle_day) is False
    assert should_take('cycle-days-1-14', cycle_day) is True


def test_no_cycle_tracked():
    cycle_day = cycle_day_for(TODAY, None)

    assert cycle_day is None
    assert phase_for(cycle_day) is None
    assert all(should_take(frequency, cycle_day) for frequency in FREQUENCIES)
