"""Utility functions and helpers for the medication and cycle tracker."""

from .cycle_calculations import (
    CyclePhase,
    FREQUENCIES,
    DEFAULT_CYCLE_LENGTH,
    cycle_day_for,
    phase_for,
    should_take,
    phase_label,
    calendar_phase_for
)
from .date_utils import (
    parse_iso_date,
    time_of_day,
    greeting,
    calendar_range
)

__all__ = [
    'CyclePhase',
    'FREQUENCIES',
    'DEFAULT_CYCLE_LENGTH',
    'cycle_day_for',
    'phase_for',
    'should_take',
    'phase_label',
    'calendar_phase_for',
    'parse_iso_date',
    'time_of_day',
    'greeting',
    'calendar_range'
]
