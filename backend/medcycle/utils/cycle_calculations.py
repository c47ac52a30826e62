"""
Cycle day, phase and medication schedule calculations.

All functions are pure: the reference date is always passed in, nothing
here reads the clock or touches the database. Absence of cycle data is
signalled with None (cycle day / phase) or True (medication due), never
with an exception.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Union

DEFAULT_CYCLE_LENGTH = 28

# Fixed day thresholds, independent of the user's cycle length
MENSTRUAL_LAST_DAY = 5
FOLLICULAR_LAST_DAY = 13
OVULATION_LAST_DAY = 15
FIRST_HALF_LAST_DAY = 14

NO_CYCLE_LABEL = 'Track your cycle to see phase info'

# Medication frequency tags
DAILY = 'daily'
EVERY_OTHER_DAY = 'every-other-day'
WEEKLY = 'weekly'
AS_NEEDED = 'as-needed'
CYCLE_DAYS_1_14 = 'cycle-days-1-14'
CYCLE_DAYS_15_28 = 'cycle-days-15-28'
DURING_PERIOD = 'during-period'
CUSTOM = 'custom'

FREQUENCIES = (
    DAILY,
    EVERY_OTHER_DAY,
    WEEKLY,
    AS_NEEDED,
    CYCLE_DAYS_1_14,
    CYCLE_DAYS_15_28,
    DURING_PERIOD,
    CUSTOM,
)

CYCLE_SENSITIVE_FREQUENCIES = (CYCLE_DAYS_1_14, CYCLE_DAYS_15_28, DURING_PERIOD)


class CyclePhase(Enum):
    MENSTRUAL = 'Menstrual'
    FOLLICULAR = 'Follicular'
    OVULATION = 'Ovulation'
    LUTEAL = 'Luteal'


# Short tags used by the calendar view
CALENDAR_PHASE_TAGS = {
    CyclePhase.MENSTRUAL: 'period',
    CyclePhase.FOLLICULAR: 'follicular',
    CyclePhase.OVULATION: 'ovulation',
    CyclePhase.LUTEAL: 'luteal',
}


def _as_date(value: Union[date, datetime]) -> date:
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def cycle_day_for(reference_date: Union[date, datetime], cycle_record: Any) -> Optional[int]:
    """
    Compute the 1-based cycle day of ``reference_date``.

    Args:
        reference_date: The day to evaluate (date or datetime).
        cycle_record: Object exposing ``period_start_date`` and ``cycle_length``,
            typically the latest CycleTracking row, or None.

    Returns:
        An integer in [1, cycle_length], or None when no cycle is tracked or
        the reference date falls before the recorded start.

    Days are counted on calendar dates; any time-of-day component on either
    side is discarded before subtracting.
    """
    if cycle_record is None:
        return None

    period_start_date = getattr(cycle_record, 'period_start_date', None)
    if not period_start_date:
        return None

    cycle_length = getattr(cycle_record, 'cycle_length', None)
    if not cycle_length or cycle_length <= 0:
        cycle_length = DEFAULT_CYCLE_LENGTH

    days_since_start = (_as_date(reference_date) - _as_date(period_start_date)).days
    if days_since_start < 0:
        return None

    return (days_since_start % cycle_length) + 1


def phase_for(cycle_day: Optional[int]) -> Optional[CyclePhase]:
    if cycle_day is None:
        return None

    if cycle_day <= MENSTRUAL_LAST_DAY:
        return CyclePhase.MENSTRUAL
    if cycle_day <= FOLLICULAR_LAST_DAY:
        return CyclePhase.FOLLICULAR
    if cycle_day <= OVULATION_LAST_DAY:
        return CyclePhase.OVULATION
    return CyclePhase.LUTEAL


def should_take(frequency: str, cycle_day: Optional[int]) -> bool:
    """
    Decide whether a medication with ``frequency`` is due on ``cycle_day``.

    Without cycle data every medication is due. Only the cycle-based tags
    look at the day; every other tag (including unknown ones) is always due.
    """
    if cycle_day is None:
        return True

    if frequency == CYCLE_DAYS_1_14:
        return cycle_day <= FIRST_HALF_LAST_DAY
    if frequency == CYCLE_DAYS_15_28:
        return cycle_day > FIRST_HALF_LAST_DAY
    if frequency == DURING_PERIOD:
        return cycle_day <= MENSTRUAL_LAST_DAY
    return True


def phase_label(cycle_day: Optional[int]) -> str:
    phase = phase_for(cycle_day)
    if phase is None:
        return NO_CYCLE_LABEL
    return f'{phase.value} Phase - Day {cycle_day}'


def calendar_phase_for(cycle_day: Optional[int]) -> Optional[str]:
    phase = phase_for(cycle_day)
    if phase is None:
        return None
    return CALENDAR_PHASE_TAGS[phase]
