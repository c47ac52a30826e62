"""Date parsing and display helpers."""

import calendar
from datetime import date, datetime, timedelta
from typing import List, Union

WEEK = 'week'
MONTH = 'month'
CALENDAR_VIEWS = (WEEK, MONTH)


def parse_iso_date(value: Union[str, date, datetime]) -> date:
    """
    Parse a YYYY-MM-DD string or full ISO timestamp into a date.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date: {value!r}")

    value = value.strip()
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        pass

    # Accept JavaScript-style timestamps ("...Z")
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return datetime.fromisoformat(value).date()


def time_of_day(moment: datetime) -> str:
    if moment.hour < 12:
        return 'Morning'
    elif moment.hour < 17:
        return 'Afternoon'
    return 'Evening'


def greeting(moment: datetime) -> str:
    return f'Good {time_of_day(moment)}'


def _sunday_on_or_before(day: date) -> date:
    # weekday(): Monday=0 ... Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def calendar_range(anchor: date, view: str = MONTH) -> List[date]:
    """
    Return the days shown by a calendar view.

    'week' is the Sunday-Saturday week containing ``anchor``; 'month' is the
    whole month padded out to full Sunday-Saturday weeks.
    """
    if view == WEEK:
        start = _sunday_on_or_before(anchor)
        end = start + timedelta(days=6)
    elif view == MONTH:
        month_start = anchor.replace(day=1)
        last_day = calendar.monthrange(anchor.year, anchor.month)[1]
        month_end = anchor.replace(day=last_day)
        start = _sunday_on_or_before(month_start)
        end = _sunday_on_or_before(month_end) + timedelta(days=6)
    else:
        raise ValueError(f"Invalid view '{view}'. Use one of: {', '.join(CALENDAR_VIEWS)}")

    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]
