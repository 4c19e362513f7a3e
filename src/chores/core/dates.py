"""Calendar helpers for recurrence arithmetic."""

import calendar
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

SUNDAY = 0
SATURDAY = 6


def weekday_index(day: date) -> int:
    """
    Weekday of a date with Sunday as 0 and Saturday as 6.

    Python's ``date.weekday()`` starts at Monday=0.
    """
    return (day.weekday() + 1) % 7


def start_of_week(day: date) -> date:
    """Sunday on or before the given date."""
    return day - timedelta(days=weekday_index(day))


def weeks_between(start: date, end: date) -> int:
    """Number of Sunday-started calendar weeks from ``start``'s week to ``end``'s week."""
    return (start_of_week(end) - start_of_week(start)).days // 7


def last_day_of_month(day: date) -> int:
    """Number of days in the month containing ``day``."""
    return calendar.monthrange(day.year, day.month)[1]


def add_months(day: date, months: int) -> date:
    """
    Add calendar months, keeping the day of month where possible.

    Days past the end of the target month are clamped to its last day,
    so Jan 31 + 1 month is Feb 28 (or Feb 29 in a leap year).
    """
    return day + relativedelta(months=months)


def with_day_of_month(day: date, day_of_month: int) -> date:
    """
    Move ``day`` to the given day of its month.

    Out-of-range values are clamped to the first or last day of the month.
    """
    clamped = max(1, min(day_of_month, last_day_of_month(day)))
    return day.replace(day=clamped)
