"""Unit tests for calendar helpers."""
from datetime import date

import pytest

from chores.core.dates import (
    add_months,
    last_day_of_month,
    start_of_week,
    weekday_index,
    weeks_between,
    with_day_of_month,
)


@pytest.mark.parametrize(
    "day,expected",
    [
        (date(2025, 5, 4), 0),  # Sunday
        (date(2025, 5, 5), 1),
        (date(2025, 5, 3), 6),  # Saturday
    ],
)
def test_weekday_index_starts_on_sunday(day, expected):
    """Test weekday numbering with Sunday as 0."""
    assert weekday_index(day) == expected


def test_start_of_week():
    """Test finding the Sunday that starts a week."""
    assert start_of_week(date(2025, 5, 3)) == date(2025, 4, 27)
    assert start_of_week(date(2025, 5, 4)) == date(2025, 5, 4)
    assert start_of_week(date(2025, 1, 1)) == date(2024, 12, 29)


def test_weeks_between():
    """Test counting calendar weeks between dates."""
    assert weeks_between(date(2025, 5, 3), date(2025, 5, 3)) == 0
    # Saturday to the next day crosses into a new week
    assert weeks_between(date(2025, 5, 3), date(2025, 5, 4)) == 1
    assert weeks_between(date(2025, 5, 4), date(2025, 5, 10)) == 0
    assert weeks_between(date(2025, 5, 3), date(2025, 5, 17)) == 2


def test_last_day_of_month():
    """Test month lengths, including leap years."""
    assert last_day_of_month(date(2025, 2, 10)) == 28
    assert last_day_of_month(date(2024, 2, 10)) == 29
    assert last_day_of_month(date(2025, 4, 1)) == 30
    assert last_day_of_month(date(2025, 12, 31)) == 31


def test_add_months_clamps_to_month_length():
    """Test month addition keeps the day or clamps it."""
    assert add_months(date(2025, 1, 15), 1) == date(2025, 2, 15)
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2025, 11, 30), 3) == date(2026, 2, 28)


def test_with_day_of_month_clamps():
    """Test pinning a day of month with out-of-range values."""
    assert with_day_of_month(date(2025, 2, 1), 15) == date(2025, 2, 15)
    assert with_day_of_month(date(2025, 2, 1), 31) == date(2025, 2, 28)
    assert with_day_of_month(date(2025, 4, 1), 45) == date(2025, 4, 30)
    assert with_day_of_month(date(2025, 4, 20), 0) == date(2025, 4, 1)
    assert with_day_of_month(date(2025, 4, 20), -3) == date(2025, 4, 1)
