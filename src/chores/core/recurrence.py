"""Recurrence utilities."""

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from chores.core.clock import Clock, utc_now
from chores.core.dates import (
    SATURDAY,
    SUNDAY,
    add_months,
    weekday_index,
    weeks_between,
    with_day_of_month,
)
from chores.models.chore import Chore, RecurrenceRule, RecurrenceType

logger = logging.getLogger(__name__)


def calculate_next_due_date(anchor: date | None, rule: RecurrenceRule | None) -> date | None:
    """
    Calculate the next due date based on the recurrence rule.

    Args:
        anchor: Date of the current occurrence
        rule: The recurrence rule

    Returns:
        The next due date, or None if the series has no further occurrence
    """
    if anchor is None or rule is None:
        return None

    interval = rule.interval
    if interval is None or interval < 1:
        logger.debug(f"Unusable recurrence interval: {interval}")
        return None

    next_date: date | None
    try:
        if rule.type == RecurrenceType.DAILY:
            next_date = anchor + relativedelta(days=interval)
        elif rule.type == RecurrenceType.WEEKLY:
            if rule.days_of_week:
                next_date = next_listed_weekday(anchor, rule.days_of_week, interval)
            else:
                next_date = anchor + relativedelta(weeks=interval)
        elif rule.type == RecurrenceType.MONTHLY:
            next_date = add_months(anchor, interval)
            if rule.day_of_month is not None:
                next_date = with_day_of_month(next_date, rule.day_of_month)
        else:
            logger.debug(f"Unsupported recurrence type: {rule.type!r}")
            return None
    except (OverflowError, ValueError):
        # Past date.max: the series has no representable next date
        logger.debug(f"Next date after {anchor} is out of range (interval {interval})")
        return None

    if next_date is None:
        return None

    if rule.end_date is not None and next_date > rule.end_date:
        logger.debug(f"Next date {next_date} is after end date {rule.end_date}")
        return None

    return next_date


def next_listed_weekday(anchor: date, days_of_week: Iterable[int], interval: int) -> date | None:
    """
    Find the next date after ``anchor`` that falls on one of ``days_of_week``.

    Weeks start on Sunday. A match must lie in the anchor's own week or in
    the week ``interval`` weeks later, so an every-other-week Saturday chore
    due on a Saturday moves two Saturdays ahead. The scan covers at most
    ``7 * interval`` days.

    Args:
        anchor: Date of the current occurrence
        days_of_week: Weekday indices, 0=Sunday .. 6=Saturday
        interval: Number of weeks between active weeks

    Returns:
        The matching date, or None if no valid weekday was given
    """
    wanted = {day for day in days_of_week if SUNDAY <= day <= SATURDAY}
    if not wanted:
        return None

    candidate = anchor
    for _ in range(7 * interval):
        try:
            candidate += timedelta(days=1)
        except OverflowError:
            logger.debug(f"Weekday scan after {anchor} ran past the last representable date")
            return None
        if weekday_index(candidate) not in wanted:
            continue
        if weeks_between(anchor, candidate) in (0, interval):
            return candidate

    return None


def compute_next_occurrence(chore: Chore, clock: Clock = utc_now) -> Chore | None:
    """
    Build the chore record for the next occurrence of a recurring chore.

    The input chore is left untouched. The successor has no id, is not
    completed, and is due on the next occurrence date.

    Args:
        chore: The chore that was just completed
        clock: Time source for the successor's creation timestamp

    Returns:
        The next occurrence, or None if the chore does not recur again
    """
    if not chore.is_recurring:
        logger.debug("Chore is not recurring", extra={"chore_id": chore.id})
        return None

    rule = chore.recurrence_rule
    if rule is None:
        logger.debug("Recurring chore has no recurrence rule", extra={"chore_id": chore.id})
        return None

    anchor = chore.anchor_date
    if anchor is None:
        logger.debug("Chore has no due date to recur from", extra={"chore_id": chore.id})
        return None

    next_date = calculate_next_due_date(anchor, rule)
    if next_date is None:
        logger.debug("Recurrence series has ended", extra={"chore_id": chore.id})
        return None

    logger.debug(
        f"Next occurrence after {anchor} is {next_date}",
        extra={"chore_id": chore.id},
    )
    return chore.model_copy(
        update={
            "id": None,
            "is_completed": False,
            "completed_at": None,
            "completed_by_user_id": None,
            "due_date": next_date,
            "next_occurrence_date": next_date,
            "created_at": clock(),
            "updated_at": None,
        }
    )
