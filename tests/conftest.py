"""Test fixtures and configuration."""
from datetime import UTC, date, datetime

import pytest

from chores.config import Settings
from chores.core.clock import FixedClock
from chores.models import Chore, RecurrenceRule, RecurrenceType
from chores.services import ChoreService, InMemoryChoreStore


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Get test settings."""
    return Settings(
        environment="test",
        otel_enabled=False,
        timezone="UTC",
    )


@pytest.fixture
def clock() -> FixedClock:
    """Clock fixed at 2025-05-04 09:00 UTC."""
    return FixedClock(datetime(2025, 5, 4, 9, 0, tzinfo=UTC))


@pytest.fixture
def store() -> InMemoryChoreStore:
    """Empty in-memory chore store."""
    return InMemoryChoreStore()


@pytest.fixture
def chore_service(store, clock, test_settings) -> ChoreService:
    """Chore service bound to the in-memory store and fixed clock."""
    return ChoreService.from_settings(store, test_settings, clock=clock)


@pytest.fixture
def one_off_chore() -> Chore:
    """Non-recurring chore."""
    return Chore(
        title="Buy groceries",
        description="Milk, eggs, bread",
        household_id="household-1",
        due_date=date(2025, 5, 3),
        point_value=2,
    )


@pytest.fixture
def biweekly_chore() -> Chore:
    """Every-other-Saturday chore due on Saturday 2025-05-03."""
    return Chore(
        title="Mow the lawn",
        description="Front and back yard",
        household_id="household-1",
        assigned_to_user_id="user-1",
        created_by_user_id="user-2",
        due_date=date(2025, 5, 3),
        is_recurring=True,
        recurrence_rule=RecurrenceRule(
            type=RecurrenceType.WEEKLY,
            interval=2,
            days_of_week=[6],
        ),
        point_value=5,
    )
