"""Chore models."""

from datetime import UTC, date, datetime, tzinfo
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from chores.core.clock import utc_now


class RecurrenceType(str, Enum):
    """Recurrence type enum."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def from_string(cls, value: str) -> "RecurrenceType | None":
        """Parse a recurrence type case-insensitively, or return None."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class RecurrenceRule(BaseModel):
    """How a chore repeats."""

    model_config = ConfigDict(frozen=True)

    type: RecurrenceType = Field(..., description="Daily, weekly or monthly")
    interval: int | None = Field(
        default=1, description="Days, weeks or months between occurrences"
    )
    days_of_week: tuple[int, ...] | None = Field(
        default=None, description="Weekdays for weekly rules (0=Sunday .. 6=Saturday)"
    )
    day_of_month: int | None = Field(
        default=None, description="Day of month for monthly rules, clamped to month length"
    )
    end_date: date | None = Field(
        default=None, description="No occurrence is scheduled after this date"
    )

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, v):
        """Accept recurrence type names in any case."""
        if isinstance(v, str):
            parsed = RecurrenceType.from_string(v)
            if parsed is None:
                raise ValueError(f"Unknown recurrence type: {v}")
            return parsed
        return v

    @field_validator("days_of_week")
    @classmethod
    def normalize_days_of_week(cls, v: tuple[int, ...] | None) -> tuple[int, ...] | None:
        """Store weekdays sorted and without duplicates."""
        if v is None:
            return v
        return tuple(sorted(set(v)))


class Chore(BaseModel):
    """A household chore, possibly recurring."""

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None, description="Store-assigned identifier")
    title: str = Field(default="", max_length=200)
    description: str = Field(default="", max_length=10000)
    household_id: str = Field(default="")
    assigned_to_user_id: str | None = None
    created_by_user_id: str | None = None

    due_date: date | None = None
    next_occurrence_date: date | None = Field(
        default=None, description="Anchor for computing the following occurrence"
    )

    is_recurring: bool = False
    recurrence_rule: RecurrenceRule | None = None

    is_completed: bool = False
    completed_at: datetime | None = None
    completed_by_user_id: str | None = None

    point_value: int = Field(default=1, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime | None = None

    @model_validator(mode="after")
    def check_recurrence_rule(self) -> "Chore":
        """A recurring chore carries a rule; a one-off chore does not."""
        if self.is_recurring and self.recurrence_rule is None:
            raise ValueError("Recurring chores require a recurrence rule")
        if not self.is_recurring and self.recurrence_rule is not None:
            raise ValueError("Only recurring chores may have a recurrence rule")
        return self

    @property
    def anchor_date(self) -> date | None:
        """Date the next occurrence is computed from."""
        return self.next_occurrence_date or self.due_date

    def is_overdue(self, now: datetime, tz: tzinfo = UTC) -> bool:
        """
        Check if the chore is overdue.

        Args:
            now: Current time
            tz: Time zone used to decide the current day

        Returns:
            True if the chore is open and its due date has passed
        """
        if self.is_completed or self.due_date is None:
            return False
        return self.due_date < now.astimezone(tz).date()

    def __repr__(self) -> str:
        return f"<Chore(id={self.id}, title={self.title[:30]}, due={self.due_date})>"
