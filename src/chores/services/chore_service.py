"""Chore service for creating and completing chores."""

import logging
from dataclasses import dataclass
from datetime import UTC, tzinfo

from opentelemetry import trace

from chores.config import Settings
from chores.core.clock import Clock, utc_now
from chores.core.recurrence import compute_next_occurrence
from chores.exceptions import (
    ChoreAlreadyCompletedError,
    ChoreNotFoundError,
    ChoreValidationError,
)
from chores.models.chore import Chore
from chores.services.store import ChoreStore
from chores.telemetry import create_chore_span_attributes, set_span_attributes

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass(frozen=True)
class CompletionResult:
    """Outcome of completing a chore."""

    completed: Chore
    next_occurrence: Chore | None = None

    @property
    def series_ended(self) -> bool:
        """True if a recurring chore produced no further occurrence."""
        return self.completed.is_recurring and self.next_occurrence is None


class ChoreService:
    """Service for chore lifecycle operations."""

    def __init__(self, store: ChoreStore, clock: Clock = utc_now, tz: tzinfo = UTC):
        self.store = store
        self.clock = clock
        self.tz = tz

    @classmethod
    def from_settings(
        cls, store: ChoreStore, settings: Settings, clock: Clock = utc_now
    ) -> "ChoreService":
        """Create a service that decides the current day in the configured time zone."""
        return cls(store, clock=clock, tz=settings.tzinfo)

    def create_chore(self, chore: Chore, created_by_user_id: str | None = None) -> Chore:
        """
        Save a new chore.

        Args:
            chore: Chore to save; any id it carries is replaced
            created_by_user_id: User creating the chore

        Returns:
            The stored chore

        Raises:
            ChoreValidationError: If the household id or title is blank
        """
        saved = self.store.add(self._prepare_new(chore, created_by_user_id))
        logger.info(
            f"Created chore '{saved.title}' in household {saved.household_id}",
            extra={"chore_id": saved.id},
        )
        return saved

    def _prepare_new(self, chore: Chore, created_by_user_id: str | None) -> Chore:
        """Validate a chore and stamp it for insertion."""
        if not chore.household_id.strip():
            raise ChoreValidationError("Cannot create chore: household id is blank")
        if not chore.title.strip():
            raise ChoreValidationError("Cannot create chore: title is blank")

        next_occurrence_date = (
            chore.due_date if chore.is_recurring and chore.due_date is not None else None
        )
        return chore.model_copy(
            update={
                "created_by_user_id": created_by_user_id or chore.created_by_user_id,
                "created_at": self.clock(),
                "next_occurrence_date": next_occurrence_date,
            }
        )

    def complete_chore(self, chore_id: str, user_id: str) -> CompletionResult:
        """
        Mark a chore as completed and schedule its next occurrence.

        Args:
            chore_id: Chore ID
            user_id: User completing the chore

        Returns:
            The completed chore and the next occurrence, if any

        Raises:
            ChoreNotFoundError: If the chore does not exist
            ChoreAlreadyCompletedError: If the chore is already completed
            ChoreValidationError: If the next occurrence cannot be saved; the
                chore is left open
        """
        with tracer.start_as_current_span("chores.complete") as span:
            chore = self.store.get(chore_id)
            if chore is None:
                raise ChoreNotFoundError(chore_id)

            set_span_attributes(span, **create_chore_span_attributes(chore))

            if chore.is_completed:
                raise ChoreAlreadyCompletedError(chore_id)

            now = self.clock()
            completed = chore.model_copy(
                update={
                    "is_completed": True,
                    "completed_at": now,
                    "completed_by_user_id": user_id,
                    "updated_at": now,
                }
            )

            # Nothing is written until the successor is known to be valid
            to_add = None
            if chore.is_recurring:
                successor = compute_next_occurrence(chore, clock=self.clock)
                if successor is not None:
                    to_add = self._prepare_new(successor, chore.created_by_user_id)

            completed = self.store.update(completed)
            logger.info(f"Chore completed by user {user_id}", extra={"chore_id": chore_id})

            if not chore.is_recurring:
                return CompletionResult(completed=completed)

            if to_add is None:
                logger.info("No further occurrence scheduled", extra={"chore_id": chore_id})
                set_span_attributes(span, **{"chore.series_ended": True})
                return CompletionResult(completed=completed)

            next_chore = self.store.add(to_add)
            logger.info(
                f"Scheduled next occurrence for {next_chore.due_date}",
                extra={"chore_id": next_chore.id},
            )
            set_span_attributes(
                span,
                **{
                    "chore.next.id": next_chore.id,
                    "chore.next.due_date": next_chore.due_date.isoformat(),
                },
            )
            return CompletionResult(completed=completed, next_occurrence=next_chore)

    def overdue_chores(self, household_id: str) -> list[Chore]:
        """
        List open chores in a household whose due date has passed.

        Args:
            household_id: Household ID

        Returns:
            Overdue chores, earliest due first
        """
        now = self.clock()
        return [
            chore
            for chore in self.store.list_household(household_id, completed=False)
            if chore.is_overdue(now, self.tz)
        ]
