"""Chore value types."""
from chores.models.chore import Chore, RecurrenceRule, RecurrenceType

__all__ = [
    "Chore",
    "RecurrenceRule",
    "RecurrenceType",
]
