"""Service layer for chore lifecycle logic."""
from chores.services.chore_service import ChoreService, CompletionResult
from chores.services.store import ChoreStore, InMemoryChoreStore

__all__ = [
    "ChoreService",
    "CompletionResult",
    "ChoreStore",
    "InMemoryChoreStore",
]
