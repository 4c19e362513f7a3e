"""Chore storage interface and an in-memory implementation."""

import threading
from typing import Protocol
from uuid import uuid4

from chores.exceptions import ChoreNotFoundError
from chores.models.chore import Chore


class ChoreStore(Protocol):
    """Persistence collaborator for the chore service."""

    def get(self, chore_id: str) -> Chore | None: ...

    def add(self, chore: Chore) -> Chore: ...

    def update(self, chore: Chore) -> Chore: ...

    def list_household(self, household_id: str, completed: bool | None = None) -> list[Chore]: ...


class InMemoryChoreStore:
    """Dict-backed chore store. Ids are random hex strings."""

    def __init__(self) -> None:
        self._chores: dict[str, Chore] = {}
        self._lock = threading.Lock()

    def get(self, chore_id: str) -> Chore | None:
        with self._lock:
            return self._chores.get(chore_id)

    def add(self, chore: Chore) -> Chore:
        stored = chore.model_copy(update={"id": uuid4().hex})
        with self._lock:
            self._chores[stored.id] = stored
        return stored

    def update(self, chore: Chore) -> Chore:
        with self._lock:
            if chore.id is None or chore.id not in self._chores:
                raise ChoreNotFoundError(chore.id)
            self._chores[chore.id] = chore
        return chore

    def list_household(self, household_id: str, completed: bool | None = None) -> list[Chore]:
        with self._lock:
            chores = [c for c in self._chores.values() if c.household_id == household_id]
        if completed is not None:
            chores = [c for c in chores if c.is_completed == completed]
        return sorted(chores, key=lambda c: (c.due_date is None, c.due_date, c.created_at))

    def __len__(self) -> int:
        with self._lock:
            return len(self._chores)
