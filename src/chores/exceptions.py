"""Domain errors for chore operations."""


class ChoreError(Exception):
    """Base class for chore errors."""


class ChoreNotFoundError(ChoreError):
    """Raised when a chore id is unknown to the store."""

    def __init__(self, chore_id: str | None):
        self.chore_id = chore_id
        super().__init__(f"Chore not found: {chore_id}")


class ChoreValidationError(ChoreError):
    """Raised when a chore cannot be saved as given."""


class ChoreAlreadyCompletedError(ChoreError):
    """Raised when completing a chore that is already completed."""

    def __init__(self, chore_id: str | None):
        self.chore_id = chore_id
        super().__init__(f"Chore already completed: {chore_id}")
