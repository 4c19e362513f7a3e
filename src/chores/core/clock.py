"""Time sources."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(UTC)


class FixedClock:
    """Clock that always returns the same instant.

    Naive datetimes are taken to be UTC.
    """

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        self.instant = instant

    def __call__(self) -> datetime:
        return self.instant

    def advance(self, **kwargs: float) -> None:
        """Move the clock forward by the given ``timedelta`` arguments."""
        self.instant = self.instant + timedelta(**kwargs)

    def __repr__(self) -> str:
        return f"<FixedClock({self.instant.isoformat()})>"
