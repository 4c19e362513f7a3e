"""Application wiring."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from chores.config import Settings, get_settings
from chores.core.clock import Clock, utc_now
from chores.core.logging import setup_logging
from chores.services import ChoreService, ChoreStore, InMemoryChoreStore
from chores.telemetry import TelemetryManager

logger = logging.getLogger(__name__)


@contextmanager
def lifespan(
    settings: Settings | None = None,
    store: ChoreStore | None = None,
    clock: Clock = utc_now,
) -> Iterator[ChoreService]:
    """
    Configure logging and tracing, and yield a ready chore service.

    Args:
        settings: Application settings (defaults to environment settings)
        store: Chore store (defaults to an in-memory store)
        clock: Time source

    Yields:
        Chore service bound to the store
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings)
    telemetry_manager = TelemetryManager(settings)
    telemetry_manager.setup()

    logger.info(f"Starting {settings.app_name} ({settings.environment})")
    try:
        if store is None:
            store = InMemoryChoreStore()
        yield ChoreService.from_settings(store, settings, clock=clock)
    finally:
        telemetry_manager.shutdown()
        logger.info(f"Shutting down {settings.app_name}")
