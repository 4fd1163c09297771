"""Application lifecycle hooks for startup and shutdown."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from logfileparser.config.settings import get_settings
from logfileparser.api.dependencies import build_parser
from logfileparser.services.ingestion import LogIngestionService

if TYPE_CHECKING:
    from litestar import Litestar

logger = logging.getLogger(__name__)


async def on_startup(app: "Litestar") -> None:
    """Create the ingestion service and load the configured log file.

    - If no log file is configured, or it does not exist, start with no
      entries instead of failing app startup.
    """
    settings = get_settings()
    ingestion_service = LogIngestionService(parser=build_parser(settings.logparser))
    app.state.ingestion_service = ingestion_service

    log_path = settings.logparser.log_path
    if log_path is None:
        logger.info("No log file configured, starting with no entries.")
        return
    if not log_path.exists():
        logger.warning("Log file %s does not exist, starting with no entries.", log_path)
        return

    await ingestion_service.load(log_path)


async def on_shutdown(app: "Litestar") -> None:
    """Release the loaded entries."""
    ingestion_service: LogIngestionService | None = getattr(
        app.state, "ingestion_service", None
    )
    if ingestion_service:
        ingestion_service.clear()
        logger.info("Cleared loaded log entries")
