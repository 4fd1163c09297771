"""Stats API endpoint for log parser statistics."""
from __future__ import annotations

from typing import Any

from litestar import get
from litestar.di import Provide

from logfileparser.services.ingestion import LogIngestionService
from logfileparser.api.dependencies import provide_ingestion_service as pis


@get("/stats", dependencies={"ingestion_service": Provide(pis, sync_to_thread=False)})
async def stats(ingestion_service: LogIngestionService) -> dict[str, Any]:
    """Get log parser statistics for the loaded file."""
    return {
        "source": str(ingestion_service.source) if ingestion_service.source else None,
        "is_loaded": ingestion_service.is_loaded,
        "total_entries": len(ingestion_service.entries),
        "total_parsed_entries": ingestion_service.parsed_entries,
        "total_rejected_entries": ingestion_service.rejected_entries,
    }
