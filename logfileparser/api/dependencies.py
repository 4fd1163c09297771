"""Shared dependency providers for API layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from litestar import Request
from litestar.params import Parameter

from logfileparser.config.settings import LogParserSettings, get_settings
from logfileparser.services.ingestion import LogIngestionService
from logfileparser.services.logparser import LogParser


@dataclass
class LimitOffset:
    """Offset/limit window over an entry list."""

    limit: int
    offset: int


def build_parser(settings: LogParserSettings) -> LogParser:
    """Create a LogParser from the configured schema and filters."""
    return LogParser(
        schema=settings.schema_fields,
        message_filter=settings.message_filter,
        module_filter=settings.module_filter,
    )


def provide_parser_settings() -> LogParserSettings:
    """Provide the current log parser settings."""
    return get_settings().logparser


def provide_ingestion_service(request: Request) -> LogIngestionService:
    """Provide the LogIngestionService from app state.

    Falls back to an empty service when startup did not create one.
    """
    service: LogIngestionService | None = getattr(request.app.state, "ingestion_service", None)
    if service is None:
        service = LogIngestionService(parser=build_parser(get_settings().logparser))
        request.app.state.ingestion_service = service
    return service


def provide_limit_offset_pagination(
    current_page: Annotated[int, Parameter(ge=1, query="currentPage")] = 1,
    page_size: Annotated[int, Parameter(ge=1, query="pageSize")] = 10,
) -> LimitOffset:
    """Add offset/limit pagination.

    Parameters
    ----------
    current_page : int
        Page number (1-indexed).
    page_size : int
        Number of items per page.
    """
    return LimitOffset(page_size, page_size * (current_page - 1))
