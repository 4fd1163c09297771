"""Log entry API endpoints."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from litestar import Controller, get, post
from litestar.di import Provide
from litestar.exceptions import ValidationException
from litestar.pagination import OffsetPagination
from litestar.status_codes import HTTP_200_OK

from logfileparser.config.settings import LogParserSettings
from logfileparser.services.ingestion import LogIngestionService
from logfileparser.services.logparser import (
    LogParser,
    find_matching,
    find_mismatched,
    refine_by_keys,
)
from logfileparser.api.dependencies import (
    LimitOffset,
    provide_ingestion_service,
    provide_parser_settings,
)


@dataclass
class ParseRequest:
    """Lines to parse with an ad hoc schema and filters."""

    lines: list[str]
    schema: dict[str, str] = field(default_factory=dict)
    message_filter: str | None = None
    module_filter: str | None = None


@dataclass
class MatchRequest:
    """Field constraints and required fields applied to the loaded entries."""

    constraints: dict[str, Any] = field(default_factory=dict)
    required_fields: list[str] = field(default_factory=list)


class EntryController(Controller):
    """Log entry endpoints

    Parses submitted lines and queries the entries loaded at startup.
    """
    path = "/api/v1/entries"
    tags = ["Log Entries"]

    dependencies = {
        "ingestion_service": Provide(provide_ingestion_service, sync_to_thread=False),
        "parser_settings": Provide(provide_parser_settings, sync_to_thread=False),
    }

    @post("/parse", status_code=HTTP_200_OK)
    async def parse_entries(self, data: ParseRequest) -> list[dict[str, Any]]:
        """Parse the submitted lines without touching the loaded entries."""
        try:
            parser = LogParser(
                schema=data.schema,
                message_filter=data.message_filter,
                module_filter=data.module_filter,
            )
        except ValueError as e:
            raise ValidationException(detail=str(e)) from e
        return [entry.to_dict() for entry in parser.parse_lines(data.lines)]

    @get("/")
    async def list_entries(
        self,
        ingestion_service: LogIngestionService,
        limit_offset: LimitOffset,
    ) -> OffsetPagination[dict[str, Any]]:
        """List loaded entries with pagination."""
        entries = ingestion_service.entries
        window = entries[limit_offset.offset:limit_offset.offset + limit_offset.limit]
        return OffsetPagination[dict[str, Any]](
            items=[entry.to_dict() for entry in window],
            total=len(entries),
            limit=limit_offset.limit,
            offset=limit_offset.offset,
        )

    @post("/match", status_code=HTTP_200_OK)
    async def match_entries(
        self,
        data: MatchRequest,
        ingestion_service: LogIngestionService,
    ) -> list[dict[str, Any]]:
        """Loaded entries equal to every constraint and holding every required field."""
        entries = find_matching(ingestion_service.entries, data.constraints)
        entries = refine_by_keys(entries, data.required_fields)
        return [entry.to_dict() for entry in entries]

    @get("/mismatched")
    async def list_mismatched(
        self,
        ingestion_service: LogIngestionService,
        parser_settings: LogParserSettings,
        opening: str | None = None,
        closing: str | None = None,
    ) -> list[dict[str, Any]]:
        """Correlation groups of the loaded entries that saw only one marker."""
        opening_marker = opening or parser_settings.opening_marker
        closing_marker = closing or parser_settings.closing_marker
        if not opening_marker or not closing_marker:
            raise ValidationException(
                detail="Both an opening and a closing marker are required "
                "(query 'opening'/'closing' or LOGPARSER_OPENING_MARKER/LOGPARSER_CLOSING_MARKER)"
            )
        mismatched = find_mismatched(ingestion_service.entries, opening_marker, closing_marker)
        return [
            {"keys": key_set.to_dict(), "state": state.value}
            for key_set, state in mismatched.items()
        ]
