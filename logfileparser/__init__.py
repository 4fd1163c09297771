"""Typed parsing of boxed and bracketed log files, with queries and pairing checks."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from logfileparser.services.logparser import (
    FieldType,
    KeySet,
    LogEntry,
    LogParser,
    MatchState,
    find_matching,
    find_mismatched,
    refine_by_keys,
)


def parse_logs(
    lines: Iterable[str],
    schema: Mapping[str, FieldType | str | type] | None = None,
    message_filter: str | None = None,
    module_filter: str | None = None,
) -> list[LogEntry]:
    """Parse log lines into entries, dropping any entry that fails the schema or filters."""
    parser = LogParser(schema=schema, message_filter=message_filter, module_filter=module_filter)
    return parser.parse_lines(lines)


def extract_matching(
    entries: Iterable[LogEntry],
    key_constraints: Mapping[str, Any] | Iterable[tuple[str, Any]] = (),
) -> list[LogEntry]:
    """Entries whose named fields equal every expected value."""
    return find_matching(entries, key_constraints)


def find_mismatched_pairs(
    entries: Iterable[LogEntry],
    opening_marker: str,
    closing_marker: str,
) -> dict[KeySet, MatchState]:
    """Correlation groups that saw only one of the two markers."""
    return find_mismatched(entries, opening_marker, closing_marker)


__all__ = [
    "FieldType",
    "KeySet",
    "LogEntry",
    "LogParser",
    "MatchState",
    "parse_logs",
    "extract_matching",
    "refine_by_keys",
    "find_mismatched_pairs",
]
