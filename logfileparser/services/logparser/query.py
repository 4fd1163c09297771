"""Read-only queries over parsed entries."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .schemas import LogEntry

_MISSING = object()


def find_matching(
    entries: Iterable[LogEntry],
    constraints: Mapping[str, Any] | Iterable[tuple[str, Any]] = (),
) -> list[LogEntry]:
    """Return the entries whose fields equal every expected value, in order.

    Fields are looked up by name on the entry (level, message, module, file,
    line) and then among its extracted key values. An entry without one of the
    constrained fields never matches. No constraints match every entry.
    """
    pairs = list(constraints.items() if isinstance(constraints, Mapping) else constraints)
    return [
        entry
        for entry in entries
        if all(
            (actual := entry.get(name, _MISSING)) is not _MISSING and actual == expected
            for name, expected in pairs
        )
    ]


def refine_by_keys(entries: Iterable[LogEntry], required_fields: Iterable[str]) -> list[LogEntry]:
    """Return the entries that have every one of required_fields, in order."""
    required = list(required_fields)
    return [entry for entry in entries if all(entry.has_field(name) for name in required)]
