"""Detection of correlation groups that saw only one of a pair of markers."""
from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .schemas import KeySet, LogEntry


class MatchState(Enum):
    """Which of the two paired markers a correlation group has seen."""

    NONE = "none"
    OPENING_SEEN = "opening_seen"
    CLOSING_SEEN = "closing_seen"
    BOTH = "both"

    def combine(self, other: MatchState) -> MatchState:
        """Union of the markers seen in both states."""
        if other is MatchState.NONE or other is self:
            return self
        if self is MatchState.NONE:
            return other
        return MatchState.BOTH

    @property
    def is_mismatch(self) -> bool:
        """True when exactly one marker was seen."""
        return self in (MatchState.OPENING_SEEN, MatchState.CLOSING_SEEN)


def find_mismatched(
    entries: Iterable[LogEntry],
    opening_marker: str,
    closing_marker: str,
) -> dict[KeySet, MatchState]:
    """Group entries by key values and report groups missing one marker.

    A message containing opening_marker marks its group OPENING_SEEN, one
    containing closing_marker marks it CLOSING_SEEN. Groups that end up with
    both markers, or with neither, are left out.

    Returns:
        Mapping of key set to OPENING_SEEN or CLOSING_SEEN, in order of first appearance.
    """
    entries = list(entries)
    states: dict[KeySet, MatchState] = {entry.key_values: MatchState.NONE for entry in entries}
    for entry in entries:
        key = entry.key_values
        if opening_marker in entry.message:
            states[key] = states[key].combine(MatchState.OPENING_SEEN)
        if closing_marker in entry.message:
            states[key] = states[key].combine(MatchState.CLOSING_SEEN)
    return {key: state for key, state in states.items() if state.is_mismatch}
