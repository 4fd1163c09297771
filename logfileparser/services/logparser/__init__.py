"""Log parser module - segmentation, typed extraction, queries and pairing."""
from .logparser import LogParser
from .schemas import FieldType, KeySet, LogEntry, resolve_schema
from .segmenter import EntrySegmenter, is_entry_start
from .filters import FilterPolicy
from .extractor import extract_value
from .query import find_matching, refine_by_keys
from .mismatch import MatchState, find_mismatched

__all__ = [
    "LogParser",
    "FieldType",
    "KeySet",
    "LogEntry",
    "resolve_schema",
    "EntrySegmenter",
    "is_entry_start",
    "FilterPolicy",
    "extract_value",
    "find_matching",
    "refine_by_keys",
    "MatchState",
    "find_mismatched",
]
