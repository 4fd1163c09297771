"""Patterns for the two recognized entry layouts."""
import re
from functools import lru_cache

HEADER_GLYPH = "┌"
BODY_GLYPH = "│"
FOOTER_GLYPH = "└"


@lru_cache(maxsize=1)
def single_line_start_pattern() -> re.Pattern[str]:
    """`[Level: ` at the very start of a line."""
    return re.compile(r"^\[\s*\w+:\s")


@lru_cache(maxsize=1)
def header_pattern() -> re.Pattern[str]:
    """`┌ Level: message`"""
    return re.compile(r"┌ (\w+): (.+)")


@lru_cache(maxsize=1)
def field_pattern() -> re.Pattern[str]:
    """`│ name = value`"""
    return re.compile(r"│\s+(\w+)\s+=\s+(.+)")


@lru_cache(maxsize=1)
def footer_pattern() -> re.Pattern[str]:
    """`└ @ module file:line`"""
    return re.compile(r"└ @ (\S+) (\S+):(\d+)")


@lru_cache(maxsize=1)
def single_line_pattern() -> re.Pattern[str]:
    """`[Level: message]` with the closing bracket optional."""
    return re.compile(r"^\[\s*(\w+):\s+(.+?)\s*\]?$")
