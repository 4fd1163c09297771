"""Typed value extraction for schema fields.

Every extractor returns None when the text cannot be read as the requested
type. Nothing here raises.
"""
import re
import math
import logging
from datetime import datetime
from typing import Callable

from .schemas import FieldType, Value

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?\d+")

# Shared so equal NaN keys fall in one correlation group
NAN = float("nan")

_TRUE_VALUES = frozenset({"true", "1"})
_FALSE_VALUES = frozenset({"false", "0"})


def _to_integer(text: str) -> int | None:
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def _to_float(text: str) -> float | None:
    # float() would accept digit-group underscores ("1_000")
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return NAN if math.isnan(value) else value


def _to_boolean(text: str) -> bool | None:
    lowered = text.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


def _to_text(text: str) -> str:
    return text


def _to_datetime(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


_EXTRACTORS: dict[FieldType, Callable[[str], Value | None]] = {
    FieldType.INTEGER: _to_integer,
    FieldType.FLOAT: _to_float,
    FieldType.BOOLEAN: _to_boolean,
    FieldType.TEXT: _to_text,
    FieldType.DATETIME: _to_datetime,
}


def extract_value(field_type: FieldType, text: str) -> Value | None:
    """Parse raw field text into the value declared by the schema.

    Args:
        field_type: Declared type of the field.
        text: Raw value text; surrounding whitespace is ignored.

    Returns:
        The typed value, or None if the text does not parse as field_type.
    """
    value = _EXTRACTORS[field_type](text.strip())
    if value is None:
        logger.debug("Could not read %r as %s", text, field_type.value)
    return value
