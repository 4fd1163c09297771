"""Schemas for parsed log entries - pure data, no parsing logic."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Union

Value = Union[int, float, bool, str, datetime]

Schema = Mapping[str, "FieldType"]


class FieldType(Enum):
    """Type descriptor for a schema field extracted from a structured entry body."""

    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TEXT = "text"
    DATETIME = "datetime"

    @classmethod
    def resolve(cls, spec: FieldType | str | type) -> FieldType:
        """Resolve a type name or Python type to a FieldType.

        Raises:
            ValueError: If the spec does not name a supported type.
        """
        if isinstance(spec, FieldType):
            return spec
        if isinstance(spec, type):
            # bool before int, bool is a subclass of int
            for python_type, field_type in _PYTHON_TYPES:
                if issubclass(spec, python_type):
                    return field_type
            raise ValueError(f"Unsupported field type: {spec.__name__}")
        try:
            return _TYPE_ALIASES[spec.strip().lower()]
        except (KeyError, AttributeError):
            raise ValueError(
                f"Unsupported field type: {spec!r}. Allowed are {sorted(_TYPE_ALIASES)}"
            ) from None


_PYTHON_TYPES: tuple[tuple[type, FieldType], ...] = (
    (bool, FieldType.BOOLEAN),
    (int, FieldType.INTEGER),
    (float, FieldType.FLOAT),
    (datetime, FieldType.DATETIME),
    (str, FieldType.TEXT),
)

_TYPE_ALIASES: dict[str, FieldType] = {
    "int": FieldType.INTEGER,
    "integer": FieldType.INTEGER,
    "float": FieldType.FLOAT,
    "double": FieldType.FLOAT,
    "bool": FieldType.BOOLEAN,
    "boolean": FieldType.BOOLEAN,
    "str": FieldType.TEXT,
    "string": FieldType.TEXT,
    "text": FieldType.TEXT,
    "datetime": FieldType.DATETIME,
}


def resolve_schema(raw: Mapping[str, FieldType | str | type] | None = None) -> Schema:
    """Build an immutable, ordered schema from a caller-supplied mapping.

    Args:
        raw: Mapping of field name to a FieldType, a type name ("int", "bool", ...)
            or a Python type. None or empty means no typed fields.

    Returns:
        Read-only mapping of field name to FieldType, in the caller's order.
    """
    if not raw:
        return MappingProxyType({})
    return MappingProxyType({name: FieldType.resolve(spec) for name, spec in raw.items()})


@dataclass(frozen=True)
class KeySet:
    """Extracted key values of an entry in canonical, hashable form.

    Pairs are sorted by field name so two entries with the same fields and
    values compare and hash equal regardless of the order they appeared in.
    """

    items: tuple[tuple[str, Value], ...] = ()

    @classmethod
    def from_mapping(cls, values: Mapping[str, Value] | Iterable[tuple[str, Value]]) -> KeySet:
        pairs = values.items() if isinstance(values, Mapping) else values
        return cls(tuple(sorted(pairs, key=lambda pair: pair[0])))

    def as_dict(self) -> dict[str, Value]:
        return dict(self.items)

    def to_dict(self) -> dict[str, Any]:
        """Return the key values with datetimes rendered as ISO-8601 text."""
        return {
            name: value.isoformat() if isinstance(value, datetime) else value
            for name, value in self.items
        }

    def get(self, name: str, default: Any = None) -> Any:
        for key, value in self.items:
            if key == name:
                return value
        return default

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self.items)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)


_MISSING = object()

# Query names that resolve to record attributes rather than extracted key values
_ATTRIBUTE_ALIASES: dict[str, str] = {
    "level": "level",
    "message": "message",
    "module": "module",
    "source_file": "source_file",
    "file": "source_file",
    "source_line": "source_line",
    "line": "source_line",
}


@dataclass(frozen=True)
class LogEntry:
    """One parsed log record.

    Structured entries come from the boxed multi-line layout and may carry
    extracted key values and a provenance footer. Single-line entries only
    carry a level and a message.
    """

    level: str
    message: str
    key_values: KeySet = field(default_factory=KeySet)
    module: str | None = None
    source_file: str | None = None
    source_line: int | None = None
    structured: bool = False

    def get(self, name: str, default: Any = None) -> Any:
        """Look up a field by name: record attributes first, then key values.

        Unset provenance fields count as absent.
        """
        attribute = _ATTRIBUTE_ALIASES.get(name)
        if attribute is not None:
            value = getattr(self, attribute)
            if value is not None:
                return value
        return self.key_values.get(name, default)

    def has_field(self, name: str) -> bool:
        return self.get(name, _MISSING) is not _MISSING

    @property
    def has_provenance(self) -> bool:
        return self.module is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation, omitting unset provenance."""
        data: dict[str, Any] = {"level": self.level, "message": self.message}
        if self.structured:
            data["keys"] = self.key_values.to_dict()
        if self.has_provenance:
            data["module"] = self.module
            data["file"] = self.source_file
            data["line"] = self.source_line
        return data
