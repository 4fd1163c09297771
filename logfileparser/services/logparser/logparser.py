from collections.abc import AsyncGenerator, Iterable, Iterator, Mapping
import logging
from pathlib import Path

import aiofiles

from .constants import (
    HEADER_GLYPH,
    header_pattern,
    field_pattern,
    footer_pattern,
    single_line_pattern,
    single_line_start_pattern,
)
from .extractor import extract_value
from .filters import FilterPolicy
from .schemas import FieldType, KeySet, LogEntry, Schema, Value, resolve_schema
from .segmenter import EntrySegmenter


logger = logging.getLogger(__name__)

ParseOutcome = tuple[LogEntry | None, str | None]


class LogParser:
    """Turns boxed multi-line and bracketed single-line log text into LogEntry records.

    This module handles:
    - Segmenting a line sequence into entry blocks
    - Parsing structured (boxed) and single-line entries
    - Extracting and validating typed body fields against a schema
    - Applying message and module filters

    A block that fails any step is dropped; it is never reported as an error.
    """

    def __init__(
        self,
        schema: Mapping[str, FieldType | str | type] | None = None,
        message_filter: str | None = None,
        module_filter: str | None = None,
    ) -> None:
        """Prepare a parser for one schema and filter configuration.

        Args:
            schema (Mapping, optional): Field name to type. Defaults to no typed fields.
            message_filter (str, optional): Substring every kept message must contain.
            module_filter (str, optional): Substring every footer module must contain.

        Raises:
            ValueError: If the schema names an unsupported type.
        """
        self.schema: Schema = resolve_schema(schema)
        self.filters = FilterPolicy(message_filter=message_filter, module_filter=module_filter)

        # Statistics
        self.parsed_entries: int = 0
        self.rejected_entries: int = 0

        logger.debug("Schema: %s", {name: t.value for name, t in self.schema.items()})
        logger.debug("Message filter: %s", message_filter)
        logger.debug("Module filter: %s", module_filter)

    def parsed_entries_count(self) -> int:
        """Return the number of entries produced."""
        return self.parsed_entries

    def rejected_entries_count(self) -> int:
        """Return the number of blocks dropped."""
        return self.rejected_entries

    def parse_structured(self, lines: list[str]) -> ParseOutcome:
        """Parse a boxed block: header, body fields, optional footer.

        Returns:
            tuple of (entry, None) on success or (None, rejection_reason)
        """
        header = header_pattern().search(lines[0])
        if not header:
            return None, "Header did not match expected format"
        level, message = header.groups()

        if not self.filters.accepts_message(message):
            return None, "Message filter did not match"

        key_values: dict[str, Value] = {}
        for line in lines[1:-1]:
            matched = field_pattern().search(line)
            if not matched:
                continue
            name, raw_value = matched.groups()
            field_type = self.schema.get(name)
            if field_type is None:
                continue
            value = extract_value(field_type, raw_value)
            if value is None:
                return None, f"Field '{name}' is not a valid {field_type.value}: {raw_value.strip()!r}"
            key_values[name] = value

        missing = [name for name in self.schema if name not in key_values]
        if missing:
            return None, f"Missing schema fields: {', '.join(missing)}"

        module = source_file = source_line = None
        footer = footer_pattern().search(lines[-1])
        if footer:
            module, source_file, line_number = footer.groups()
            if not self.filters.accepts_module(module):
                return None, "Module filter did not match"
            source_line = int(line_number)

        return LogEntry(
            level=level,
            message=message,
            key_values=KeySet.from_mapping(key_values),
            module=module,
            source_file=source_file,
            source_line=source_line,
            structured=True,
        ), None

    def parse_single_line(self, line: str) -> ParseOutcome:
        """Parse a `[Level: message]` line.

        Returns:
            tuple of (entry, None) on success or (None, rejection_reason)
        """
        matched = single_line_pattern().match(line)
        if not matched:
            return None, "Line did not match single-line format"
        level, message = matched.groups()
        if not self.filters.accepts_message(message):
            return None, "Message filter did not match"
        return LogEntry(level=level, message=message), None

    def parse_block(self, lines: list[str]) -> LogEntry | None:
        """Dispatch one block to the parser for its layout and record the outcome."""
        if not lines:
            return None
        first_line = lines[0]
        if first_line.startswith(HEADER_GLYPH):
            entry, reason = self.parse_structured(lines)
        elif single_line_start_pattern().match(first_line):
            entry, reason = self.parse_single_line(first_line)
        else:
            entry, reason = None, "Block does not start with a known entry layout"

        if entry is None:
            self.rejected_entries += 1
            logger.debug("Skipping block starting '%s': %s", first_line, reason)
            return None
        self.parsed_entries += 1
        return entry

    def iter_entries(self, lines: Iterable[str]) -> Iterator[LogEntry]:
        """Yield entries from a line sequence, in input order."""
        segmenter = EntrySegmenter()
        for line in lines:
            block = segmenter.push(line.rstrip("\r\n"))
            if block is not None:
                entry = self.parse_block(block)
                if entry is not None:
                    yield entry
        block = segmenter.finish()
        if block is not None:
            entry = self.parse_block(block)
            if entry is not None:
                yield entry

    def parse_lines(self, lines: Iterable[str]) -> list[LogEntry]:
        """Parse a finite line sequence into entries."""
        return list(self.iter_entries(lines))

    def parse_file(self, path: Path | str) -> list[LogEntry]:
        """Parse a UTF-8 log file.

        Raises:
            OSError: If the file cannot be read.
        """
        with open(path, "r", encoding="utf-8") as f:
            entries = self.parse_lines(f)
        logger.info("Parsed %d entries from %s", len(entries), path)
        return entries

    async def iter_file_entries(self, path: Path | str) -> AsyncGenerator[LogEntry, None]:
        """Async generator that reads a log file and yields LogEntry objects.

        Uses aiofiles for non-blocking I/O; segmentation is identical to iter_entries.

        Raises:
            OSError: If the file cannot be read.
        """
        segmenter = EntrySegmenter()
        async with aiofiles.open(path, "r", encoding="utf-8") as file:
            async for line in file:
                block = segmenter.push(line.rstrip("\r\n"))
                if block is not None:
                    entry = self.parse_block(block)
                    if entry is not None:
                        yield entry
        block = segmenter.finish()
        if block is not None:
            entry = self.parse_block(block)
            if entry is not None:
                yield entry
