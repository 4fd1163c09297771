"""Log ingestion service - holds the entries parsed from the configured log file.

This service orchestrates:
- Loading a log file through LogParser (async, via aiofiles)
- Keeping the parsed entries in memory for the API layer
- Parse statistics
"""
from __future__ import annotations
import logging
from pathlib import Path

from logfileparser.services.logparser.logparser import LogParser
from logfileparser.services.logparser.schemas import LogEntry


logger = logging.getLogger(__name__)


class LogIngestionService:
    """Loads a log file once and serves the parsed entries.

    Example:
        service = LogIngestionService(parser=LogParser(schema={"id": int}))
        await service.load(Path("structured.log"))
        service.entries
    """

    def __init__(self, parser: LogParser) -> None:
        """Initialize the log ingestion service.

        Args:
            parser: LogParser configured with the schema and filters to apply.
        """
        self.parser: LogParser = parser
        self.entries: list[LogEntry] = []
        self.source: Path | None = None

    @property
    def parsed_entries(self) -> int:
        return self.parser.parsed_entries_count()

    @property
    def rejected_entries(self) -> int:
        return self.parser.rejected_entries_count()

    @property
    def is_loaded(self) -> bool:
        return self.source is not None

    async def load(self, path: Path) -> int:
        """Parse path and replace the held entries.

        Returns:
            Number of entries loaded.

        Raises:
            OSError: If the file cannot be read.
        """
        logger.info("Loading log file %s", path)
        entries = [entry async for entry in self.parser.iter_file_entries(path)]
        self.entries = entries
        self.source = path
        logger.info(
            "Loaded %d entries from %s (%d blocks rejected)",
            len(entries),
            path,
            self.rejected_entries,
        )
        return len(entries)

    def clear(self) -> None:
        self.entries = []
        self.source = None
