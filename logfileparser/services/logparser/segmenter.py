"""Line-to-entry segmentation."""
from __future__ import annotations

from .constants import HEADER_GLYPH, single_line_start_pattern


def is_entry_start(line: str) -> bool:
    """True if the line opens a structured header or a single-line entry."""
    return line.startswith(HEADER_GLYPH) or single_line_start_pattern().match(line) is not None


class EntrySegmenter:
    """Accumulates lines until the start of the next entry closes the current one.

    An entry has no terminator of its own, so a block is only complete once the
    next entry starts or the input ends. One instance handles one input stream.

    Example:
        segmenter = EntrySegmenter()
        for line in lines:
            if (block := segmenter.push(line)) is not None:
                handle(block)
        if (block := segmenter.finish()) is not None:
            handle(block)
    """

    def __init__(self) -> None:
        self._buffer: list[str] = []

    @property
    def pending(self) -> int:
        """Number of lines buffered for the entry still open."""
        return len(self._buffer)

    def push(self, line: str) -> list[str] | None:
        """Add a line, returning the previous block if this line starts a new entry."""
        block = None
        if self._buffer and is_entry_start(line):
            block = self._buffer
            self._buffer = []
        self._buffer.append(line)
        return block

    def finish(self) -> list[str] | None:
        """Return the trailing block once the input is exhausted."""
        if not self._buffer:
            return None
        block = self._buffer
        self._buffer = []
        return block
