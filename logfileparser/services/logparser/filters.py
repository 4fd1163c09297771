"""Substring filters applied while parsing."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FilterPolicy:
    """Message and module substring filters. An unset filter accepts everything."""

    message_filter: str | None = None
    module_filter: str | None = None

    def accepts_message(self, message: str) -> bool:
        """True if the message filter is unset or occurs in message."""
        return self.message_filter is None or self.message_filter in message

    def accepts_module(self, module: str) -> bool:
        """True if the module filter is unset or occurs in module."""
        return self.module_filter is None or self.module_filter in module
