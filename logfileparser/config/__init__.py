"""Configuration module for the LogFileParser API."""

from logfileparser.config.settings import (
    APISettings,
    LogParserSettings,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "APISettings",
    "LogParserSettings",
]
