"""Tests for configuration management."""

from pathlib import Path

import pytest

from logfileparser.config import LogParserSettings, Settings, get_settings
from logfileparser.services.logparser.schemas import FieldType


def test_default_settings():
    """Test default settings are loaded correctly."""
    settings = Settings()

    assert settings.name == "LogFileParser API"
    assert settings.version == "0.1.0"
    assert settings.environment == "development"
    assert settings.debug is False


def test_environment_override(monkeypatch):
    """Test that environment variables override defaults."""
    monkeypatch.setenv("APP_NAME", "Custom Name")
    monkeypatch.setenv("APP_DEBUG", "true")
    monkeypatch.setenv("APP_ENVIRONMENT", "production")

    settings = Settings()

    assert settings.name == "Custom Name"
    assert settings.debug is True
    assert settings.environment == "production"


def test_logparser_defaults():
    """Test log parser configuration defaults."""
    settings = Settings()

    assert settings.logparser.log_path is None
    assert settings.logparser.field_types == {}
    assert settings.logparser.message_filter is None
    assert settings.logparser.module_filter is None
    assert dict(settings.logparser.schema_fields) == {}


def test_logparser_env(monkeypatch):
    """Test log parser settings read from LOGPARSER_ variables."""
    monkeypatch.setenv("LOGPARSER_LOG_PATH", "/tmp/app.log")
    monkeypatch.setenv("LOGPARSER_FIELD_TYPES", '{"id": "int", "ok": "bool"}')
    monkeypatch.setenv("LOGPARSER_MODULE_FILTER", "Ledger")
    monkeypatch.setenv("LOGPARSER_OPENING_MARKER", "start")

    settings = get_settings()

    assert settings.logparser.log_path == Path("/tmp/app.log")
    assert dict(settings.logparser.schema_fields) == {
        "id": FieldType.INTEGER,
        "ok": FieldType.BOOLEAN,
    }
    assert settings.logparser.module_filter == "Ledger"
    assert settings.logparser.opening_marker == "start"
    assert settings.logparser.closing_marker is None


def test_logparser_invalid_field_type():
    """Test that unsupported field types fail validation."""
    with pytest.raises(ValueError, match="Invalid type for field 'id'"):
        LogParserSettings(field_types={"id": "complex"})


def test_api_settings():
    """Test API server configuration."""
    settings = Settings()

    assert settings.api.host == "0.0.0.0"
    assert settings.api.port == 8000
    assert settings.api.log_level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def test_environment_properties():
    """Test environment helper properties."""
    dev_settings = Settings(environment="development")
    assert dev_settings.is_development is True
    assert dev_settings.is_production is False

    prod_settings = Settings(environment="production")
    assert prod_settings.is_production is True
    assert prod_settings.is_development is False


def test_get_settings_cached():
    """Test that get_settings returns the same instance."""
    assert get_settings() is get_settings()
