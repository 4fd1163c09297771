import os
from pathlib import Path

import pytest

STRUCTURED_LOG_PATH = Path(__file__).parent / "structured_log.txt"


@pytest.fixture(scope="session", autouse=True)
def baseline_settings_env():
    """Provide baseline env vars so tests are not affected by local .env.

    Pydantic-settings precedence: init args > env vars > .env > defaults.
    Setting these ensures stable defaults regardless of any .env present.
    """
    os.environ.update({
        # App
        "APP_NAME": "LogFileParser API",
        "APP_VERSION": "0.1.0",
        "APP_DEBUG": "false",
        "APP_ENVIRONMENT": "development",
        # API
        "API_HOST": "0.0.0.0",
        "API_PORT": "8000",
        "API_WORKERS": "1",
        "API_RELOAD": "false",
        "API_LOG_LEVEL": "INFO",
        # Log parser
        "LOGPARSER_FIELD_TYPES": "{}",
    })
    for name in (
        "LOGPARSER_LOG_PATH",
        "LOGPARSER_MESSAGE_FILTER",
        "LOGPARSER_MODULE_FILTER",
        "LOGPARSER_OPENING_MARKER",
        "LOGPARSER_CLOSING_MARKER",
    ):
        os.environ.pop(name, None)


@pytest.fixture(autouse=True)
def refresh_settings_cache():
    """Clear settings cache so env changes take effect per test.

    Ensures tests using monkeypatch.setenv() get a fresh Settings instance.
    """
    from logfileparser.config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def structured_log_path() -> Path:
    """Path to the sample log mixing boxed and bracketed entries."""
    return STRUCTURED_LOG_PATH


@pytest.fixture
def structured_log_lines(structured_log_path: Path) -> list[str]:
    """Load the sample log as raw lines."""
    with open(structured_log_path, "r", encoding="utf-8") as f:
        return f.readlines()
