from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logfileparser.services.logparser.schemas import FieldType, resolve_schema, Schema


class LogParserSettings(BaseSettings):
    """Log parser configuration settings."""

    model_config = SettingsConfigDict(env_prefix="LOGPARSER_", env_file=".env", extra="ignore")

    log_path: Path | None = Field(
        default=None,
        description="Log file to parse on startup. Nothing is loaded when unset.",
    )
    field_types: dict[str, str] = Field(
        default_factory=dict,
        description='Typed body fields as JSON, e.g. {"id": "int", "ok": "bool"}',
    )
    message_filter: str | None = Field(
        default=None,
        description="Only keep entries whose message contains this text",
    )
    module_filter: str | None = Field(
        default=None,
        description="Only keep structured entries whose footer module contains this text",
    )
    opening_marker: str | None = Field(
        default=None,
        description="Message text that opens a paired operation",
    )
    closing_marker: str | None = Field(
        default=None,
        description="Message text that closes a paired operation",
    )

    @model_validator(mode="after")
    def validate_field_types(self) -> "LogParserSettings":
        """Ensure every configured field type is supported."""
        for name, type_name in self.field_types.items():
            try:
                FieldType.resolve(type_name)
            except ValueError as e:
                raise ValueError(f"Invalid type for field '{name}': {e}") from None
        return self

    @property
    def schema_fields(self) -> Schema:
        """The configured field types resolved into a parser schema."""
        return resolve_schema(self.field_types)


class APISettings(BaseSettings):
    """API server configuration settings."""

    model_config = SettingsConfigDict(env_prefix="API_", env_file=".env", extra="ignore")

    host: str = Field(default="0.0.0.0", description="API server host")
    port: int = Field(default=8000, description="API server port")
    workers: int = Field(default=1, description="Number of worker processes")
    reload: bool = Field(default=False, description="Enable auto-reload on code changes")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )


class Settings(BaseSettings):
    """Main application settings.

    Configuration precedence (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values

    Example .env file:
        APP_DEBUG=true
        LOGPARSER_LOG_PATH=/var/log/app/structured.log
        LOGPARSER_FIELD_TYPES={"id": "int"}
        LOGPARSER_OPENING_MARKER=start
        LOGPARSER_CLOSING_MARKER=end
    """

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    name: str = Field(default="LogFileParser API", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    description: str = Field(
        default="Typed parsing and pairing checks for structured log files",
        description="Application description",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )

    api: APISettings = Field(default_factory=APISettings)
    logparser: LogParserSettings = Field(default_factory=LogParserSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Use this function throughout the application to access settings.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
