"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Values come from environment variables, an optional .env file and the
defaults below.
"""

from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from telemetry_hub.shared import EnumEnvironment, EnumLogLevel
from telemetry_hub.shared.consts import (
    DEFAULT_HIGH_TEMPERATURE_THRESHOLD,
    DEFAULT_HISTORY_CAPACITY,
    DEFAULT_LOW_TEMPERATURE_THRESHOLD,
)


class ServerSettings(BaseSettings):
    """HTTP server and build metadata settings."""

    title: str = Field(default="Telemetry Hub", description="API title")
    description: str = Field(
        default="Latest readings, bounded history and threshold alerts "
        "for a remote sensing device",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("SERVER_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("SERVER_BUILD_TIME", "BUILD_TIME"),
    )
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVER_", case_sensitive=False, extra="ignore"
    )


class TelemetrySettings(BaseSettings):
    """Retention and alert rule settings."""

    history_capacity: int = Field(
        default=DEFAULT_HISTORY_CAPACITY,
        gt=0,
        description="Maximum number of retained history samples",
    )
    high_temperature_threshold: float = Field(
        default=DEFAULT_HIGH_TEMPERATURE_THRESHOLD,
        description="Temperatures strictly above this raise a warning",
    )
    low_temperature_threshold: float = Field(
        default=DEFAULT_LOW_TEMPERATURE_THRESHOLD,
        description="Temperatures strictly below this raise an info alert",
    )
    label_timezone: Optional[str] = Field(
        default=None,
        description="IANA timezone for history labels (server local if unset)",
    )

    model_config = SettingsConfigDict(
        env_prefix="TELEMETRY_", case_sensitive=False, extra="ignore"
    )

    @field_validator("label_timezone")
    @classmethod
    def _check_timezone(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @model_validator(mode="after")
    def _check_thresholds(self) -> "TelemetrySettings":
        if self.low_temperature_threshold > self.high_temperature_threshold:
            raise ValueError(
                "low_temperature_threshold must not exceed high_temperature_threshold"
            )
        return self


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Extra log file path (console is always on)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    server: ServerSettings = Field(default_factory=ServerSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Patched in tests to run the app with different settings.
    """
    return AppSettings()
