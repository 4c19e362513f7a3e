"""Application configuration using Pydantic settings."""

from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="HouseholdChores", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Environment"
    )

    # Scheduling
    timezone: str = Field(
        default="UTC", description="IANA time zone used to decide the current day"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Root log level (DEBUG when debug is set)"
    )

    # OpenTelemetry
    otel_enabled: bool = Field(default=True, description="Enable OpenTelemetry")
    otel_service_name: str = Field(default="household-chores", description="Service name for traces")
    otel_exporter_otlp_endpoint: str = Field(
        default="http://localhost:4318", description="OTLP exporter endpoint"
    )
    otel_exporter_otlp_headers: str = Field(
        default="", description="OTLP headers (comma-separated key=value pairs)"
    )
    otel_resource_attributes: str = Field(
        default="", description="Resource attributes (comma-separated key=value pairs)"
    )
    otel_traces_exporter: Literal["otlp", "console", "none"] = Field(
        default="otlp", description="Traces exporter"
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate that the time zone name is known."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown time zone: {v}") from exc
        return v

    @property
    def tzinfo(self) -> ZoneInfo:
        """Time zone object for the configured zone."""
        return ZoneInfo(self.timezone)

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug flag."""
        return "DEBUG" if self.debug else self.log_level

    def get_otlp_headers(self) -> dict[str, str]:
        """Parse OTLP headers from comma-separated string."""
        return _parse_pairs(self.otel_exporter_otlp_headers)

    def get_resource_attributes(self) -> dict[str, str]:
        """Parse resource attributes from comma-separated string."""
        return _parse_pairs(self.otel_resource_attributes)


def _parse_pairs(raw: str) -> dict[str, str]:
    if not raw:
        return {}
    return dict(
        (key.strip(), value.strip())
        for key, value in (item.split("=", 1) for item in raw.split(",") if "=" in item)
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
