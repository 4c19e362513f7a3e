"""Unit tests for configuration."""
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from chores.config import Settings


def test_settings_defaults():
    """Test default settings values."""
    settings = Settings(_env_file=None)

    assert settings.app_name == "HouseholdChores"
    assert settings.environment == "development"
    assert settings.timezone == "UTC"
    assert settings.effective_log_level == "INFO"
    assert settings.otel_traces_exporter == "otlp"


def test_settings_debug_forces_debug_logging():
    """Test the debug flag overrides the log level."""
    settings = Settings(_env_file=None, debug=True, log_level="WARNING")
    assert settings.effective_log_level == "DEBUG"


def test_settings_timezone():
    """Test time zone configuration."""
    settings = Settings(_env_file=None, timezone="Europe/Berlin")
    assert settings.tzinfo == ZoneInfo("Europe/Berlin")

    with pytest.raises(ValidationError):
        Settings(_env_file=None, timezone="Mars/Olympus_Mons")


def test_settings_from_environment(monkeypatch):
    """Test settings are read from environment variables."""
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("OTEL_TRACES_EXPORTER", "console")

    settings = Settings(_env_file=None)

    assert settings.environment == "production"
    assert settings.otel_traces_exporter == "console"


def test_settings_parse_key_value_lists():
    """Test OTLP header and resource attribute parsing."""
    settings = Settings(
        _env_file=None,
        otel_exporter_otlp_headers="Authorization=Bearer abc, x-team=home",
        otel_resource_attributes="service.version=0.1.0,bogus",
    )

    assert settings.get_otlp_headers() == {"Authorization": "Bearer abc", "x-team": "home"}
    assert settings.get_resource_attributes() == {"service.version": "0.1.0"}
    assert Settings(_env_file=None).get_otlp_headers() == {}
