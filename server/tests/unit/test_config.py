"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from resort_desk.core.config import Settings


def test_debug_follows_environment():
    """Only the development environment runs in debug mode."""
    assert Settings(_env_file=None, environment="development").debug is True
    assert Settings(_env_file=None, environment="Staging").debug is False
    assert Settings(_env_file=None, environment="PRODUCTION").debug is False


def test_invalid_environment_rejected():
    """Unknown environments fail validation."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, environment="qa")


def test_cors_origins_from_comma_separated_string():
    """CORS origins accept the comma-separated form used in .env files."""
    settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")

    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_log_level_normalized():
    """Log levels are upper-cased."""
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"
