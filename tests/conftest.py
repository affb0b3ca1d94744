"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A recording mail transport test double
- Settings isolated from the developer's environment and .env file
"""

from collections.abc import Iterator
from pathlib import Path

import pytest

from src.config.settings import get_settings
from tests.doubles import RecordingTransport

SETTINGS_ENV_VARS = (
    "MAIL_TRANSPORT",
    "SMTP_HOST",
    "SMTP_PORT",
    "SMTP_USE_SSL",
    "SENDER_EMAIL",
    "SENDER_PASSWORD",
    "SENDER_NAME",
    "LOG_LEVEL",
)


@pytest.fixture
def transport() -> RecordingTransport:
    """Transport that accepts every message."""
    return RecordingTransport()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[pytest.MonkeyPatch]:
    """Clear settings env vars and run from a directory without a .env file."""
    monkeypatch.chdir(tmp_path)
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def console_settings(clean_env: pytest.MonkeyPatch) -> None:
    """Configure the app for the console transport with a known sender."""
    clean_env.setenv("MAIL_TRANSPORT", "console")
    clean_env.setenv("SENDER_EMAIL", "noreply@cutline.test")
    get_settings.cache_clear()
