"""
Pytest configuration and fixtures for Beacon tests.
"""

from pathlib import Path
from typing import Any

import pytest

from beacon.settings import SettingsStore


@pytest.fixture
def slack_config() -> dict[str, Any]:
    """A complete Slack notification configuration."""
    return {
        "webhookURL": "https://hooks.slack.com/services/T000/B000/XXXX",
        "channel": "#alerts",
        "username": "beacon",
    }


@pytest.fixture
def settings(tmp_path: Path) -> SettingsStore:
    """A settings store backed by a temporary file."""
    return SettingsStore(tmp_path / "settings.json")
