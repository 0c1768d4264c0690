"""
Configuration loading and validation for Beacon.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    file: str | None = None


class NotificationConfig(BaseModel):
    """A named notification destination."""
    name: str = Field(..., min_length=1)
    type: str  # "slack"
    config: dict[str, Any]  # Provider-specific configuration, validated by the provider


class Config(BaseModel):
    """Main configuration for Beacon."""
    notifications: list[NotificationConfig] = Field(..., min_length=1)
    settings_file: str = "/var/lib/beacon/settings.json"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def get_notification(self, name: str) -> NotificationConfig | None:
        """Return the notification named name, or None."""
        for notification in self.notifications:
            if notification.name == name:
                return notification
        return None


def load_config(config_path: str | Path) -> Config:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
        yaml.YAMLError: If YAML parsing fails
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with path.open('r', encoding='utf-8') as f:
        raw_config: dict[str, Any] = yaml.safe_load(f)

    try:
        return Config.model_validate(raw_config)
    except ValidationError as e:
        raise ValueError(f"Configuration validation error: {e}") from e
