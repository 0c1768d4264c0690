"""
Tests for configuration loading and validation.
"""

from pathlib import Path

import pytest

from beacon.config import load_config


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_valid_config(self, tmp_path: Path) -> None:
        """Test loading a valid configuration file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
notifications:
  - name: "ops"
    type: "slack"
    config:
      webhookURL: "https://hooks.slack.com/services/T000/B000/XXXX"
      channel: "#ops"
      username: "beacon"

settings_file: "/tmp/beacon/settings.json"

logging:
  level: "DEBUG"
""")

        config = load_config(config_file)

        assert len(config.notifications) == 1
        assert config.notifications[0].name == "ops"
        assert config.notifications[0].type == "slack"
        assert config.notifications[0].config["channel"] == "#ops"
        assert config.settings_file == "/tmp/beacon/settings.json"
        assert config.logging.level == "DEBUG"
        assert config.logging.file is None

    def test_defaults(self, tmp_path: Path) -> None:
        """Test default values for optional sections."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
notifications:
  - name: "ops"
    type: "slack"
    config: {}
""")

        config = load_config(config_file)

        assert config.settings_file == "/var/lib/beacon/settings.json"
        assert config.logging.level == "INFO"

    def test_load_missing_file(self) -> None:
        """Test that loading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that invalid YAML raises an error."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("invalid: yaml: content: [")

        with pytest.raises(Exception):  # yaml.YAMLError
            load_config(config_file)

    def test_load_no_notifications(self, tmp_path: Path) -> None:
        """Test that config with no notifications is invalid."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("notifications: []\n")

        with pytest.raises(ValueError, match="validation error"):
            load_config(config_file)

    def test_get_notification(self, tmp_path: Path) -> None:
        """Test looking up a notification by name."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
notifications:
  - name: "ops"
    type: "slack"
    config: {}
  - name: "dev"
    type: "slack"
    config: {}
""")

        config = load_config(config_file)

        assert config.get_notification("dev").name == "dev"
        assert config.get_notification("missing") is None
