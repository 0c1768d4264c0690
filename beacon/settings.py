"""
Persistent application settings shared by notification providers.
"""

import json
from pathlib import Path
from typing import Any

from beacon.logging_config import get_logger

logger = get_logger(__name__)


class SettingsStore:
    """
    Key/value settings persisted to a JSON file.

    Settings are stored with the group they were written under:
    {
        "settings": {
            "primaryBaseURL": {
                "value": "https://status.example.com",
                "type": "general"
            }
        }
    }
    """

    def __init__(self, settings_file: str | Path | None = None) -> None:
        """
        Initialize the settings store.

        Args:
            settings_file: Path to settings file. If None, uses ~/.beacon/settings.json
        """
        if settings_file is None:
            settings_file = Path.home() / '.beacon' / 'settings.json'

        self.settings_file = Path(settings_file)
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)

        self._settings: dict[str, dict[str, Any]] = {}
        self._load()

    def _load(self) -> None:
        """Load settings from disk."""
        if not self.settings_file.exists():
            return

        try:
            with self.settings_file.open('r', encoding='utf-8') as f:
                data: dict[str, Any] = json.load(f)

            for key, entry in data.get('settings', {}).items():
                self._settings[key] = {
                    'value': entry['value'],
                    'type': entry.get('type', 'general'),
                }
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            # If the settings file is corrupted, start fresh
            logger.warning("Could not load settings file: %s", e)
            self._settings = {}

    def _save(self) -> None:
        """Save settings to disk."""
        with self.settings_file.open('w', encoding='utf-8') as f:
            json.dump({'settings': self._settings}, f, indent=2)

    def get_setting(self, key: str) -> Any:
        """Return the value stored under key, or None if unset."""
        entry = self._settings.get(key)
        if entry is None:
            return None
        return entry['value']

    def set_setting(self, key: str, value: Any, group: str = "general") -> None:
        """Store a single setting and write it to disk."""
        self._settings[key] = {'value': value, 'type': group}
        self._save()

    def set_settings(self, group: str, values: dict[str, Any]) -> None:
        """
        Store several settings under one group.

        Args:
            group: Settings group name, e.g. "general"
            values: Mapping of setting keys to values
        """
        for key, value in values.items():
            self._settings[key] = {'value': value, 'type': group}
        self._save()
        logger.debug("Saved %d setting(s) in group '%s'", len(values), group)

    def get_settings(self, group: str) -> dict[str, Any]:
        """Return every setting stored under group."""
        return {
            key: entry['value']
            for key, entry in self._settings.items()
            if entry['type'] == group
        }
