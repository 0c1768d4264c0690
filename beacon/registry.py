"""
Provider registry and factory for Beacon.

Maps provider type names (as used in configuration files) to
NotificationProvider implementations.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from beacon.core import NotificationProvider

if TYPE_CHECKING:
    from beacon.settings import SettingsStore


class ProviderRegistry:
    """Central registry of notification provider classes."""

    def __init__(self) -> None:
        self._providers: dict[str, type[NotificationProvider]] = {}

    def register_provider(self, type_name: str, cls: type[NotificationProvider]) -> None:
        """Register a provider implementation."""
        self._providers[type_name] = cls

    def get_provider(self, type_name: str) -> type[NotificationProvider]:
        """Get a provider class by type name."""
        if type_name not in self._providers:
            raise ValueError(f"Unknown notification provider type: {type_name}")
        return self._providers[type_name]

    def list_providers(self) -> list[str]:
        """List all registered provider type names."""
        return list(self._providers.keys())


# Global registry instance
_registry = ProviderRegistry()


def create_provider(
    type_name: str,
    settings: "SettingsStore | None" = None
) -> NotificationProvider:
    """Create a provider instance by type name."""
    cls = _registry.get_provider(type_name)
    return cls(settings)


def register_provider(
    type_name: str
) -> Callable[[type[NotificationProvider]], type[NotificationProvider]]:
    """Decorator to register a provider class."""
    def decorator(cls: type[NotificationProvider]) -> type[NotificationProvider]:
        cls.name = type_name
        _registry.register_provider(type_name, cls)
        return cls
    return decorator


def get_registry() -> ProviderRegistry:
    """Get the global provider registry."""
    return _registry
