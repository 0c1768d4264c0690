"""
Core interfaces and data structures for Beacon.

This module defines the notification provider contract together with the
monitor and heartbeat records handed to providers by the monitor core.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, NoReturn

import requests

if TYPE_CHECKING:
    from beacon.settings import SettingsStore

# Heartbeat status codes
DOWN = 0
UP = 1
PENDING = 2
MAINTENANCE = 3


class BeaconError(Exception):
    """Base class for all Beacon errors."""


class ConfigurationError(BeaconError):
    """A notification configuration is missing a required field."""


class NotificationError(BeaconError):
    """A notification could not be delivered."""


@dataclass
class Monitor:
    """The monitored service an alert is about."""
    id: int
    name: str
    url: str | None = None
    timezone: str | None = None  # IANA identifier, e.g. "Europe/Amsterdam"


@dataclass
class Heartbeat:
    """A single check result reported by the monitor core."""
    status: int  # DOWN, UP, PENDING or MAINTENANCE
    time: str  # UTC instant, ISO-8601
    msg: str = ""
    timezone: str | None = None


class NotificationProvider(ABC):
    """
    Base class for all notification providers.

    Providers deliver alert messages to external destinations.
    """

    name: ClassVar[str] = ""

    def __init__(self, settings: "SettingsStore | None" = None):
        """
        Initialize the provider.

        Args:
            settings: Application settings store, used for values shared
                across notifications such as the primary base URL
        """
        self.settings = settings

    @abstractmethod
    def send(
        self,
        notification: dict[str, Any],
        msg: str,
        monitor: Monitor | None = None,
        heartbeat: Heartbeat | None = None
    ) -> str:
        """
        Send a notification.

        Args:
            notification: Provider-specific notification configuration
            msg: Message text to deliver
            monitor: Monitor the message is about, if any
            heartbeat: Heartbeat that caused the message, if any

        Returns:
            A human-readable success message

        Raises:
            ConfigurationError: If the notification configuration is incomplete
            NotificationError: If delivery failed
        """
        raise NotImplementedError

    def throw_general_http_error(self, error: requests.RequestException) -> NoReturn:
        """
        Re-raise an HTTP client error as a NotificationError.

        The response body, when there is one, is appended to the message so
        the user sees what the remote service complained about.
        """
        msg = f"Error: {error} "
        response = error.response
        if response is not None and response.text:
            msg += response.text
        raise NotificationError(msg.strip()) from error
