"""
Beacon notification providers.

Importing this package registers every built-in provider with the registry.
"""

from beacon.providers.slack import SlackProvider

__all__ = ["SlackProvider"]
