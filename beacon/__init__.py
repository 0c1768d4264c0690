"""
Beacon - Slack notification delivery for uptime monitors.

This package validates Slack notification settings, renders heartbeat
timestamps in the monitor's local timezone and posts alerts to a
Slack-compatible incoming webhook.
"""

__version__ = "0.1.0"
