"""
Slack notification provider for Beacon.
"""

from typing import Any, ClassVar

import requests

from beacon.core import (
    UP,
    ConfigurationError,
    Heartbeat,
    Monitor,
    NotificationProvider,
)
from beacon.logging_config import get_logger
from beacon.registry import register_provider
from beacon.timezones import format_local_time, resolve_timezone

logger = get_logger(__name__)

DEFAULT_ICON_EMOJI = ":robot_face:"

# Checked in this order; the first missing field is reported
REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("webhookURL", "Slack webhook URL is required"),
    ("channel", "Slack channel is required"),
    ("username", "Slack username is required"),
)


def validate_config(notification: dict[str, Any]) -> None:
    """
    Validate a Slack notification configuration.

    Missing or empty required fields raise on the first one found. On
    success an absent icon is filled in with DEFAULT_ICON_EMOJI.

    Args:
        notification: Notification configuration, modified in place

    Raises:
        ConfigurationError: If webhookURL, channel or username is missing
    """
    for field, message in REQUIRED_FIELDS:
        if not notification.get(field):
            raise ConfigurationError(message)

    if not notification.get("iconEmoji"):
        notification["iconEmoji"] = DEFAULT_ICON_EMOJI


@register_provider("slack")
class SlackProvider(NotificationProvider):
    """
    Sends notifications to a Slack incoming webhook.

    Config:
        webhookURL: Slack incoming webhook URL
        channel: Channel to post to
        username: Bot username shown in Slack
        iconEmoji: Optional bot icon (default: DEFAULT_ICON_EMOJI)
        channelNotify: Optional, mention @channel when true
        button: Deprecated, moved into the primaryBaseURL setting
    """

    OK_MSG: ClassVar[str] = "Sent Successfully."
    TITLE: ClassVar[str] = "Beacon Alert"
    BUTTON_TEXT: ClassVar[str] = "Visit Beacon"
    COLOR_UP: ClassVar[str] = "#2eb886"
    COLOR_DOWN: ClassVar[str] = "#e01e5a"
    TIMEOUT_SECONDS: ClassVar[int] = 10

    def send(
        self,
        notification: dict[str, Any],
        msg: str,
        monitor: Monitor | None = None,
        heartbeat: Heartbeat | None = None
    ) -> str:
        """Send notification to Slack."""
        validate_config(notification)

        if notification.get("channelNotify"):
            msg += " <!channel>"

        payload: dict[str, Any] = {
            "text": msg,
            "channel": notification["channel"],
            "username": notification["username"],
            "icon_emoji": notification["iconEmoji"],
        }

        if heartbeat is not None:
            payload["text"] = f"{self.TITLE}\n{msg}"
            payload["attachments"] = [self._build_attachment(msg, monitor, heartbeat)]

            if notification.get("button"):
                self._deprecate_url(notification["button"])

            base_url = self._get_setting("primaryBaseURL")
            if base_url and monitor is not None:
                for attachment in payload["attachments"]:
                    attachment["blocks"].append(self._build_button(base_url, monitor))

        try:
            response = requests.post(
                notification["webhookURL"],
                json=payload,
                timeout=self.TIMEOUT_SECONDS
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Failed to send Slack notification to %s", notification["channel"], exc_info=True)
            self.throw_general_http_error(e)

        logger.info("Slack notification sent successfully to %s", notification["channel"])
        return self.OK_MSG

    def _build_attachment(
        self,
        msg: str,
        monitor: Monitor | None,
        heartbeat: Heartbeat
    ) -> dict[str, Any]:
        """Build the coloured attachment describing a heartbeat."""
        fields = [
            {"type": "mrkdwn", "text": f"*Message*\n{msg}"},
            {"type": "mrkdwn", "text": f"*Time (UTC)*\n{heartbeat.time}"},
        ]

        if monitor is not None:
            fields.append({"type": "mrkdwn", "text": f"*Monitor*\n{monitor.name}"})
            if monitor.url:
                fields.append({"type": "mrkdwn", "text": f"*URL*\n{monitor.url}"})

        tz = heartbeat.timezone or (monitor.timezone if monitor is not None else None)
        if tz:
            local = format_local_time(heartbeat.time, tz)
            if local is not None:
                fields.append({
                    "type": "mrkdwn",
                    "text": f"*Local Time*\n{local.weekday}, {local.date} {local.clock_time}",
                })

            info = resolve_timezone(tz)
            if info.local_timezone_name:
                places = ", ".join(p for p in (info.country, info.continent) if p)
                label = f"{info.local_timezone_name} ({places})" if places else info.local_timezone_name
                fields.append({"type": "mrkdwn", "text": f"*Timezone*\n{label}"})

        return {
            "color": self.COLOR_UP if heartbeat.status == UP else self.COLOR_DOWN,
            "blocks": [
                {
                    "type": "header",
                    "text": {"type": "plain_text", "text": self.TITLE},
                },
                {
                    "type": "section",
                    "fields": fields,
                },
            ],
        }

    def _build_button(self, base_url: str, monitor: Monitor) -> dict[str, Any]:
        """Build an actions block linking to the monitor's dashboard page."""
        return {
            "type": "actions",
            "elements": [
                {
                    "type": "button",
                    "text": {"type": "plain_text", "text": self.BUTTON_TEXT},
                    "value": "Beacon",
                    "url": f"{base_url.rstrip('/')}/dashboard/{monitor.id}",
                },
            ],
        }

    def _get_setting(self, key: str) -> Any:
        if self.settings is None:
            return None
        return self.settings.get_setting(key)

    def _deprecate_url(self, url: str) -> None:
        """Move a per-notification button URL into the primaryBaseURL setting."""
        if self.settings is None:
            logger.warning("No settings store, ignoring deprecated button URL %s", url)
            return

        if not self.settings.get_setting("primaryBaseURL"):
            logger.info("Moving deprecated button URL to primary base URL: %s", url)
            self.settings.set_settings("general", {"primaryBaseURL": url})
        else:
            logger.debug("Primary base URL already set, not moving %s", url)


# Export for dynamic importing
__all__ = ["SlackProvider"]
