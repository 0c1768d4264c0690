"""
Beacon CLI - Command line interface for Beacon notifications.

Provides commands for:
- Configuration validation
- Sending notifications through a configured destination
- Inspecting how a timezone is rendered in alerts
- Reading and writing application settings
"""

import argparse
import sys
from datetime import datetime, timezone
from pathlib import Path

# Importing the providers package registers every provider
from beacon import providers  # noqa: F401
from beacon.config import Config, load_config
from beacon.core import DOWN, UP, BeaconError, Heartbeat, Monitor
from beacon.logging_config import get_logger, setup_logging_from_config
from beacon.registry import create_provider
from beacon.settings import SettingsStore
from beacon.timezones import format_clock_time, format_date, format_weekday, resolve_timezone

logger = get_logger(__name__)


def _load(args: argparse.Namespace) -> Config | None:
    """Load the config named on the command line, reporting errors on stderr."""
    config_path = Path(args.config)

    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        return None

    try:
        return load_config(config_path)
    except Exception as e:
        print(f"✗ Configuration invalid: {e}", file=sys.stderr)
        return None


def cmd_config_validate(args: argparse.Namespace) -> int:
    """Validate configuration file."""
    config = _load(args)
    if config is None:
        return 1

    print(f"✓ Configuration valid: {args.config}")
    print(f"  - {len(config.notifications)} notification(s) configured")
    for notification in config.notifications:
        print(f"    * {notification.name} ({notification.type})")
    print(f"  - Settings file: {config.settings_file}")
    return 0


def cmd_notify(args: argparse.Namespace) -> int:
    """Send a notification through a configured destination."""
    config = _load(args)
    if config is None:
        return 1

    try:
        setup_logging_from_config(config.logging)
    except OSError as e:
        print(f"Error: Cannot open log file: {e}", file=sys.stderr)
        return 1

    notification = config.get_notification(args.name)
    if notification is None:
        print(f"Error: Notification '{args.name}' not found", file=sys.stderr)
        print("\nAvailable notifications:", file=sys.stderr)
        for n in config.notifications:
            print(f"  - {n.name}", file=sys.stderr)
        return 1

    monitor = None
    if args.monitor_name:
        monitor = Monitor(
            id=args.monitor_id,
            name=args.monitor_name,
            url=args.monitor_url,
            timezone=args.timezone
        )

    heartbeat = Heartbeat(
        status=UP if args.status == "up" else DOWN,
        time=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        msg=args.message,
        timezone=args.timezone
    )

    try:
        settings = SettingsStore(config.settings_file)
        provider = create_provider(notification.type, settings)
        result = provider.send(dict(notification.config), args.message, monitor, heartbeat)
    except (BeaconError, ValueError, OSError) as e:
        logger.debug("Notification '%s' failed", notification.name, exc_info=True)
        print(f"✗ {notification.name}: {e}", file=sys.stderr)
        return 1

    print(f"✓ {notification.name}: {result}")
    return 0


def cmd_timezone(args: argparse.Namespace) -> int:
    """Show how a timezone is described and rendered in alerts."""
    at = args.at or datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    info = resolve_timezone(args.tz)

    print(f"Timezone:  {args.tz}")
    print(f"Continent: {info.continent or '-'}")
    print(f"Country:   {info.country or '-'}")
    print(f"Name:      {info.local_timezone_name or '-'}")
    print(f"\nAt {at}:")
    print(f"  Weekday: {format_weekday(at, args.tz) or '-'}")
    print(f"  Date:    {format_date(at, args.tz) or '-'}")
    print(f"  Time:    {format_clock_time(at, args.tz) or '-'}")
    return 0


def cmd_settings_get(args: argparse.Namespace) -> int:
    """Print a single setting."""
    config = _load(args)
    if config is None:
        return 1

    try:
        value = SettingsStore(config.settings_file).get_setting(args.key)
    except OSError as e:
        print(f"✗ Error reading settings: {e}", file=sys.stderr)
        return 1

    if value is None:
        print(f"Setting '{args.key}' is not set", file=sys.stderr)
        return 1

    print(value)
    return 0


def cmd_settings_set(args: argparse.Namespace) -> int:
    """Store a single setting."""
    config = _load(args)
    if config is None:
        return 1

    try:
        SettingsStore(config.settings_file).set_setting(args.key, args.value, args.group)
    except OSError as e:
        print(f"✗ Error writing settings: {e}", file=sys.stderr)
        return 1

    print(f"✓ {args.key} = {args.value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="beacon",
        description="Beacon - Slack notifications for uptime monitors"
    )
    parser.add_argument(
        "-c", "--config",
        default="config.yaml",
        help="Path to configuration file (default: config.yaml)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Config commands
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="subcommand")
    config_subparsers.add_parser("validate", help="Validate configuration file")

    # Notify command
    notify_parser = subparsers.add_parser("notify", help="Send a notification")
    notify_parser.add_argument("name", help="Name of the configured notification")
    notify_parser.add_argument("message", help="Notification message")
    notify_parser.add_argument(
        "-s", "--status",
        choices=["up", "down"],
        default="down",
        help="Heartbeat status (default: down)"
    )
    notify_parser.add_argument("--monitor-name", help="Name of the monitor the alert is about")
    notify_parser.add_argument("--monitor-id", type=int, default=0, help="Monitor id (default: 0)")
    notify_parser.add_argument("--monitor-url", help="URL of the monitored service")
    notify_parser.add_argument("-t", "--timezone", help="IANA timezone for local time display")

    # Timezone command
    tz_parser = subparsers.add_parser("timezone", help="Show timezone information")
    tz_parser.add_argument("tz", help="IANA timezone identifier, e.g. Europe/Amsterdam")
    tz_parser.add_argument("--at", help="UTC instant in ISO-8601 (default: now)")

    # Settings commands
    settings_parser = subparsers.add_parser("settings", help="Settings management")
    settings_subparsers = settings_parser.add_subparsers(dest="subcommand")

    get_parser = settings_subparsers.add_parser("get", help="Print a setting")
    get_parser.add_argument("key", help="Setting key")

    set_parser = settings_subparsers.add_parser("set", help="Store a setting")
    set_parser.add_argument("key", help="Setting key")
    set_parser.add_argument("value", help="Setting value")
    set_parser.add_argument("-g", "--group", default="general", help="Settings group (default: general)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "config":
        if args.subcommand == "validate":
            return cmd_config_validate(args)
        parser.print_help()
        return 0

    if args.command == "notify":
        return cmd_notify(args)

    if args.command == "timezone":
        return cmd_timezone(args)

    if args.command == "settings":
        if args.subcommand == "get":
            return cmd_settings_get(args)
        if args.subcommand == "set":
            return cmd_settings_set(args)
        parser.print_help()
        return 0

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
