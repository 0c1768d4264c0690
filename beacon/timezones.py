"""
Timezone lookup and local-time formatting for alert messages.

Heartbeat instants are reported in UTC. Alerts show them in the monitor's
own timezone, converted with the IANA timezone database so that daylight
saving transitions are honoured, together with a descriptive name for the
zone taken from a static table.
"""

from datetime import datetime, timezone
from types import MappingProxyType
from typing import NamedTuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from beacon.logging_config import get_logger

logger = get_logger(__name__)


class TimezoneInfo(NamedTuple):
    """Descriptive information about an IANA timezone."""
    continent: str | None
    country: str | None
    local_timezone_name: str | None


class LocalTime(NamedTuple):
    """An instant rendered in a local timezone."""
    weekday: str  # "Monday"
    date: str  # "Jan 01, 2025"
    clock_time: str  # "23:59:59"


UNKNOWN_TIMEZONE = TimezoneInfo(None, None, None)

# English names regardless of the process locale
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_CET = "Central European Time"
_EET = "Eastern European Time"
_WET = "Western European Time"

TIMEZONE_INFO: MappingProxyType[str, TimezoneInfo] = MappingProxyType({
    # Africa
    "Africa/Abidjan": TimezoneInfo("Africa", "Ivory Coast", "Greenwich Mean Time"),
    "Africa/Accra": TimezoneInfo("Africa", "Ghana", "Greenwich Mean Time"),
    "Africa/Addis_Ababa": TimezoneInfo("Africa", "Ethiopia", "East Africa Time"),
    "Africa/Algiers": TimezoneInfo("Africa", "Algeria", _CET),
    "Africa/Cairo": TimezoneInfo("Africa", "Egypt", _EET),
    "Africa/Casablanca": TimezoneInfo("Africa", "Morocco", _WET),
    "Africa/Dakar": TimezoneInfo("Africa", "Senegal", "Greenwich Mean Time"),
    "Africa/Dar_es_Salaam": TimezoneInfo("Africa", "Tanzania", "East Africa Time"),
    "Africa/Johannesburg": TimezoneInfo("Africa", "South Africa", "South Africa Standard Time"),
    "Africa/Khartoum": TimezoneInfo("Africa", "Sudan", "Central Africa Time"),
    "Africa/Kinshasa": TimezoneInfo("Africa", "DR Congo", "West Africa Time"),
    "Africa/Lagos": TimezoneInfo("Africa", "Nigeria", "West Africa Time"),
    "Africa/Luanda": TimezoneInfo("Africa", "Angola", "West Africa Time"),
    "Africa/Maputo": TimezoneInfo("Africa", "Mozambique", "Central Africa Time"),
    "Africa/Nairobi": TimezoneInfo("Africa", "Kenya", "East Africa Time"),
    "Africa/Tripoli": TimezoneInfo("Africa", "Libya", _EET),
    "Africa/Tunis": TimezoneInfo("Africa", "Tunisia", _CET),
    "Africa/Windhoek": TimezoneInfo("Africa", "Namibia", "Central Africa Time"),
    # America
    "America/Adak": TimezoneInfo("America", "United States", "Hawaii-Aleutian Time"),
    "America/Anchorage": TimezoneInfo("America", "United States", "Alaska Time"),
    "America/Argentina/Buenos_Aires": TimezoneInfo("America", "Argentina", "Argentina Time"),
    "America/Asuncion": TimezoneInfo("America", "Paraguay", "Paraguay Time"),
    "America/Bogota": TimezoneInfo("America", "Colombia", "Colombia Time"),
    "America/Caracas": TimezoneInfo("America", "Venezuela", "Venezuela Time"),
    "America/Chicago": TimezoneInfo("America", "United States", "Central Time"),
    "America/Costa_Rica": TimezoneInfo("America", "Costa Rica", "Central Time"),
    "America/Denver": TimezoneInfo("America", "United States", "Mountain Time"),
    "America/Detroit": TimezoneInfo("America", "United States", "Eastern Time"),
    "America/Edmonton": TimezoneInfo("America", "Canada", "Mountain Time"),
    "America/El_Salvador": TimezoneInfo("America", "El Salvador", "Central Time"),
    "America/Guatemala": TimezoneInfo("America", "Guatemala", "Central Time"),
    "America/Guayaquil": TimezoneInfo("America", "Ecuador", "Ecuador Time"),
    "America/Halifax": TimezoneInfo("America", "Canada", "Atlantic Time"),
    "America/Havana": TimezoneInfo("America", "Cuba", "Cuba Time"),
    "America/Jamaica": TimezoneInfo("America", "Jamaica", "Eastern Time"),
    "America/La_Paz": TimezoneInfo("America", "Bolivia", "Bolivia Time"),
    "America/Lima": TimezoneInfo("America", "Peru", "Peru Time"),
    "America/Los_Angeles": TimezoneInfo("America", "United States", "Pacific Time"),
    "America/Managua": TimezoneInfo("America", "Nicaragua", "Central Time"),
    "America/Manaus": TimezoneInfo("America", "Brazil", "Amazon Time"),
    "America/Mexico_City": TimezoneInfo("America", "Mexico", "Central Time"),
    "America/Montevideo": TimezoneInfo("America", "Uruguay", "Uruguay Time"),
    "America/New_York": TimezoneInfo("America", "United States", "Eastern Time"),
    "America/Noronha": TimezoneInfo("America", "Brazil", "Fernando de Noronha Time"),
    "America/Nuuk": TimezoneInfo("America", "Greenland", "West Greenland Time"),
    "America/Panama": TimezoneInfo("America", "Panama", "Eastern Time"),
    "America/Phoenix": TimezoneInfo("America", "United States", "Mountain Standard Time"),
    "America/Port-au-Prince": TimezoneInfo("America", "Haiti", "Eastern Time"),
    "America/Puerto_Rico": TimezoneInfo("America", "Puerto Rico", "Atlantic Standard Time"),
    "America/Regina": TimezoneInfo("America", "Canada", "Central Standard Time"),
    "America/Santiago": TimezoneInfo("America", "Chile", "Chile Time"),
    "America/Santo_Domingo": TimezoneInfo("America", "Dominican Republic", "Atlantic Standard Time"),
    "America/Sao_Paulo": TimezoneInfo("America", "Brazil", "Brasilia Time"),
    "America/St_Johns": TimezoneInfo("America", "Canada", "Newfoundland Time"),
    "America/Tegucigalpa": TimezoneInfo("America", "Honduras", "Central Time"),
    "America/Tijuana": TimezoneInfo("America", "Mexico", "Pacific Time"),
    "America/Toronto": TimezoneInfo("America", "Canada", "Eastern Time"),
    "America/Vancouver": TimezoneInfo("America", "Canada", "Pacific Time"),
    "America/Winnipeg": TimezoneInfo("America", "Canada", "Central Time"),
    # Antarctica
    "Antarctica/McMurdo": TimezoneInfo("Antarctica", "Antarctica", "New Zealand Time"),
    "Antarctica/Casey": TimezoneInfo("Antarctica", "Antarctica", "Casey Time"),
    # Asia
    "Asia/Almaty": TimezoneInfo("Asia", "Kazakhstan", "East Kazakhstan Time"),
    "Asia/Amman": TimezoneInfo("Asia", "Jordan", "Arabia Standard Time"),
    "Asia/Baghdad": TimezoneInfo("Asia", "Iraq", "Arabia Standard Time"),
    "Asia/Baku": TimezoneInfo("Asia", "Azerbaijan", "Azerbaijan Time"),
    "Asia/Bangkok": TimezoneInfo("Asia", "Thailand", "Indochina Time"),
    "Asia/Beirut": TimezoneInfo("Asia", "Lebanon", _EET),
    "Asia/Colombo": TimezoneInfo("Asia", "Sri Lanka", "India Standard Time"),
    "Asia/Damascus": TimezoneInfo("Asia", "Syria", "Arabia Standard Time"),
    "Asia/Dhaka": TimezoneInfo("Asia", "Bangladesh", "Bangladesh Standard Time"),
    "Asia/Dubai": TimezoneInfo("Asia", "United Arab Emirates", "Gulf Standard Time"),
    "Asia/Ho_Chi_Minh": TimezoneInfo("Asia", "Vietnam", "Indochina Time"),
    "Asia/Hong_Kong": TimezoneInfo("Asia", "Hong Kong", "Hong Kong Time"),
    "Asia/Jakarta": TimezoneInfo("Asia", "Indonesia", "Western Indonesia Time"),
    "Asia/Jerusalem": TimezoneInfo("Asia", "Israel", "Israel Time"),
    "Asia/Kabul": TimezoneInfo("Asia", "Afghanistan", "Afghanistan Time"),
    "Asia/Karachi": TimezoneInfo("Asia", "Pakistan", "Pakistan Standard Time"),
    "Asia/Kathmandu": TimezoneInfo("Asia", "Nepal", "Nepal Time"),
    "Asia/Kolkata": TimezoneInfo("Asia", "India", "India Standard Time"),
    "Asia/Kuala_Lumpur": TimezoneInfo("Asia", "Malaysia", "Malaysia Time"),
    "Asia/Kuwait": TimezoneInfo("Asia", "Kuwait", "Arabia Standard Time"),
    "Asia/Makassar": TimezoneInfo("Asia", "Indonesia", "Central Indonesia Time"),
    "Asia/Manila": TimezoneInfo("Asia", "Philippines", "Philippine Time"),
    "Asia/Muscat": TimezoneInfo("Asia", "Oman", "Gulf Standard Time"),
    "Asia/Qatar": TimezoneInfo("Asia", "Qatar", "Arabia Standard Time"),
    "Asia/Riyadh": TimezoneInfo("Asia", "Saudi Arabia", "Arabia Standard Time"),
    "Asia/Seoul": TimezoneInfo("Asia", "South Korea", "Korean Standard Time"),
    "Asia/Shanghai": TimezoneInfo("Asia", "China", "China Standard Time"),
    "Asia/Singapore": TimezoneInfo("Asia", "Singapore", "Singapore Standard Time"),
    "Asia/Taipei": TimezoneInfo("Asia", "Taiwan", "Taipei Standard Time"),
    "Asia/Tashkent": TimezoneInfo("Asia", "Uzbekistan", "Uzbekistan Time"),
    "Asia/Tbilisi": TimezoneInfo("Asia", "Georgia", "Georgia Standard Time"),
    "Asia/Tehran": TimezoneInfo("Asia", "Iran", "Iran Standard Time"),
    "Asia/Tokyo": TimezoneInfo("Asia", "Japan", "Japan Standard Time"),
    "Asia/Ulaanbaatar": TimezoneInfo("Asia", "Mongolia", "Ulaanbaatar Time"),
    "Asia/Vladivostok": TimezoneInfo("Asia", "Russia", "Vladivostok Time"),
    "Asia/Yangon": TimezoneInfo("Asia", "Myanmar", "Myanmar Time"),
    "Asia/Yekaterinburg": TimezoneInfo("Asia", "Russia", "Yekaterinburg Time"),
    "Asia/Yerevan": TimezoneInfo("Asia", "Armenia", "Armenia Time"),
    # Atlantic
    "Atlantic/Azores": TimezoneInfo("Atlantic", "Portugal", "Azores Time"),
    "Atlantic/Bermuda": TimezoneInfo("Atlantic", "Bermuda", "Atlantic Time"),
    "Atlantic/Canary": TimezoneInfo("Atlantic", "Spain", _WET),
    "Atlantic/Cape_Verde": TimezoneInfo("Atlantic", "Cape Verde", "Cape Verde Time"),
    "Atlantic/Reykjavik": TimezoneInfo("Atlantic", "Iceland", "Greenwich Mean Time"),
    "Atlantic/South_Georgia": TimezoneInfo("Atlantic", "South Georgia", "South Georgia Time"),
    # Australia
    "Australia/Adelaide": TimezoneInfo("Australia", "Australia", "Australian Central Time"),
    "Australia/Brisbane": TimezoneInfo("Australia", "Australia", "Australian Eastern Standard Time"),
    "Australia/Darwin": TimezoneInfo("Australia", "Australia", "Australian Central Standard Time"),
    "Australia/Hobart": TimezoneInfo("Australia", "Australia", "Australian Eastern Time"),
    "Australia/Melbourne": TimezoneInfo("Australia", "Australia", "Australian Eastern Time"),
    "Australia/Perth": TimezoneInfo("Australia", "Australia", "Australian Western Standard Time"),
    "Australia/Sydney": TimezoneInfo("Australia", "Australia", "Australian Eastern Time"),
    # Europe
    "Europe/Amsterdam": TimezoneInfo("Europe", "Netherlands", _CET),
    "Europe/Athens": TimezoneInfo("Europe", "Greece", _EET),
    "Europe/Belgrade": TimezoneInfo("Europe", "Serbia", _CET),
    "Europe/Berlin": TimezoneInfo("Europe", "Germany", _CET),
    "Europe/Brussels": TimezoneInfo("Europe", "Belgium", _CET),
    "Europe/Bucharest": TimezoneInfo("Europe", "Romania", _EET),
    "Europe/Budapest": TimezoneInfo("Europe", "Hungary", _CET),
    "Europe/Copenhagen": TimezoneInfo("Europe", "Denmark", _CET),
    "Europe/Dublin": TimezoneInfo("Europe", "Ireland", "Irish Time"),
    "Europe/Helsinki": TimezoneInfo("Europe", "Finland", _EET),
    "Europe/Istanbul": TimezoneInfo("Europe", "Turkey", "Turkey Time"),
    "Europe/Kyiv": TimezoneInfo("Europe", "Ukraine", _EET),
    "Europe/Lisbon": TimezoneInfo("Europe", "Portugal", _WET),
    "Europe/London": TimezoneInfo("Europe", "United Kingdom", "British Time"),
    "Europe/Luxembourg": TimezoneInfo("Europe", "Luxembourg", _CET),
    "Europe/Madrid": TimezoneInfo("Europe", "Spain", _CET),
    "Europe/Minsk": TimezoneInfo("Europe", "Belarus", "Moscow Standard Time"),
    "Europe/Moscow": TimezoneInfo("Europe", "Russia", "Moscow Standard Time"),
    "Europe/Oslo": TimezoneInfo("Europe", "Norway", _CET),
    "Europe/Paris": TimezoneInfo("Europe", "France", _CET),
    "Europe/Prague": TimezoneInfo("Europe", "Czech Republic", _CET),
    "Europe/Riga": TimezoneInfo("Europe", "Latvia", _EET),
    "Europe/Rome": TimezoneInfo("Europe", "Italy", _CET),
    "Europe/Sofia": TimezoneInfo("Europe", "Bulgaria", _EET),
    "Europe/Stockholm": TimezoneInfo("Europe", "Sweden", _CET),
    "Europe/Tallinn": TimezoneInfo("Europe", "Estonia", _EET),
    "Europe/Vienna": TimezoneInfo("Europe", "Austria", _CET),
    "Europe/Vilnius": TimezoneInfo("Europe", "Lithuania", _EET),
    "Europe/Warsaw": TimezoneInfo("Europe", "Poland", _CET),
    "Europe/Zurich": TimezoneInfo("Europe", "Switzerland", _CET),
    # Indian
    "Indian/Chagos": TimezoneInfo("Indian", "British Indian Ocean Territory", "Indian Ocean Time"),
    "Indian/Maldives": TimezoneInfo("Indian", "Maldives", "Maldives Time"),
    "Indian/Mauritius": TimezoneInfo("Indian", "Mauritius", "Mauritius Time"),
    "Indian/Reunion": TimezoneInfo("Indian", "Reunion", "Reunion Time"),
    # Pacific
    "Pacific/Auckland": TimezoneInfo("Pacific", "New Zealand", "New Zealand Time"),
    "Pacific/Fiji": TimezoneInfo("Pacific", "Fiji", "Fiji Time"),
    "Pacific/Guam": TimezoneInfo("Pacific", "Guam", "Chamorro Standard Time"),
    "Pacific/Honolulu": TimezoneInfo("Pacific", "United States", "Hawaii-Aleutian Standard Time"),
    "Pacific/Port_Moresby": TimezoneInfo("Pacific", "Papua New Guinea", "Papua New Guinea Time"),
    "Pacific/Tahiti": TimezoneInfo("Pacific", "French Polynesia", "Tahiti Time"),
    "Pacific/Tongatapu": TimezoneInfo("Pacific", "Tonga", "Tonga Time"),
    # UTC
    "UTC": TimezoneInfo(None, None, "Coordinated Universal Time"),
})


def resolve_timezone(timezone_id: str | None) -> TimezoneInfo:
    """
    Look up descriptive information for an IANA timezone identifier.

    Lookup is by exact identifier only; aliases and deprecated names are not
    normalized. Unknown identifiers resolve to all-None fields.

    Args:
        timezone_id: IANA timezone identifier, e.g. "Europe/Amsterdam"

    Returns:
        TimezoneInfo for the identifier
    """
    info = TIMEZONE_INFO.get(timezone_id or "")
    if info is None:
        logger.debug("No timezone information for '%s'", timezone_id)
        return UNKNOWN_TIMEZONE
    return info


def _to_local(utc: str | None, tz: str | None, what: str) -> datetime | None:
    """Convert a UTC ISO-8601 instant to an aware datetime in tz."""
    if not utc or not tz:
        logger.warning("Cannot format %s: utc=%r timezone=%r", what, utc, tz)
        return None

    try:
        instant = datetime.fromisoformat(utc.replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Cannot format %s: invalid UTC time %r", what, utc)
        return None

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)

    try:
        zone = ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        # Region names such as "Europe" are directories in the database
        logger.warning("Cannot format %s: unknown timezone %r", what, tz)
        return None

    return instant.astimezone(zone)


def format_weekday(utc: str | None, tz: str | None) -> str | None:
    """Full weekday name of a UTC instant in tz, e.g. "Monday"."""
    local = _to_local(utc, tz, "weekday")
    return WEEKDAY_NAMES[local.weekday()] if local else None


def format_date(utc: str | None, tz: str | None) -> str | None:
    """Date of a UTC instant in tz, formatted "Mon DD, YYYY"."""
    local = _to_local(utc, tz, "date")
    if local is None:
        return None
    return f"{MONTH_ABBREVIATIONS[local.month - 1]} {local.day:02d}, {local.year:04d}"


def format_clock_time(utc: str | None, tz: str | None) -> str | None:
    """24-hour "HH:MM:SS" clock time of a UTC instant in tz."""
    local = _to_local(utc, tz, "time")
    return local.strftime("%H:%M:%S") if local else None


def format_local_time(utc: str | None, tz: str | None) -> LocalTime | None:
    """
    Render a UTC instant as weekday, date and clock time in tz.

    Returns:
        LocalTime, or None if the instant cannot be rendered
    """
    weekday = format_weekday(utc, tz)
    date = format_date(utc, tz)
    clock_time = format_clock_time(utc, tz)

    if weekday is None or date is None or clock_time is None:
        return None
    return LocalTime(weekday, date, clock_time)
