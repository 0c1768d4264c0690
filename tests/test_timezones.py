"""
Tests for timezone lookup and local-time formatting.
"""

import locale

import pytest

from beacon.timezones import (
    TIMEZONE_INFO,
    UNKNOWN_TIMEZONE,
    LocalTime,
    TimezoneInfo,
    format_clock_time,
    format_date,
    format_local_time,
    format_weekday,
    resolve_timezone,
)


class TestResolveTimezone:
    """Tests for resolve_timezone."""

    def test_known_timezone(self) -> None:
        """Test resolving a timezone present in the table."""
        info = resolve_timezone("Europe/Amsterdam")

        assert info.continent == "Europe"
        assert info.country == "Netherlands"
        assert info.local_timezone_name == "Central European Time"

    def test_unknown_timezone(self) -> None:
        """Test that unknown identifiers resolve to all-None fields."""
        info = resolve_timezone("Not/AZone")

        assert info == TimezoneInfo(None, None, None)
        assert info is UNKNOWN_TIMEZONE

    def test_none_and_empty(self) -> None:
        """Test that missing identifiers are not errors."""
        assert resolve_timezone(None) == UNKNOWN_TIMEZONE
        assert resolve_timezone("") == UNKNOWN_TIMEZONE

    def test_exact_match_only(self) -> None:
        """Test that lookup does not normalize case or aliases."""
        assert resolve_timezone("europe/amsterdam") == UNKNOWN_TIMEZONE
        # Deprecated alias of Europe/Kyiv
        assert resolve_timezone("Europe/Kiev") == UNKNOWN_TIMEZONE

    def test_repeated_lookups_are_identical(self) -> None:
        """Test that resolving twice yields the same result."""
        assert resolve_timezone("Asia/Tokyo") == resolve_timezone("Asia/Tokyo")
        assert resolve_timezone("Not/AZone") == resolve_timezone("Not/AZone")

    def test_table_is_read_only(self) -> None:
        """Test that the lookup table cannot be modified."""
        with pytest.raises(TypeError):
            TIMEZONE_INFO["Mars/Olympus_Mons"] = TimezoneInfo("Mars", None, None)  # type: ignore[index]

    def test_table_covers_all_regions(self) -> None:
        """Test that the table spans the IANA regions."""
        regions = {key.split("/")[0] for key in TIMEZONE_INFO if "/" in key}

        assert {"Africa", "America", "Asia", "Australia", "Europe", "Pacific"} <= regions
        assert len(TIMEZONE_INFO) >= 140


class TestFormatters:
    """Tests for the local-time formatting functions."""

    def test_format_date_crosses_new_year(self) -> None:
        """Test that the winter UTC+1 offset moves the date forward."""
        assert format_date("2024-12-31T23:00:00Z", "Europe/Amsterdam") == "Jan 01, 2025"

    def test_format_weekday(self) -> None:
        """Test full weekday names."""
        assert format_weekday("2024-12-31T23:00:00Z", "Europe/Amsterdam") == "Wednesday"
        assert format_weekday("2024-12-31T23:00:00Z", "UTC") == "Tuesday"

    def test_format_clock_time(self) -> None:
        """Test 24-hour clock formatting."""
        assert format_clock_time("2024-12-31T23:00:00Z", "Europe/Amsterdam") == "00:00:00"
        assert format_clock_time("2024-06-15T18:45:30Z", "Asia/Tokyo") == "03:45:30"

    def test_summer_offset(self) -> None:
        """Test that daylight saving time applies in summer."""
        assert format_clock_time("2024-07-01T12:00:00Z", "Europe/Amsterdam") == "14:00:00"

    def test_dst_transition(self) -> None:
        """Test conversion either side of a daylight saving change."""
        assert format_clock_time("2024-03-10T06:59:59Z", "America/New_York") == "01:59:59"
        assert format_clock_time("2024-03-10T07:00:00Z", "America/New_York") == "03:00:00"

    def test_naive_instant_is_utc(self) -> None:
        """Test that instants without an offset are taken as UTC."""
        assert format_clock_time("2024-01-15 08:30:00", "Europe/Paris") == "09:30:00"

    def test_explicit_offset(self) -> None:
        """Test instants carrying an explicit UTC offset."""
        assert format_clock_time("2024-01-15T10:30:00+02:00", "UTC") == "08:30:00"

    @pytest.mark.parametrize("func", [format_weekday, format_date, format_clock_time])
    def test_missing_inputs_return_none(self, func) -> None:
        """Test that missing inputs fail soft."""
        assert func(None, "Europe/Paris") is None
        assert func("", "Europe/Paris") is None
        assert func("2024-01-15T10:30:00Z", None) is None
        assert func("2024-01-15T10:30:00Z", "") is None

    def test_invalid_inputs_return_none(self) -> None:
        """Test that unparsable instants and unknown zones fail soft."""
        assert format_date("yesterday", "Europe/Paris") is None
        assert format_date("2024-01-15T10:30:00Z", "Not/AZone") is None

    @pytest.mark.parametrize("tz", ["Europe", "America"])
    def test_region_only_timezone_returns_none(self, tz: str) -> None:
        """Test that region names without a city fail soft."""
        assert format_date("2024-12-31T23:00:00Z", tz) is None
        assert format_weekday("2024-12-31T23:00:00Z", tz) is None
        assert format_clock_time("2024-12-31T23:00:00Z", tz) is None
        assert format_local_time("2024-12-31T23:00:00Z", tz) is None

    def test_names_ignore_process_locale(self) -> None:
        """Test that weekday and month names stay English under another locale."""
        saved = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE.UTF-8 locale not installed")

        try:
            assert format_weekday("2024-12-31T23:00:00Z", "Europe/Amsterdam") == "Wednesday"
            assert format_date("2024-12-31T23:00:00Z", "Europe/Amsterdam") == "Jan 01, 2025"
        finally:
            locale.setlocale(locale.LC_TIME, saved)

    def test_every_month_abbreviation(self) -> None:
        """Test the abbreviated month name for each month."""
        months = [format_date(f"2024-{m:02d}-15T12:00:00Z", "UTC") for m in range(1, 13)]

        assert [m[:3] for m in months] == [
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ]


class TestFormatLocalTime:
    """Tests for format_local_time."""

    def test_all_parts(self) -> None:
        """Test rendering weekday, date and time together."""
        local = format_local_time("2024-12-31T23:00:00Z", "Europe/Amsterdam")

        assert local == LocalTime("Wednesday", "Jan 01, 2025", "00:00:00")

    def test_missing_input(self) -> None:
        """Test that a missing input yields None."""
        assert format_local_time(None, "Europe/Amsterdam") is None
        assert format_local_time("2024-12-31T23:00:00Z", None) is None
