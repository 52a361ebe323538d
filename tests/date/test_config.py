"""
tests/date/test_config.py

Covers:
  - Settings from the environment and validation
  - Process-wide overrides with configure / reset_settings
  - Local time zone resolution order
  - Clocks
  - Locale week data
"""

import time

import pytest

from calendrical.calendar import CalendarError, InvalidFieldError, NonexistentTimeError
from calendrical.date import (
    CalendarDate,
    FixedClock,
    Settings,
    SystemClock,
    ZonedDateTime,
    configure,
    get_local_time_zone,
    get_settings,
    reset_local_time_zone,
    reset_settings,
)
from calendrical.date import weekdata
from calendrical.date.clock import Clock, get_clock, reset_clock, set_clock


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("CALENDRICAL_OVERFLOW", "CALENDRICAL_DISAMBIGUATION", "CALENDRICAL_TIMEZONE"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_local_time_zone()
    yield
    reset_settings()
    reset_local_time_zone()


# ── Settings ──────────────────────────────────────────────────────────────────

class TestSettings:

    def test_defaults(self):
        settings = get_settings()
        assert (settings.overflow, settings.disambiguation, settings.time_zone) == ("constrain", "compatible", None)

    def test_from_mapping(self):
        settings = Settings.from_env({
            "CALENDRICAL_OVERFLOW": "reject",
            "CALENDRICAL_DISAMBIGUATION": "later",
            "CALENDRICAL_TIMEZONE": "Europe/Paris",
        })
        assert (settings.overflow, settings.disambiguation, settings.time_zone) == ("reject", "later", "Europe/Paris")

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("CALENDRICAL_OVERFLOW", "reject")
        reset_settings()
        assert get_settings().overflow == "reject"

    @pytest.mark.parametrize("changes", [{"overflow": "wrap"}, {"disambiguation": "nearest"}])
    def test_invalid_values(self, changes):
        with pytest.raises(CalendarError):
            Settings(**changes)

    def test_settings_are_frozen(self):
        with pytest.raises(AttributeError):
            get_settings().overflow = "reject"


class TestConfigure:

    def test_overflow(self):
        configure(overflow="reject")
        with pytest.raises(InvalidFieldError):
            CalendarDate(2019, 2, 29)
        assert CalendarDate(2019, 2, 29, overflow="constrain").day == 28

    def test_disambiguation(self):
        configure(disambiguation="reject")
        with pytest.raises(NonexistentTimeError):
            ZonedDateTime(2021, 3, 14, "America/New_York", hour=2, minute=30)

    def test_reset(self):
        configure(overflow="reject")
        reset_settings()
        assert get_settings().overflow == "constrain"

    def test_invalid_change(self):
        with pytest.raises(CalendarError):
            configure(overflow="wrap")


# ── Local time zone ───────────────────────────────────────────────────────────

class TestLocalTimeZone:

    def test_configured_zone_wins(self, monkeypatch):
        monkeypatch.setenv("TZ", "Asia/Tokyo")
        configure(time_zone="Europe/Paris")
        assert get_local_time_zone() == "Europe/Paris"

    def test_tz_variable(self, monkeypatch):
        monkeypatch.setenv("TZ", ":Asia/Tokyo")
        assert get_local_time_zone() == "Asia/Tokyo"

    def test_resolved_once(self, monkeypatch):
        monkeypatch.setenv("TZ", "Asia/Tokyo")
        assert get_local_time_zone() == "Asia/Tokyo"
        monkeypatch.setenv("TZ", "Europe/Paris")
        assert get_local_time_zone() == "Asia/Tokyo"

    def test_bad_tz_variable_is_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("TZ", "Not/AZone")
        with caplog.at_level("WARNING", logger="calendrical.date.zone"):
            zone = get_local_time_zone()
        assert zone != "Not/AZone"
        assert "Ignoring TZ" in caplog.text


# ── Clocks ────────────────────────────────────────────────────────────────────

class TestClocks:

    def test_fixed_clock(self):
        clock = FixedClock(1_000)
        clock.advance(500)
        assert clock.now_ms() == 1_500

    def test_system_clock(self):
        assert abs(SystemClock().now_ms() - time.time() * 1000) < 60_000

    def test_clocks_satisfy_protocol(self):
        assert isinstance(FixedClock(0), Clock)
        assert isinstance(SystemClock(), Clock)

    def test_set_and_reset(self):
        fixed = FixedClock(0)
        set_clock(fixed)
        try:
            assert get_clock() is fixed
            assert get_clock(FixedClock(5)).now_ms() == 5
        finally:
            reset_clock()
        assert isinstance(get_clock(), SystemClock)


# ── Week data ─────────────────────────────────────────────────────────────────

class TestWeekData:

    @pytest.mark.parametrize("locale, region", [
        ("en-GB", "GB"), ("de_DE", "DE"), ("fr", "FR"), ("zh-Hant-TW", "TW"), ("es-419", "419"), ("xx", None),
    ])
    def test_region(self, locale, region):
        assert weekdata.get_region(locale) == region

    def test_week_start(self):
        assert weekdata.get_week_start("en-US") == 0
        assert weekdata.get_week_start("en-GB") == 1
        assert weekdata.get_week_start("ar-EG") == 6

    def test_weekend(self):
        assert weekdata.get_weekend(None) == (6, 0)
        assert weekdata.get_weekend("fa-IR") == (5, 5)
