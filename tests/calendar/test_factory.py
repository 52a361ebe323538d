"""
tests/calendar/test_factory.py

Covers:
  - Shared instances and aliases
  - Unknown identifiers
  - Registering custom calendars
"""

import pytest

from calendrical.calendar import (
    CalendarError,
    GregorianCalendar,
    Retail454Calendar,
    UnknownCalendarError,
    available_calendars,
    create_calendar,
    factory,
    register_calendar,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def registry(monkeypatch):
    """Isolate registrations made by a test."""
    monkeypatch.setattr(factory, "_FACTORIES", dict(factory._FACTORIES))
    monkeypatch.setattr(factory, "_instances", dict(factory._instances))


# ── Lookup ────────────────────────────────────────────────────────────────────

class TestLookup:

    def test_same_instance_returned(self):
        assert create_calendar("hebrew") is create_calendar("hebrew")

    @pytest.mark.parametrize("alias", ["gregorian", "iso8601"])
    def test_aliases(self, alias):
        assert create_calendar(alias) is create_calendar("gregory")

    def test_ethiopic_amete_alem_alias(self):
        assert create_calendar("ethiopic-amete-alem").identifier == "ethioaa"

    def test_unknown(self):
        with pytest.raises(UnknownCalendarError):
            create_calendar("martian")

    def test_umalqura_not_provided(self):
        with pytest.raises(UnknownCalendarError):
            create_calendar("islamic-umalqura")

    def test_available(self):
        names = available_calendars()
        assert names == sorted(names)
        assert {"gregory", "japanese", "hebrew", "coptic", "ethioaa"} <= set(names)

    def test_identifiers_match(self):
        for name in available_calendars():
            assert create_calendar(name).identifier == name


# ── Registration ──────────────────────────────────────────────────────────────

class TestRegistration:

    def test_register_fiscal_calendar(self, registry):
        retail = Retail454Calendar()
        register_calendar(retail)
        assert create_calendar("custom-454") is retail
        assert "custom-454" in available_calendars()

    def test_duplicate_rejected(self, registry):
        register_calendar(Retail454Calendar())
        with pytest.raises(CalendarError):
            register_calendar(Retail454Calendar())

    def test_builtin_cannot_be_shadowed(self, registry):
        with pytest.raises(CalendarError):
            register_calendar(GregorianCalendar())

    def test_replace(self, registry):
        register_calendar(Retail454Calendar())
        replacement = Retail454Calendar(epoch_offset=7)
        register_calendar(replacement, replace=True)
        assert create_calendar("custom-454") is replacement

    def test_empty_identifier(self, registry):
        with pytest.raises(CalendarError):
            register_calendar(Retail454Calendar(identifier=""))
