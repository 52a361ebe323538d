from __future__ import annotations

import logging
from typing import Callable

from calendrical.calendar._exceptions import CalendarError, UnknownCalendarError
from calendrical.calendar.base import Calendar
from calendrical.calendar.buddhist import BuddhistCalendar
from calendrical.calendar.ethiopic import CopticCalendar, EthiopicAmeteAlemCalendar, EthiopicCalendar
from calendrical.calendar.gregorian import GregorianCalendar
from calendrical.calendar.hebrew import HebrewCalendar
from calendrical.calendar.indian import IndianCalendar
from calendrical.calendar.islamic import IslamicCivilCalendar, IslamicTabularCalendar
from calendrical.calendar.japanese import JapaneseCalendar
from calendrical.calendar.persian import PersianCalendar
from calendrical.calendar.taiwan import TaiwanCalendar

logger = logging.getLogger(__name__)

_FACTORIES: dict[str, Callable[[], Calendar]] = {
    "gregory": GregorianCalendar,
    "japanese": JapaneseCalendar,
    "buddhist": BuddhistCalendar,
    "roc": TaiwanCalendar,
    "persian": PersianCalendar,
    "islamic-civil": IslamicCivilCalendar,
    "islamic-tbla": IslamicTabularCalendar,
    "hebrew": HebrewCalendar,
    "indian": IndianCalendar,
    "ethiopic": EthiopicCalendar,
    "ethioaa": EthiopicAmeteAlemCalendar,
    "coptic": CopticCalendar,
}

_ALIASES: dict[str, str] = {
    "gregorian": "gregory",
    "iso8601": "gregory",
    "ethiopic-amete-alem": "ethioaa",
}

_instances: dict[str, Calendar] = {}


def create_calendar(name: str) -> Calendar:
    """
    Return the shared calendar instance registered under ``name``.

    Raises
    ------
    UnknownCalendarError
        If no calendar is registered under ``name``.  ``islamic-umalqura``
        needs observational month tables and is not provided.
    """
    identifier = _ALIASES.get(name, name)
    calendar = _instances.get(identifier)
    if calendar is not None:
        return calendar

    factory = _FACTORIES.get(identifier)
    if factory is None:
        raise UnknownCalendarError(f"Unknown calendar {name!r}.")
    calendar = _instances[identifier] = factory()
    logger.debug("Created calendar %s", identifier)
    return calendar


def register_calendar(calendar: Calendar, *, replace: bool = False) -> None:
    """Make ``calendar`` available from :func:`create_calendar` under its identifier."""
    identifier = calendar.identifier
    if not identifier:
        raise CalendarError("A registered calendar needs a non-empty identifier.")
    if not replace and (identifier in _FACTORIES or identifier in _instances):
        raise CalendarError(f"Calendar {identifier!r} is already registered.")
    _FACTORIES[identifier] = lambda: calendar
    _instances[identifier] = calendar
    logger.debug("Registered calendar %s", identifier)


def available_calendars() -> list[str]:
    return sorted(_FACTORIES)
