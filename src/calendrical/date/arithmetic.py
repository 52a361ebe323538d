"""
The calendar-agnostic arithmetic engine.

Every operation copies its input into a :class:`DateDraft`, adjusts fields,
lets the calendar balance overflow and constrain the result, then freezes a
new value.  Calendar-specific behaviour enters only through the calendar's
hooks, so the same code adds months to Hebrew, Japanese or fiscal dates.
"""

from __future__ import annotations

from typing import Any, Optional

from calendrical.calendar._exceptions import InvalidFieldError, UnsupportedFieldError
from calendrical.date import conversion, values
from calendrical.date._draft import DateDraft
from calendrical.date.duration import TIME_FIELDS, AnyDuration, AnyFields, as_duration, as_fields
from calendrical.date.zone import HOUR_MS

MAX_CYCLE_YEAR = 9999


# ── balancing and constraining ────────────────────────────────────────────────

def add_years(date: DateDraft, years: int) -> None:
    if date.calendar.is_inverse_era(date):
        years = -years
    date.year += years


def balance_year_month(date: DateDraft) -> None:
    """Carry months outside ``[1, months_in_year]`` into the year."""
    calendar = date.calendar
    while date.month < 1:
        add_years(date, -1)
        date.month += calendar.get_months_in_year(date)

    while date.month > calendar.get_months_in_year(date):
        date.month -= calendar.get_months_in_year(date)
        add_years(date, 1)


def balance_day(date: DateDraft) -> None:
    """Carry days outside the current month into neighbouring months."""
    calendar = date.calendar
    while date.day < 1:
        date.month -= 1
        balance_year_month(date)
        date.day += calendar.get_days_in_month(date)

    while date.day > calendar.get_days_in_month(date):
        date.day -= calendar.get_days_in_month(date)
        date.month += 1
        balance_year_month(date)


def constrain_month_day(date: DateDraft) -> None:
    calendar = date.calendar
    date.month = max(1, min(calendar.get_months_in_year(date), date.month))
    date.day = max(1, min(calendar.get_days_in_month(date), date.day))


def constrain_fields(date: DateDraft) -> None:
    """Clamp year, month and day into the calendar's ranges, in that order."""
    calendar = date.calendar
    date.year = max(1, min(calendar.get_years_in_era(date), date.year))
    date.month = max(
        calendar.get_minimum_month_in_year(date),
        min(calendar.get_months_in_year(date), date.month),
    )
    date.day = max(
        calendar.get_minimum_day_in_month(date),
        min(calendar.get_days_in_month(date), date.day),
    )


def check_era(date: DateDraft) -> None:
    if date.era not in date.calendar.get_eras():
        raise InvalidFieldError(
            f"Unknown era {date.era!r} for calendar {date.calendar.identifier!r}."
        )


def balance(date: DateDraft) -> None:
    date.calendar.balance_date(date)


def constrain(date: DateDraft) -> None:
    check_era(date)
    date.calendar.constrain_date(date)


def balance_time(time: DateDraft) -> int:
    """Normalise clock fields into range; return the number of whole days carried."""
    time.second += time.millisecond // 1000
    time.millisecond %= 1000

    time.minute += time.second // 60
    time.second %= 60

    time.hour += time.minute // 60
    time.minute %= 60

    days = time.hour // 24
    time.hour %= 24
    return days


def constrain_time(time: DateDraft) -> None:
    time.millisecond = max(0, min(999, time.millisecond))
    time.second = max(0, min(59, time.second))
    time.minute = max(0, min(59, time.minute))
    time.hour = max(0, min(23, time.hour))


def _add_time_fields(time: DateDraft, hours: int, minutes: int, seconds: int, milliseconds: int) -> int:
    time.hour += hours
    time.minute += minutes
    time.second += seconds
    time.millisecond += milliseconds
    return balance_time(time)


# ── add / subtract ────────────────────────────────────────────────────────────

def add(value: Any, duration: Optional[AnyDuration] = None, **kwargs: Any) -> Any:
    """
    Add a duration to a date, date-time or zoned date-time.

    Years are added first, then months (with the day constrained to the new
    month), then weeks and days with overflow balanced into months and years,
    and finally the result is clamped into the calendar's supported range.
    """
    d = as_duration(duration, **kwargs)
    if isinstance(value, values.ZonedDateTime):
        return add_zoned(value, d)
    if isinstance(value, values.Time):
        return add_time(value, d)

    draft = value._draft()
    calendar = draft.calendar
    if draft.has_time:
        days = _add_time_fields(draft, d.hours, d.minutes, d.seconds, d.milliseconds)
    elif d.has_time_fields:
        raise UnsupportedFieldError("A date without a time cannot add hours, minutes, seconds or milliseconds.")
    else:
        days = 0

    add_years(draft, d.years)
    calendar.balance_year_month(draft, value)

    draft.month += d.months
    balance_year_month(draft)
    calendar.constrain_month_day(draft)

    draft.day += d.weeks * 7 + d.days + days
    balance(draft)

    # Clamp into the calendar's supported range.
    if draft.year < 1:
        draft.year = draft.month = draft.day = 1

    max_year = calendar.get_years_in_era(draft)
    if draft.year > max_year:
        inverse = calendar.is_inverse_era(draft)
        draft.year = max_year
        draft.month = 1 if inverse else calendar.get_months_in_year(draft)
        draft.day = 1 if inverse else calendar.get_days_in_month(draft)

    if draft.month < 1:
        draft.month = draft.day = 1

    max_month = calendar.get_months_in_year(draft)
    if draft.month > max_month:
        draft.month = max_month
        draft.day = calendar.get_days_in_month(draft)

    calendar.constrain_month_day(draft)
    return draft.freeze()


def subtract(value: Any, duration: Optional[AnyDuration] = None, **kwargs: Any) -> Any:
    return add(value, -as_duration(duration, **kwargs))


def add_time(value: Any, duration: Optional[AnyDuration] = None, **kwargs: Any) -> Any:
    """Add clock time to a :class:`Time`, wrapping around midnight."""
    d = as_duration(duration, **kwargs)
    draft = value._draft()
    _add_time_fields(draft, d.hours, d.minutes, d.seconds, d.milliseconds)
    return draft.freeze()


def subtract_time(value: Any, duration: Optional[AnyDuration] = None, **kwargs: Any) -> Any:
    return add_time(value, -as_duration(duration, **kwargs))


# ── set ───────────────────────────────────────────────────────────────────────

def set_fields(value: Any, fields: Optional[AnyFields] = None, **kwargs: Any) -> Any:
    """Replace individual fields, then constrain the result."""
    changes = as_fields(fields, **kwargs)
    if isinstance(value, values.ZonedDateTime):
        return set_zoned(value, changes)
    if isinstance(value, values.Time):
        return set_time(value, changes)

    draft = value._draft()
    time_changes = {k: v for k, v in changes.items() if k in TIME_FIELDS}
    if time_changes and not draft.has_time:
        raise UnsupportedFieldError(f"A date has no time fields; cannot set {sorted(time_changes)}.")

    for name, field_value in changes.items():
        setattr(draft, name, field_value)

    constrain(draft)
    if draft.has_time:
        constrain_time(draft)
    return draft.freeze()


def set_time(value: Any, fields: Optional[AnyFields] = None, **kwargs: Any) -> Any:
    changes = as_fields(fields, **kwargs)
    draft = value._draft()
    for name, field_value in changes.items():
        if name not in TIME_FIELDS:
            raise UnsupportedFieldError(f"Cannot set {name!r} on a time of day.")
        setattr(draft, name, field_value)
    constrain_time(draft)
    return draft.freeze()


# ── cycle ─────────────────────────────────────────────────────────────────────

def cycle_value(
    value: int,
    amount: int,
    min_value: Optional[int],
    max_value: int,
    round: bool = False,
) -> int:
    """
    Move ``value`` by ``amount`` within ``[min_value, max_value]``, wrapping.

    With ``round`` the value first snaps to a multiple of ``amount`` in the
    direction of travel (minute 7 cycled by 15 becomes 15, not 22).  A
    ``min_value`` of ``None`` leaves the range unbounded below.
    """
    if amount == 0:
        return value

    if round:
        value += 1 if amount > 0 else -1
        if min_value is not None and value < min_value:
            value = max_value

        step = abs(amount)
        value = -(-value // step) * step if amount > 0 else (value // step) * step
        if min_value is not None and value > max_value:
            value = min_value
        return value

    value += amount
    if min_value is not None and not min_value <= value <= max_value:
        value = min_value + (value - min_value) % (max_value - min_value + 1)
    return value


def cycle_date(value: Any, field: str, amount: int, *, round: bool = False) -> Any:
    """Cycle ``era``, ``year``, ``month`` or ``day`` without carrying into larger fields."""
    draft = value._draft()
    calendar = draft.calendar

    if field == "era":
        eras = calendar.get_eras()
        try:
            idx = eras.index(value.era)
        except ValueError:
            raise InvalidFieldError(f"Unknown era {value.era!r}.") from None
        draft.era = eras[cycle_value(idx, amount, 0, len(eras) - 1, round)]
        constrain(draft)
    elif field == "year":
        if calendar.is_inverse_era(value):
            amount = -amount
        # Years below 1 are moved into the neighbouring era by balance_date.
        year = cycle_value(value.year, amount, None, MAX_CYCLE_YEAR, round)
        draft.year = 1 if year > MAX_CYCLE_YEAR else year
        calendar.balance_year_month(draft, value)
    elif field == "month":
        draft.month = cycle_value(
            value.month, amount, calendar.get_minimum_month_in_year(value), calendar.get_months_in_year(value), round
        )
    elif field == "day":
        draft.day = cycle_value(
            value.day, amount, calendar.get_minimum_day_in_month(value), calendar.get_maximum_day_in_month(value), round
        )
    else:
        raise UnsupportedFieldError(f"Unsupported field {field!r}.")

    # Clamp the day before balancing so a long month cycled into a short one does not carry.
    calendar.constrain_month_day(draft)
    balance(draft)
    constrain(draft)
    return draft.freeze()


def cycle_time(
    value: Any,
    field: str,
    amount: int,
    *,
    round: bool = False,
    hour_cycle: int = 24,
) -> Any:
    """Cycle a clock field; ``hour_cycle=12`` keeps the hour within its half-day."""
    draft = value._draft()
    if field == "hour":
        hours = value.hour
        min_value, max_value = 0, 23
        if hour_cycle == 12:
            pm = hours >= 12
            min_value = 12 if pm else 0
            max_value = 23 if pm else 11
        draft.hour = cycle_value(hours, amount, min_value, max_value, round)
    elif field == "minute":
        draft.minute = cycle_value(value.minute, amount, 0, 59, round)
    elif field == "second":
        draft.second = cycle_value(value.second, amount, 0, 59, round)
    elif field == "millisecond":
        draft.millisecond = cycle_value(value.millisecond, amount, 0, 999, round)
    else:
        raise UnsupportedFieldError(f"Unsupported field {field!r}.")
    return draft.freeze()


def cycle(value: Any, field: str, amount: int, *, round: bool = False, hour_cycle: int = 24) -> Any:
    if isinstance(value, values.ZonedDateTime):
        return cycle_zoned(value, field, amount, round=round, hour_cycle=hour_cycle)
    if field in TIME_FIELDS:
        if isinstance(value, values.CalendarDate):
            raise UnsupportedFieldError(f"A date has no {field!r} field.")
        return cycle_time(value, field, amount, round=round, hour_cycle=hour_cycle)
    if isinstance(value, values.Time):
        raise UnsupportedFieldError(f"A time of day has no {field!r} field.")
    return cycle_date(value, field, amount, round=round)


# ── zoned ─────────────────────────────────────────────────────────────────────

def add_zoned(value: Any, duration: Optional[AnyDuration] = None, **kwargs: Any) -> Any:
    """
    Add a duration to a zoned date-time.

    Date fields move the wall-clock date (re-resolved in the zone); time
    fields are then added as exact elapsed time, so adding 24 hours across a
    DST change differs from adding one day.
    """
    d = as_duration(duration, **kwargs)
    if d.has_date_fields:
        moved = add(conversion.to_calendar_date_time(value), d.date_part)
        ms = conversion.to_absolute(moved, value.time_zone)
    else:
        ms = conversion.epoch_from_date(value) - value.offset

    ms += d.milliseconds + d.seconds * 1000 + d.minutes * 60_000 + d.hours * HOUR_MS
    return conversion.to_calendar(conversion.from_absolute(ms, value.time_zone), value.calendar)


def subtract_zoned(value: Any, duration: Optional[AnyDuration] = None, **kwargs: Any) -> Any:
    return add_zoned(value, -as_duration(duration, **kwargs))


def cycle_zoned(
    value: Any,
    field: str,
    amount: int,
    *,
    round: bool = False,
    hour_cycle: int = 24,
) -> Any:
    """
    Cycle a field of a zoned date-time.

    Hours cycle over the real instants of the day, so a repeated hour at a
    fall-back transition is visited twice and a skipped hour not at all.
    """
    if field == "hour":
        tz = value.time_zone
        plain = conversion.to_calendar_date_time(value)
        gregorian = values.default_calendar()

        def day_bounds(hour: int) -> list[int]:
            local = conversion.to_calendar(set_time(plain, hour=hour), gregorian)
            candidates = [
                conversion.to_absolute(local, tz, "earlier"),
                conversion.to_absolute(local, tz, "later"),
            ]
            return [
                ms for ms in candidates
                if conversion.from_absolute(ms, tz).day == local.day
            ]

        min_hour, max_hour = 0, 23
        if hour_cycle == 12:
            pm = value.hour >= 12
            min_hour = 12 if pm else 0
            max_hour = 23 if pm else 11

        min_absolute = day_bounds(min_hour)[0]
        max_absolute = day_bounds(max_hour)[-1]

        ms = conversion.epoch_from_date(value) - value.offset
        hours, remainder = divmod(ms, HOUR_MS)
        ms = cycle_value(hours, amount, min_absolute // HOUR_MS, max_absolute // HOUR_MS, round) * HOUR_MS
        return conversion.to_calendar(conversion.from_absolute(ms + remainder, tz), value.calendar)

    if field in ("minute", "second", "millisecond"):
        return cycle_time(value, field, amount, round=round, hour_cycle=hour_cycle)

    if field in ("era", "year", "month", "day"):
        moved = cycle_date(conversion.to_calendar_date_time(value), field, amount, round=round)
        ms = conversion.to_absolute(moved, value.time_zone)
        return conversion.to_calendar(conversion.from_absolute(ms, value.time_zone), value.calendar)

    raise UnsupportedFieldError(f"Unsupported field {field!r}.")


def set_zoned(
    value: Any,
    fields: Optional[AnyFields] = None,
    *,
    disambiguation: Optional[str] = None,
    **kwargs: Any,
) -> Any:
    """Set wall-clock fields of a zoned date-time and re-resolve it in its zone."""
    changes = as_fields(fields, **kwargs)
    plain = conversion.to_calendar_date_time(value)
    moved = set_fields(plain, changes)
    if moved == plain:
        return value

    ms = conversion.to_absolute(moved, value.time_zone, disambiguation)
    return conversion.to_calendar(conversion.from_absolute(ms, value.time_zone), value.calendar)
