"""
Time-zone offsets from the IANA database (``zoneinfo``).

Instants are integer milliseconds since 1970-01-01T00:00Z; offsets are
integer milliseconds to add to UTC to obtain wall-clock time.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from calendrical.calendar._exceptions import InvalidTimeZoneError
from calendrical.calendar.julian import UNIX_EPOCH, julian_day_to_date
from calendrical.date.config import get_settings

logger = logging.getLogger(__name__)

DAY_MS: int = 86_400_000
HOUR_MS: int = 3_600_000

UTC_IDENTIFIERS = frozenset({"UTC", "Etc/UTC", "GMT", "Etc/GMT", "Etc/Universal", "Etc/Zulu"})

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# Lookups outside datetime's range reuse the rule in force at the boundary.
_MIN_MS = (datetime(1, 1, 3, tzinfo=timezone.utc) - _EPOCH) // timedelta(milliseconds=1)
_MAX_MS = (datetime(9999, 12, 29, tzinfo=timezone.utc) - _EPOCH) // timedelta(milliseconds=1)


def get_zone(time_zone: str) -> ZoneInfo:
    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidTimeZoneError(f"Unknown time zone {time_zone!r}.") from exc


def validate_time_zone(time_zone: str) -> str:
    if time_zone not in UTC_IDENTIFIERS:
        get_zone(time_zone)
    return time_zone


def get_time_zone_offset(ms: int, time_zone: str) -> int:
    """Offset from UTC, in milliseconds, in force at instant ``ms``."""
    if time_zone in UTC_IDENTIFIERS:
        return 0
    zone = get_zone(time_zone)
    instant = _EPOCH + timedelta(milliseconds=min(max(ms, _MIN_MS), _MAX_MS))
    offset = instant.astimezone(zone).utcoffset()
    return offset // timedelta(milliseconds=1) if offset is not None else 0


def get_time_zone_parts(ms: int, time_zone: str) -> tuple[int, int, int, int, int, int, int]:
    """Wall-clock ``(year, month, day, hour, minute, second, millisecond)`` at ``ms``.

    ``year`` is the extended (astronomical) Gregorian year.
    """
    local = ms + get_time_zone_offset(ms, time_zone)
    days, rem = divmod(local, DAY_MS)
    year, month, day = julian_day_to_date(days + UNIX_EPOCH)
    hour, rem = divmod(rem, HOUR_MS)
    minute, rem = divmod(rem, 60_000)
    second, millisecond = divmod(rem, 1000)
    return year, month, day, hour, minute, second, millisecond


# ── local time zone ───────────────────────────────────────────────────────────

_local_time_zone: Optional[str] = None


def _detect_local_time_zone() -> str:
    configured = get_settings().time_zone
    if configured:
        return validate_time_zone(configured)

    tz = os.environ.get("TZ", "").lstrip(":")
    if tz:
        try:
            return validate_time_zone(tz)
        except InvalidTimeZoneError:
            logger.warning("Ignoring TZ=%r: not an IANA time zone.", tz)

    localtime = os.path.realpath("/etc/localtime")
    marker = "zoneinfo" + os.sep
    if marker in localtime:
        candidate = localtime.split(marker, 1)[1]
        try:
            return validate_time_zone(candidate)
        except InvalidTimeZoneError:
            logger.warning("Ignoring /etc/localtime link to %r.", candidate)

    logger.warning("Could not determine the local time zone; using UTC.")
    return "UTC"


def get_local_time_zone() -> str:
    global _local_time_zone
    if _local_time_zone is None:
        _local_time_zone = _detect_local_time_zone()
        logger.debug("Local time zone resolved to %s", _local_time_zone)
    return _local_time_zone


def set_local_time_zone(time_zone: str) -> None:
    global _local_time_zone
    _local_time_zone = validate_time_zone(time_zone)


def reset_local_time_zone() -> None:
    global _local_time_zone
    _local_time_zone = None
