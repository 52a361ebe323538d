"""
Proleptic Gregorian <-> julian day number conversion.

Every calendar routes through these functions, so they use exact integer
arithmetic only.  Years are *extended* (astronomical) years: 1 BC is year 0,
2 BC is year -1.

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    jd = date_to_julian_day(np.array([2019, 2020]), 1, 31)
    years, months, days = julian_day_to_date(jd + 30)
"""

from __future__ import annotations

from typing import Union

import numpy as np

IntLike = Union[int, "np.ndarray"]

GREGORIAN_EPOCH: int = 1721426   # 0001-01-01
UNIX_EPOCH: int = 2440588        # 1970-01-01

_DAYS_IN_MONTH = np.array([31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64)


def _is_scalar(*values: IntLike) -> bool:
    return all(np.ndim(v) == 0 for v in values)


def _as_int_array(value: IntLike) -> np.ndarray:
    return np.asarray(value, dtype=np.int64)


# ── array kernels ─────────────────────────────────────────────────────────────

def _leap(year: np.ndarray) -> np.ndarray:
    return (year % 4 == 0) & ((year % 100 != 0) | (year % 400 == 0))


def _to_julian_day(year: np.ndarray, month: np.ndarray, day: np.ndarray) -> np.ndarray:
    y1 = year - 1
    month_offset = np.where(month <= 2, 0, np.where(_leap(year), -1, -2))
    return (
        GREGORIAN_EPOCH - 1
        + 365 * y1
        + y1 // 4
        - y1 // 100
        + y1 // 400
        + (367 * month - 362 + 12 * (month_offset + day)) // 12
    )


def _from_julian_day(jd: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    depoch = jd - GREGORIAN_EPOCH
    quadricent = depoch // 146097
    dqc = depoch % 146097
    cent = dqc // 36524
    dcent = dqc % 36524
    quad = dcent // 1461
    dquad = dcent % 1461
    yindex = dquad // 365
    year = (
        quadricent * 400 + cent * 100 + quad * 4 + yindex
        + np.where((cent != 4) & (yindex != 4), 1, 0)
    )

    ones = np.ones_like(year)
    year_day = jd - _to_julian_day(year, ones, ones)
    leap_adj = np.where(
        jd < _to_julian_day(year, ones * 3, ones), 0, np.where(_leap(year), 1, 2)
    )
    month = ((year_day + leap_adj) * 12 + 373) // 367
    day = jd - _to_julian_day(year, month, ones) + 1
    return year, month, day


# ── public API ────────────────────────────────────────────────────────────────

def is_leap_year(year: IntLike) -> Union[bool, np.ndarray]:
    result = _leap(_as_int_array(year))
    return bool(result) if _is_scalar(year) else result


def days_in_month(year: IntLike, month: IntLike) -> IntLike:
    y = _as_int_array(year)
    m = _as_int_array(month)
    if np.any((m < 1) | (m > 12)):
        raise ValueError(f"Month must be in 1..12; got {month}.")
    result = _DAYS_IN_MONTH[m - 1] + ((m == 2) & _leap(y))
    return int(result) if _is_scalar(year, month) else result


def date_to_julian_day(year: IntLike, month: IntLike, day: IntLike) -> IntLike:
    """Julian day number of a proleptic Gregorian date (extended year)."""
    y, m, d = np.broadcast_arrays(_as_int_array(year), _as_int_array(month), _as_int_array(day))
    result = _to_julian_day(y, m, d)
    return int(result) if _is_scalar(year, month, day) else result


def julian_day_to_date(jd: IntLike) -> tuple[IntLike, IntLike, IntLike]:
    """Inverse of :func:`date_to_julian_day`; returns ``(year, month, day)``."""
    year, month, day = _from_julian_day(_as_int_array(jd))
    if _is_scalar(jd):
        return int(year), int(month), int(day)
    return year, month, day


def to_extended_year(era: str, year: int) -> int:
    return 1 - year if era == "BC" else year


def from_extended_year(year: int) -> tuple[str, int]:
    if year <= 0:
        return "BC", 1 - year
    return "AD", year
