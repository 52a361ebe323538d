"""Region week data (CLDR): first day of the week and weekend days.

Day indices are 0-based with 0 = Sunday.
"""

from __future__ import annotations

import re
from typing import Optional

# Regions whose week does not start on Sunday.
WEEK_START: dict[str, int] = {
    "001": 1, "AD": 1, "AE": 6, "AF": 6, "AI": 1, "AL": 1, "AM": 1, "AN": 1,
    "AR": 1, "AT": 1, "AU": 1, "AX": 1, "AZ": 1, "BA": 1, "BE": 1, "BG": 1,
    "BH": 6, "BM": 1, "BN": 1, "BY": 1, "CH": 1, "CL": 1, "CM": 1, "CN": 1,
    "CR": 1, "CY": 1, "CZ": 1, "DE": 1, "DJ": 6, "DK": 1, "DZ": 6, "EC": 1,
    "EE": 1, "EG": 6, "ES": 1, "FI": 1, "FJ": 1, "FO": 1, "FR": 1, "GB": 1,
    "GE": 1, "GF": 1, "GP": 1, "GR": 1, "HR": 1, "HU": 1, "IE": 1, "IQ": 6,
    "IR": 6, "IS": 1, "IT": 1, "JO": 6, "KG": 1, "KW": 6, "KZ": 1, "LB": 1,
    "LI": 1, "LK": 1, "LT": 1, "LU": 1, "LV": 1, "LY": 6, "MC": 1, "MD": 1,
    "ME": 1, "MK": 1, "MN": 1, "MQ": 1, "MV": 5, "MY": 1, "NL": 1, "NO": 1,
    "NZ": 1, "OM": 6, "PL": 1, "QA": 6, "RE": 1, "RO": 1, "RS": 1, "RU": 1,
    "SD": 6, "SE": 1, "SI": 1, "SK": 1, "SM": 1, "SY": 6, "TJ": 1, "TM": 1,
    "TR": 1, "UA": 1, "UY": 1, "UZ": 1, "VA": 1, "VN": 1, "XK": 1,
}

DEFAULT_WEEKEND: tuple[int, int] = (6, 0)

WEEKEND: dict[str, tuple[int, int]] = {
    "AF": (4, 5), "AE": (5, 6), "BH": (5, 6), "DZ": (5, 6), "EG": (5, 6),
    "IL": (5, 6), "IQ": (5, 6), "IR": (5, 5), "JO": (5, 6), "KW": (5, 6),
    "LY": (5, 6), "OM": (5, 6), "QA": (5, 6), "SA": (5, 6), "SD": (5, 6),
    "SY": (5, 6), "YE": (5, 6),
}

# Likely region for locales given without one.
LIKELY_REGION: dict[str, str] = {
    "ar": "EG", "cs": "CZ", "da": "DK", "de": "DE", "el": "GR", "en": "US",
    "es": "ES", "fa": "IR", "fi": "FI", "fr": "FR", "he": "IL", "hi": "IN",
    "hu": "HU", "it": "IT", "ja": "JP", "ko": "KR", "nb": "NO", "nl": "NL",
    "pl": "PL", "pt": "BR", "ro": "RO", "ru": "RU", "sv": "SE", "th": "TH",
    "tr": "TR", "uk": "UA", "zh": "CN",
}

_REGION_RE = re.compile(r"^(?:[A-Za-z]{2}|\d{3})$")


def get_region(locale: str) -> Optional[str]:
    """Region subtag of ``locale`` (``"en-GB"`` -> ``"GB"``), or a likely one."""
    parts = re.split(r"[-_]", locale)
    for part in parts[1:]:
        if part.lower() == "u":
            break
        if _REGION_RE.match(part):
            return part.upper()
    return LIKELY_REGION.get(parts[0].lower())


def get_week_start(locale: str) -> int:
    region = get_region(locale)
    return WEEK_START.get(region, 0) if region else 0


def get_weekend(locale: Optional[str]) -> tuple[int, int]:
    region = get_region(locale) if locale else None
    return WEEKEND.get(region, DEFAULT_WEEKEND) if region else DEFAULT_WEEKEND
