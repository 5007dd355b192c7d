"""
Instant parsing helpers shared by the schedule models and the conflict engine.

All comparisons happen on timezone-aware UTC datetimes. Naive ISO strings are
read as wall-clock time in the site time zone, so '09:00' and '00:00+00:00'
compare correctly for a JST site.
"""

from datetime import date as date_type, datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional, Union
from zoneinfo import ZoneInfo

from config.settings import SCHEDULING_SETTINGS

SITE_TZ = ZoneInfo(SCHEDULING_SETTINGS["time_zone"])


def _from_iso(text: str) -> Optional[datetime]:
    text = text.strip()
    if not text:
        return None
    # fromisoformat() only learned the 'Z' suffix in 3.11
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


@lru_cache(maxsize=16384)
def _parse_cached(text: str) -> Optional[datetime]:
    parsed = _from_iso(text)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=SITE_TZ)
    return parsed.astimezone(timezone.utc)


def parse_instant(value) -> Optional[datetime]:
    """
    Parse an ISO-8601 string into an aware UTC datetime.
    Returns None for blank, non-string or malformed input (never raises).
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=SITE_TZ)
        return value.astimezone(timezone.utc)
    if not isinstance(value, str):
        return None
    return _parse_cached(value)


def local_day_key(value) -> Optional[str]:
    """YYYY-MM-DD of the instant in the site time zone."""
    instant = parse_instant(value)
    if instant is None:
        return None
    return instant.astimezone(SITE_TZ).date().isoformat()


def fiscal_year_of(value) -> Optional[str]:
    """Calendar year of the instant in the site time zone, used for annual rollups."""
    instant = parse_instant(value)
    if instant is None:
        return None
    return str(instant.astimezone(SITE_TZ).year)


def normalize_day(day: Union[str, date_type, datetime]) -> str:
    """Accept a date, datetime or 'YYYY-MM-DD' string and return the day key."""
    if isinstance(day, datetime):
        return local_day_key(day)
    if isinstance(day, date_type):
        return day.isoformat()
    return date_type.fromisoformat(day.strip()[:10]).isoformat()


def shift_instant(value: str, minutes: int) -> Optional[str]:
    """
    Move an ISO string by N minutes, keeping its original offset style
    (naive stays naive, '+09:00' stays '+09:00').
    """
    if not isinstance(value, str):
        return None
    parsed = _from_iso(value)
    if parsed is None:
        return None
    return (parsed + timedelta(minutes=minutes)).isoformat()
