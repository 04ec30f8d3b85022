"""Date formatting helpers for receipts, reports and JSON output."""
from datetime import datetime, timezone
from typing import Optional

import pytz

from locatecar.utils.constants import DEFAULT_TIMEZONE, DISPLAY_FMT


def utcnow() -> datetime:
    """Aware 'now' in UTC; wrapped so services can take it as a clock."""
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_iso(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.
    Supports:
      - 'YYYY-MM-DD'
      - 'YYYY-MM-DDTHH:MM[:SS]'
      - Above with 'Z' or offsets like '+00:00'
    Returns None for empty input; raises ValueError on garbage.
    """
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    return as_utc(datetime.fromisoformat(s))


def fmt_local(value: Optional[datetime], tz_name: str = DEFAULT_TIMEZONE) -> str:
    """
    Format a UTC timestamp in the given local zone as dd/mm/YYYY HH:MM.
    Naive datetimes are assumed to be UTC. None renders as ''.
    """
    if value is None:
        return ""
    local = pytz.timezone(tz_name)
    return as_utc(value).astimezone(local).strftime(DISPLAY_FMT)


def fmt_iso(value: Optional[datetime]) -> Optional[str]:
    """ISO string (seconds precision) for JSON payloads."""
    if value is None:
        return None
    return as_utc(value).isoformat(timespec="seconds")
