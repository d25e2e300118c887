"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
Everything persisted to MongoDB is a timezone-aware UTC datetime.

Functions:
- utc_now(): Current UTC time (timezone-aware)
- ensure_utc(): Normalize naive/aware datetimes to UTC
- parse_datetime(): Parse ISO 8601 dates and datetimes coming from clients
- is_date_only(): Whether a client value carries no time component
- end_of_day(): Last representable instant of a UTC calendar day
"""
import re
from datetime import date, datetime, time, timedelta, timezone as dt_timezone
from typing import Any, Optional


_DATE_ONLY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def is_date_only(value: Any) -> bool:
    """Return True for a bare calendar date ("2025-01-31" or a date object)."""
    if isinstance(value, datetime):
        return False
    if isinstance(value, date):
        return True
    return isinstance(value, str) and bool(_DATE_ONLY_PATTERN.match(value.strip()))


def parse_datetime(value: Any) -> datetime:
    """
    Parse a client-supplied date or datetime into a UTC datetime.

    Accepts datetime/date objects and ISO 8601 strings such as
    "2025-12-24", "2025-12-24T10:30:00Z" or "2025-12-24T10:30:00+05:30".
    Naive values are taken as UTC.

    Raises:
        ValueError: If the value is not a well-formed date
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=dt_timezone.utc)
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Invalid date format")

    normalized = value.strip()
    if normalized.endswith(("Z", "z")):
        normalized = normalized[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        raise ValueError("Invalid date format")
    return ensure_utc(parsed)


def end_of_day(dt: datetime) -> datetime:
    """Return the last microsecond of dt's UTC calendar day."""
    start = ensure_utc(dt).replace(hour=0, minute=0, second=0, microsecond=0)
    return start + timedelta(days=1) - timedelta(microseconds=1)
