"""Utility modules for the SmartSpend API."""

from .datetime_utils import (
    utc_now,
    ensure_utc,
    parse_datetime,
    is_date_only,
    end_of_day,
)

__all__ = [
    "utc_now",
    "ensure_utc",
    "parse_datetime",
    "is_date_only",
    "end_of_day",
]
