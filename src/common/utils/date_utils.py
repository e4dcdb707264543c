"""Utility functions for date manipulation."""

from datetime import datetime

import pytz


def utc_now() -> datetime:
    """Returns the current time as a timezone-aware UTC datetime."""
    return datetime.now(pytz.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Interprets naive datetimes as UTC and converts aware ones to UTC."""
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)


def format_datetime_for_db(dt: datetime | None) -> str | None:
    """Formats a datetime as a UTC MySQL DATETIME string."""
    if dt is None:
        return None
    return ensure_utc(dt).strftime("%Y-%m-%d %H:%M:%S")


def parse_datetime_from_db(value: datetime | str | None) -> datetime | None:
    """Converts a MySQL DATETIME value (stored as UTC) back to an aware datetime."""
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = datetime.strptime(value, "%Y-%m-%d %H:%M:%S")
        except ValueError:
            return None
    return ensure_utc(value)


def format_datetime_for_api(dt: datetime) -> str:
    """Formats a datetime as an ISO-8601 UTC string with a trailing Z."""
    return ensure_utc(dt).isoformat().replace("+00:00", "Z")
