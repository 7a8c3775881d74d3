"""
Time helpers. All stored timestamps are ISO-8601 strings in UTC.
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc_isoformat(value: datetime) -> str:
    """Format a datetime as ISO-8601, treating naive values as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def timestamp() -> str:
    """Current time as a stored timestamp string."""
    return to_utc_isoformat(utc_now())
