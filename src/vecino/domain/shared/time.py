"""Time utilities for the domain layer."""

from datetime import date, datetime, time, timezone


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def date_to_utc_datetime(value: date) -> datetime:
    """Midnight UTC of ``value`` (BSON has no plain date type)."""
    return datetime.combine(value, time.min, tzinfo=timezone.utc)
