"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_iso(dt: datetime | None) -> str | None:
    """Serialize a datetime as an ISO-8601 UTC string (None passes through)."""
    normalized = ensure_utc(dt)
    return normalized.isoformat() if normalized is not None else None


def parse_iso(value: str | None) -> datetime | None:
    """
    Parse an ISO-8601 string into a UTC-aware datetime.

    Accepts the trailing 'Z' form produced by JavaScript clients.

    Raises:
        ValueError: If the string is not a valid ISO-8601 timestamp.
    """
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(value))


def utc_day(dt: datetime) -> date:
    """Return the UTC calendar day of a datetime (naive values are taken as UTC)."""
    normalized = ensure_utc(dt)
    assert normalized is not None
    return normalized.date()
