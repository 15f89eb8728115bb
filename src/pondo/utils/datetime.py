"""Datetime utilities with consistent UTC timezone handling.

All timestamps pondo writes are UTC, millisecond precision, with a ``Z``
suffix (``2025-01-02T03:04:05.678Z``).
"""

from datetime import datetime, timezone
from typing import Optional


def now_utc() -> datetime:
    """Return current datetime in UTC timezone."""
    return datetime.now(timezone.utc)


def ensure_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """Ensure datetime is timezone-aware, assuming UTC if naive.

    Args:
        dt: Datetime to check/convert, or None

    Returns:
        Timezone-aware datetime, or None if input was None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt


def to_iso_string(dt: Optional[datetime]) -> Optional[str]:
    """Convert datetime to a UTC ISO-8601 string with millisecond precision.

    Args:
        dt: Datetime to convert, or None

    Returns:
        ISO string ending in ``Z``, or None if input was None
    """
    if dt is None:
        return None

    utc_dt = ensure_aware(dt).astimezone(timezone.utc)
    return utc_dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_iso() -> str:
    """Return the current UTC time as an ISO string."""
    return to_iso_string(now_utc())
