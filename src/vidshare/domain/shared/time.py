"""UTC clock helpers. Every timestamp the domain stores is timezone-aware."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Attach UTC to a naive timestamp.

    SQLite drops the offset of ``DateTime(timezone=True)`` columns, so
    values read back from it are naive UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
