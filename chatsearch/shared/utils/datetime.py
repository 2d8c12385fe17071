"""UTC datetime helpers.

Chat, message and document timestamps are timezone-aware UTC. Rows read
back from drivers that return naive values are normalized at the
repository boundary so recency ordering compares like with like.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as a UTC-aware datetime.

    Naive values are assumed to be UTC; aware values are converted.

    Args:
        dt: A datetime that may be naive or aware, or None.

    Returns:
        UTC-aware datetime or None.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
