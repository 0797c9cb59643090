"""General utility functions."""
from datetime import datetime, timezone
from typing import Optional


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC timezone."""
    if dt.tzinfo is None:
        # Assume UTC if no timezone
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def is_past(deadline: Optional[datetime], now: Optional[datetime] = None) -> bool:
    """
    Check whether a deadline has passed.

    Args:
        deadline: Deadline (timezone-aware or naive, assumed UTC if naive).
            None means there is no deadline.
        now: Reference time, defaults to the current UTC time

    Returns:
        bool: True if a deadline is set and ``now`` is after it
    """
    if deadline is None:
        return False
    now = to_utc(now) if now else datetime.now(timezone.utc)
    return now > to_utc(deadline)
