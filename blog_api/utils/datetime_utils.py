"""
Centralized DateTime Utilities
==============================

All timestamps persisted by the service are timezone-aware UTC datetimes.

Functions:
- utc_now(): current time as an aware UTC datetime (millisecond precision)
- ensure_utc(): normalize naive/aware datetimes read back from MongoDB
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Truncated to milliseconds, which is the resolution BSON dates keep, so a
    value compares equal before and after a round trip through MongoDB.
    """
    now = datetime.now(dt_timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


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
