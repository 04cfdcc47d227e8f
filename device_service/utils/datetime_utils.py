"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the application.

Functions:
- utc_now(): Returns timezone-aware UTC datetime
- ensure_utc(): Normalize naive/aware datetimes to aware UTC

Device creation times are minted with utc_now() and normalized with
ensure_utc() when read back from MongoDB, which returns naive datetimes.
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


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
