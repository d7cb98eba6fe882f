from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    """Server-side 'now' in UTC (naive, canonical)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def days_ago(days: int) -> datetime:
    return utcnow() - timedelta(days=days)


def is_same_day(dt: Optional[datetime], other: Optional[datetime] = None) -> bool:
    if dt is None:
        return False
    other = other or utcnow()
    return dt.date() == other.date()


def to_utc_z(dt: Optional[datetime]) -> Optional[str]:
    """Stored timestamps are naive UTC; render them to the second with a Z suffix."""
    if dt is None:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt.replace(microsecond=0).isoformat() + "Z"
