from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional


UTC = timezone.utc


def utcnow() -> datetime:
    """
    Returns timezone-aware current UTC time.
    """
    return datetime.now(UTC)


def ensure_aware(dt: datetime, assume_utc: bool = True) -> datetime:
    """
    Ensure a datetime is timezone-aware. If naive and assume_utc is True,
    interpret as UTC; otherwise raise ValueError.
    """
    if dt.tzinfo is not None:
        return dt.astimezone(UTC)
    if assume_utc:
        return dt.replace(tzinfo=UTC)
    raise ValueError("Naive datetime provided and assume_utc=False")


def coerce_window_days(value: int, *, min_days: int = 1, max_days: int = 90) -> int:
    """
    Clamp a look-back window to allowed bounds.
    """
    if value < min_days:
        return min_days
    if value > max_days:
        return max_days
    return value


def window_start(days: int, *, now: Optional[datetime] = None) -> datetime:
    """
    Start of a rolling window of `days` days ending at `now`.
    """
    return ensure_aware(now or utcnow()) - timedelta(days=days)


def day_key(dt: datetime) -> date:
    """Calendar day in UTC."""
    return ensure_aware(dt).date()


def weekday_label(dt: datetime) -> str:
    """Short weekday name such as 'Mon'."""
    return ensure_aware(dt).strftime("%a")
