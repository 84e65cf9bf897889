"""Instant normalization helpers shared by the calendar and rules modules."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from tzweek.domain.errors import NaiveInstantError, OutOfRangeError

# Smallest step a datetime can represent; "end of" results sit one tick
# before the next boundary.
TICK = timedelta(microseconds=1)


def ensure_aware(instant: datetime) -> datetime:
    """Return *instant* unchanged, or raise if it carries no UTC offset."""
    if not isinstance(instant, datetime):
        raise TypeError(f"Expected datetime, got {type(instant).__name__}")
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise NaiveInstantError(f"Instant must be timezone-aware: {instant.isoformat()}")
    return instant


def to_utc(instant: datetime) -> datetime:
    """Normalize an aware datetime to UTC."""
    aware = ensure_aware(instant)
    try:
        return aware.astimezone(UTC)
    except OverflowError as exc:
        raise OutOfRangeError(f"{aware.isoformat()} has no UTC equivalent") from exc


def shift(value: datetime, delta: timedelta) -> datetime:
    """``value + delta``, raising :class:`OutOfRangeError` past ``datetime.max``/``min``."""
    try:
        return value + delta
    except OverflowError as exc:
        raise OutOfRangeError(f"{value.isoformat()} shifted by {delta} is out of range") from exc


def as_utc(local: datetime, offset: timedelta) -> datetime:
    """Map a naive wall clock observed at *offset* to a UTC instant."""
    return shift(local, -offset).replace(tzinfo=UTC)
