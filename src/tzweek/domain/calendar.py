"""Fixed-offset calendar truncation and ISO-8601 week numbering.

These are the "start of calendar unit" primitives the fixed-convention week
operations delegate to.  Truncation happens in the instant's own UTC offset:
a datetime carrying a zone is first frozen to the offset it has at that
instant, so no zone rules are consulted.  Weeks follow ISO-8601 and start
on Monday.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta, timezone

from tzweek.domain.errors import OutOfRangeError
from tzweek.domain.instants import TICK, ensure_aware, shift
from tzweek.domain.types import TimeUnit

_FLAT_UNITS: dict[TimeUnit, timedelta] = {
    TimeUnit.SECOND: timedelta(seconds=1),
    TimeUnit.MINUTE: timedelta(minutes=1),
    TimeUnit.HOUR: timedelta(hours=1),
    TimeUnit.DAY: timedelta(days=1),
    TimeUnit.WEEK: timedelta(weeks=1),
}


@dataclass(frozen=True)
class IsoWeek:
    """An ISO-8601 week: the ISO year plus week number 1–53."""

    year: int
    week: int

    def __str__(self) -> str:
        return f"{self.year}-W{self.week:02d}"


def freeze_offset(instant: datetime) -> datetime:
    """Re-express *instant* with a fixed ``timezone`` equal to its current offset."""
    aware = ensure_aware(instant)
    offset = aware.utcoffset()
    assert offset is not None
    return aware.astimezone(timezone(offset))


def start_of(instant: datetime, unit: TimeUnit | str) -> datetime:
    """Truncate *instant* to the start of the containing *unit*."""
    unit = TimeUnit(unit)
    value = freeze_offset(instant)
    if unit is TimeUnit.SECOND:
        return value.replace(microsecond=0)
    if unit is TimeUnit.MINUTE:
        return value.replace(second=0, microsecond=0)
    if unit is TimeUnit.HOUR:
        return value.replace(minute=0, second=0, microsecond=0)
    midnight = value.replace(hour=0, minute=0, second=0, microsecond=0)
    if unit is TimeUnit.DAY:
        return midnight
    if unit is TimeUnit.WEEK:
        return shift(midnight, -timedelta(days=midnight.weekday()))
    if unit is TimeUnit.MONTH:
        return midnight.replace(day=1)
    return midnight.replace(month=1, day=1)


def add_units(instant: datetime, unit: TimeUnit | str, count: int) -> datetime:
    """Shift *instant* by *count* units.

    Units up to a week are flat durations.  Months and years move the
    calendar fields and clamp the day to the target month's length.
    Results past ``datetime.min``/``max`` raise :class:`OutOfRangeError`.
    """
    unit = TimeUnit(unit)
    step = _FLAT_UNITS.get(unit)
    if step is not None:
        return shift(instant, step * count)
    months = count * 12 if unit is TimeUnit.YEAR else count
    index = instant.year * 12 + (instant.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    if not MINYEAR <= year <= MAXYEAR:
        raise OutOfRangeError(f"{instant.isoformat()} plus {count} {unit}(s) is out of range")
    day = min(instant.day, _days_in_month(year, month))
    return instant.replace(year=year, month=month, day=day)


def end_of(instant: datetime, unit: TimeUnit | str) -> datetime:
    """Last tick of the *unit* containing *instant*."""
    return shift(add_units(start_of(instant, unit), unit, 1), -TICK)


def iso_week(value: date) -> IsoWeek:
    """ISO year and week of a calendar date (datetimes use their own date)."""
    if isinstance(value, datetime):
        value = value.date()
    iso = value.isocalendar()
    return IsoWeek(year=iso.year, week=iso.week)


def iso_week_number(value: date) -> int:
    """ISO-8601 week number (1–53) of a calendar date."""
    return iso_week(value).week


def _days_in_month(year: int, month: int) -> int:
    if month == 12:
        return 31
    return (date(year, month + 1, 1) - timedelta(days=1)).day
