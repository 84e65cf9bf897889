"""Weekday and calendar-unit enums.

``Weekday`` values match :meth:`datetime.date.weekday` (Monday is 0) so that
weekday arithmetic never needs a translation table.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum

from tzweek.domain.errors import InvalidWeekdayError


class Weekday(IntEnum):
    """Day of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: Weekday | int | str) -> Weekday:
        """Coerce a weekday name, three-letter abbreviation, or index.

        Names are case-insensitive (``"sunday"``, ``"Sun"``).  Integers use
        the ``date.weekday()`` numbering.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidWeekdayError(f"Weekday index out of range: {value}") from None
        if isinstance(value, str):
            text = value.strip().upper()
            if text.isdigit():
                return cls.parse(int(text))
            for day in cls:
                if text in (day.name, day.name[:3]):
                    return day
        raise InvalidWeekdayError(f"Unknown weekday: {value!r}")


class TimeUnit(StrEnum):
    """Calendar units understood by :func:`tzweek.domain.calendar.start_of`."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
