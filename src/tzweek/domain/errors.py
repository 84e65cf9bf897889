"""Exception hierarchy for week-boundary computations.

Every failure propagates synchronously to the caller.  The service layer maps
these onto ``ServiceError`` codes; library callers catch them directly.
"""

from __future__ import annotations


class TzWeekError(Exception):
    """Base class for all tzweek errors."""


class InvalidZoneError(TzWeekError):
    """The supplied zone identifier or rules object cannot be resolved."""


class ZoneRulesError(TzWeekError):
    """The rules source could not produce an offset for a local wall clock."""


class NaiveInstantError(TzWeekError, ValueError):
    """A datetime without a UTC offset was passed where an instant is required."""


class InvalidWeekdayError(TzWeekError, ValueError):
    """A first-day-of-week value could not be interpreted."""


class OutOfRangeError(TzWeekError, OverflowError):
    """A boundary or wall clock falls outside the range ``datetime`` can represent."""
