"""tzweek — calendar week boundaries that stay correct across DST transitions."""

from tzweek.domain.calendar import IsoWeek, end_of, iso_week, iso_week_number, start_of
from tzweek.domain.errors import (
    InvalidWeekdayError,
    InvalidZoneError,
    NaiveInstantError,
    OutOfRangeError,
    TzWeekError,
    ZoneRulesError,
)
from tzweek.domain.instants import TICK
from tzweek.domain.rules import (
    FixedOffsetRules,
    TimeZoneRules,
    Transition,
    TransitionTableRules,
    TzinfoRules,
    resolve_zone,
)
from tzweek.domain.types import TimeUnit, Weekday
from tzweek.domain.weeks import (
    WeekBounds,
    WeekSpec,
    end_of_next_tz_week,
    end_of_next_week,
    end_of_previous_tz_week,
    end_of_previous_week,
    end_of_tz_week,
    end_of_week,
    resolve_week_start,
    start_of_next_tz_week,
    start_of_next_week,
    start_of_previous_tz_week,
    start_of_previous_week,
    start_of_tz_week,
    start_of_week,
    tz_week_bounds,
    tz_week_number,
    utc_week_number,
)

__version__ = "0.3.0"

__all__ = [
    "TICK",
    "FixedOffsetRules",
    "InvalidWeekdayError",
    "InvalidZoneError",
    "IsoWeek",
    "NaiveInstantError",
    "OutOfRangeError",
    "TimeUnit",
    "TimeZoneRules",
    "Transition",
    "TransitionTableRules",
    "TzWeekError",
    "TzinfoRules",
    "WeekBounds",
    "WeekSpec",
    "Weekday",
    "ZoneRulesError",
    "__version__",
    "end_of",
    "end_of_next_tz_week",
    "end_of_next_week",
    "end_of_previous_tz_week",
    "end_of_previous_week",
    "end_of_tz_week",
    "end_of_week",
    "iso_week",
    "iso_week_number",
    "resolve_week_start",
    "resolve_zone",
    "start_of",
    "start_of_next_tz_week",
    "start_of_next_week",
    "start_of_previous_tz_week",
    "start_of_previous_week",
    "start_of_tz_week",
    "start_of_week",
    "tz_week_bounds",
    "tz_week_number",
    "utc_week_number",
]
