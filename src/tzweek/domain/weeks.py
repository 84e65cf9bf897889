"""Week boundaries, in a fixed calendar convention and in arbitrary time zones.

Fixed-convention operations (``start_of_week`` and friends) truncate in the
instant's own UTC offset and use ISO Monday weeks.  They are flat arithmetic
over :func:`tzweek.domain.calendar.start_of`.

Zone-aware operations (``*_tz_week``) go through :func:`resolve_week_start`:

1. convert the instant to the zone's local wall clock, using the offset in
   effect at that instant;
2. truncate to local midnight and step back to the configured first day;
3. map that wall clock back to one UTC instant.  A wall clock inside a DST
   gap moves forward to the first valid local minute.  A wall clock inside a
   DST fold takes the larger offset, which is the earlier UTC instant.

Every zone-aware result is a UTC ``datetime``.

INVARIANT: week starts never move forward past the nominal local boundary
except to escape a DST gap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, time, timedelta, tzinfo

from tzweek.domain.calendar import end_of, iso_week_number, start_of
from tzweek.domain.errors import ZoneRulesError
from tzweek.domain.instants import TICK, as_utc, shift, to_utc
from tzweek.domain.rules import TimeZoneRules, resolve_zone
from tzweek.domain.types import TimeUnit, Weekday

logger = logging.getLogger(__name__)

WEEK = timedelta(days=7)
GAP_STEP = timedelta(minutes=1)
# Longest real-world gap is Pacific/Apia skipping 2011-12-30 entirely.
MAX_GAP = timedelta(hours=48)

ZoneRef = TimeZoneRules | tzinfo | str
WeekdayRef = Weekday | int | str


@dataclass(frozen=True)
class WeekSpec:
    """Where weeks start: which weekday, observed in which zone."""

    rules: TimeZoneRules
    first_day_of_week: Weekday = Weekday.MONDAY

    @classmethod
    def build(cls, zone: ZoneRef, first_day_of_week: WeekdayRef = Weekday.MONDAY) -> WeekSpec:
        """Resolve *zone* and *first_day_of_week* into a spec."""
        return cls(rules=resolve_zone(zone), first_day_of_week=Weekday.parse(first_day_of_week))


@dataclass(frozen=True)
class WeekBounds:
    """First and last tick of a week, both UTC instants."""

    start: datetime
    end: datetime

    def __contains__(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end


# --- Zone-aware resolution ---


def local_wall_clock(instant: datetime, rules: TimeZoneRules) -> datetime:
    """Naive local wall clock of *instant* under the offset in effect then."""
    utc = to_utc(instant)
    return shift(utc, rules.utc_offset(utc)).replace(tzinfo=None)


def nominal_week_start(instant: datetime, spec: WeekSpec) -> datetime:
    """Local midnight of the configured first day, before any DST fix-up."""
    local = local_wall_clock(instant, spec.rules)
    midnight = datetime.combine(local.date(), time())
    diff = (7 + (midnight.weekday() - spec.first_day_of_week)) % 7
    return shift(midnight, -timedelta(days=diff))


def to_instant(local: datetime, rules: TimeZoneRules) -> datetime:
    """Map a naive wall clock to a single UTC instant.

    Gap: advance minute by minute to the earliest valid local time at or
    after *local*.  Fold: use the larger of the two offsets.

    Raises:
        ZoneRulesError: The rules yield no valid time within ``MAX_GAP``,
            or cannot produce an offset at all.
        OutOfRangeError: The search or the UTC result passes ``datetime.max``.
    """
    nominal = local
    if rules.is_invalid(local):
        while rules.is_invalid(local):
            local = shift(local, GAP_STEP)
            if local - nominal > MAX_GAP:
                raise ZoneRulesError(
                    f"{rules.key}: no valid local time within {MAX_GAP} of {nominal.isoformat()}"
                )
        logger.debug(
            "%s: %s falls in a DST gap, advanced to %s",
            rules.key,
            nominal,
            local,
            extra={
                "zone": rules.key,
                "nominal": nominal.isoformat(),
                "resolved": local.isoformat(),
            },
        )

    if rules.is_ambiguous(local):
        first, second = rules.ambiguous_offsets(local)
        offset = max(first, second)
        logger.debug(
            "%s: %s is ambiguous (%s, %s), using %s",
            rules.key,
            local,
            first,
            second,
            offset,
            extra={
                "zone": rules.key,
                "nominal": local.isoformat(),
                "offsets": [str(first), str(second)],
            },
        )
    else:
        offset = rules.local_offset(local)
    return as_utc(local, offset)


def resolve_week_start(instant: datetime, spec: WeekSpec) -> datetime:
    """UTC instant at which the week containing *instant* starts in ``spec``'s zone."""
    return to_instant(nominal_week_start(instant, spec), spec.rules)


def resolve_week_bounds(instant: datetime, spec: WeekSpec) -> WeekBounds:
    """Start and end of the zone-local week containing *instant*.

    The end is resolved from next week's nominal boundary, so a week that
    crosses a DST transition is 167 or 169 hours long rather than a flat 168.
    """
    nominal = nominal_week_start(instant, spec)
    return WeekBounds(
        start=to_instant(nominal, spec.rules),
        end=shift(to_instant(shift(nominal, WEEK), spec.rules), -TICK),
    )


# --- Fixed convention ---


def start_of_week(instant: datetime) -> datetime:
    return start_of(instant, TimeUnit.WEEK)


def end_of_week(instant: datetime) -> datetime:
    return end_of(instant, TimeUnit.WEEK)


def start_of_next_week(instant: datetime) -> datetime:
    return shift(start_of_week(instant), WEEK)


def start_of_previous_week(instant: datetime) -> datetime:
    return shift(start_of_week(instant), -WEEK)


def end_of_next_week(instant: datetime) -> datetime:
    return shift(end_of_week(instant), WEEK)


def end_of_previous_week(instant: datetime) -> datetime:
    return shift(end_of_week(instant), -WEEK)


# --- Zone aware ---


def start_of_tz_week(
    instant: datetime, zone: ZoneRef, first_day_of_week: WeekdayRef = Weekday.MONDAY
) -> datetime:
    """Start of the week containing *instant*, as observed in *zone*."""
    return resolve_week_start(instant, WeekSpec.build(zone, first_day_of_week))


def start_of_next_tz_week(
    instant: datetime, zone: ZoneRef, first_day_of_week: WeekdayRef = Weekday.MONDAY
) -> datetime:
    return shift(start_of_tz_week(instant, zone, first_day_of_week), WEEK)


def start_of_previous_tz_week(
    instant: datetime, zone: ZoneRef, first_day_of_week: WeekdayRef = Weekday.MONDAY
) -> datetime:
    return shift(start_of_tz_week(instant, zone, first_day_of_week), -WEEK)


def end_of_tz_week(
    instant: datetime, zone: ZoneRef, first_day_of_week: WeekdayRef = Weekday.MONDAY
) -> datetime:
    """One tick before the following week's start in *zone*."""
    return tz_week_bounds(instant, zone, first_day_of_week).end


def end_of_next_tz_week(
    instant: datetime, zone: ZoneRef, first_day_of_week: WeekdayRef = Weekday.MONDAY
) -> datetime:
    return shift(end_of_tz_week(instant, zone, first_day_of_week), WEEK)


def end_of_previous_tz_week(
    instant: datetime, zone: ZoneRef, first_day_of_week: WeekdayRef = Weekday.MONDAY
) -> datetime:
    return shift(end_of_tz_week(instant, zone, first_day_of_week), -WEEK)


def tz_week_bounds(
    instant: datetime, zone: ZoneRef, first_day_of_week: WeekdayRef = Weekday.MONDAY
) -> WeekBounds:
    return resolve_week_bounds(instant, WeekSpec.build(zone, first_day_of_week))


# --- ISO week numbers ---


def tz_week_number(instant: datetime, zone: ZoneRef) -> int:
    """ISO-8601 week number of *instant*'s local date in *zone*."""
    return iso_week_number(local_wall_clock(instant, resolve_zone(zone)).date())


def utc_week_number(instant: datetime) -> int:
    """ISO-8601 week number of *instant*'s UTC date."""
    return iso_week_number(to_utc(instant).date())
