"""WeekService — week boundaries and ISO week numbers as ServiceResults.

Chooses between the two week conventions:

- a time zone is configured (or passed) → zone-aware weeks starting on the
  configured weekday, resolved through the DST-aware path;
- no time zone → fixed-convention ISO Monday weeks in the instant's own
  offset.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Literal

from tzweek.domain.calendar import freeze_offset, iso_week
from tzweek.domain.errors import (
    InvalidWeekdayError,
    InvalidZoneError,
    NaiveInstantError,
    OutOfRangeError,
    TzWeekError,
    ZoneRulesError,
)
from tzweek.domain.instants import ensure_aware, shift, to_utc
from tzweek.domain.types import Weekday
from tzweek.domain.weeks import (
    WEEK,
    WeekSpec,
    end_of_next_week,
    end_of_previous_week,
    end_of_week,
    local_wall_clock,
    resolve_week_bounds,
    start_of_next_week,
    start_of_previous_week,
    start_of_week,
)
from tzweek.services.result import ErrorCode, ServiceResult
from tzweek.services.telemetry import traced

if TYPE_CHECKING:
    from tzweek.config.models import WeekConfig

logger = logging.getLogger(__name__)

WeekSelector = Literal["current", "next", "previous"]

_SHIFTS: dict[str, int] = {"current": 0, "next": 1, "previous": -1}

_FIXED_OPS = {
    "current": (start_of_week, end_of_week),
    "next": (start_of_next_week, end_of_next_week),
    "previous": (start_of_previous_week, end_of_previous_week),
}

_ERROR_CODES: list[tuple[type[TzWeekError], ErrorCode]] = [
    (OutOfRangeError, "OUT_OF_RANGE"),
    (InvalidZoneError, "INVALID_ZONE"),
    (ZoneRulesError, "ZONE_RULES"),
    (NaiveInstantError, "NAIVE_INSTANT"),
    (InvalidWeekdayError, "INVALID_WEEKDAY"),
]


def _failure(op: str, exc: TzWeekError) -> ServiceResult:
    code = next((c for cls, c in _ERROR_CODES if isinstance(exc, cls)), "TZWEEK_ERROR")
    logger.debug("%s failed with %s: %s", op, code, exc)
    return ServiceResult.failure(op, code, str(exc), type=type(exc).__name__)


class WeekService:
    """Compute week boundaries using the ``[week]`` configuration as defaults."""

    def __init__(self, config: WeekConfig, *, timespec: str = "microseconds") -> None:
        self._config = config
        self._timespec = timespec

    def _fmt(self, value: datetime) -> str:
        return value.isoformat(timespec=self._timespec)

    @traced
    def bounds(
        self,
        instant: datetime,
        *,
        zone: str | None = None,
        first_day: Weekday | int | str | None = None,
        which: WeekSelector = "current",
    ) -> ServiceResult:
        """Start and end of the current, next or previous week around *instant*."""
        op = "week_bounds"
        warnings: list[str] = []

        if which not in _SHIFTS:
            return ServiceResult.failure(
                op, "INVALID_INPUT", f"Unknown week selector: {which!r}", allowed=list(_SHIFTS)
            )

        try:
            ensure_aware(instant)
            first = (
                Weekday.parse(first_day)
                if first_day is not None
                else self._config.first_day_of_week
            )
            zone_key = zone if zone is not None else self._config.time_zone

            data: dict[str, Any] = {"instant": self._fmt(instant), "week": which}
            if zone_key is None:
                if first is not Weekday.MONDAY:
                    warnings.append(
                        f"first day {first.name.lower()} ignored: "
                        "fixed-convention weeks start on Monday"
                    )
                start_fn, end_fn = _FIXED_OPS[which]
                start, end = start_fn(instant), end_fn(instant)
                data.update(
                    zone=None,
                    first_day_of_week=Weekday.MONDAY.name.lower(),
                    iso_week=str(iso_week(freeze_offset(instant))),
                )
            else:
                spec = WeekSpec.build(zone_key, first)
                current = resolve_week_bounds(instant, spec)
                offset = WEEK * _SHIFTS[which]
                start, end = shift(current.start, offset), shift(current.end, offset)
                data.update(
                    zone=spec.rules.key,
                    first_day_of_week=spec.first_day_of_week.name.lower(),
                    iso_week=str(iso_week(local_wall_clock(instant, spec.rules))),
                )
        except TzWeekError as exc:
            return _failure(op, exc)

        data.update(start=self._fmt(start), end=self._fmt(end))
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def number(self, instant: datetime, *, zone: str | None = None) -> ServiceResult:
        """ISO-8601 week of *instant*'s local date, or its UTC date without a zone."""
        op = "week_number"
        zone_key = zone if zone is not None else self._config.time_zone
        try:
            if zone_key is None:
                local = to_utc(instant)
                label = "UTC"
            else:
                spec = WeekSpec.build(zone_key)
                local = local_wall_clock(instant, spec.rules)
                label = spec.rules.key
        except TzWeekError as exc:
            return _failure(op, exc)

        week = iso_week(local)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "instant": self._fmt(instant),
                "zone": label,
                "local_date": local.date().isoformat(),
                "iso_year": week.year,
                "week_number": week.week,
                "iso_week": str(week),
            },
        )
