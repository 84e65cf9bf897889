"""Time-zone rule providers.

The week resolver never looks a zone up on its own.  It is handed an object
that satisfies :class:`TimeZoneRules`, which answers three questions about a
naive local wall clock: is it valid, is it ambiguous, and which offset(s)
apply.  Two implementations ship here:

- :class:`TzinfoRules` wraps any PEP 495 ``tzinfo`` (``zoneinfo.ZoneInfo``
  in practice) and derives gaps and folds from its ``fold`` behaviour.
- :class:`TransitionTableRules` is driven by an explicit table of offset
  transitions, so DST scenarios can be fabricated without depending on
  real-world transition dates.

:func:`resolve_zone` turns whatever the caller passed (IANA key, ``tzinfo``
or rules object) into a rules provider.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzweek.domain.errors import InvalidZoneError, OutOfRangeError, ZoneRulesError
from tzweek.domain.instants import as_utc, to_utc

_MAX_OFFSET = timedelta(hours=24)


@runtime_checkable
class TimeZoneRules(Protocol):
    """Read-only offset oracle for a single time zone."""

    @property
    def key(self) -> str: ...

    def utc_offset(self, instant: datetime) -> timedelta:
        """Offset in effect at the aware *instant*."""
        ...

    def is_invalid(self, local: datetime) -> bool:
        """True when the naive *local* wall clock was skipped (DST gap)."""
        ...

    def is_ambiguous(self, local: datetime) -> bool:
        """True when *local* occurred twice with two distinct offsets (DST fold)."""
        ...

    def ambiguous_offsets(self, local: datetime) -> tuple[timedelta, timedelta]:
        """Both offsets of a fold, first occurrence first."""
        ...

    def local_offset(self, local: datetime) -> timedelta:
        """Offset of a valid local wall clock (first occurrence for a fold)."""
        ...


class TzinfoRules:
    """Rules backed by a PEP 495 ``tzinfo`` such as ``zoneinfo.ZoneInfo``."""

    def __init__(self, tz: tzinfo) -> None:
        self._tz = tz

    @property
    def key(self) -> str:
        return getattr(self._tz, "key", None) or str(self._tz)

    @property
    def tzinfo(self) -> tzinfo:
        return self._tz

    def __repr__(self) -> str:
        return f"TzinfoRules({self.key!r})"

    def _offset(self, local: datetime, fold: int) -> timedelta:
        try:
            offset = local.replace(tzinfo=self._tz, fold=fold).utcoffset()
        except OverflowError as exc:
            raise OutOfRangeError(f"{self.key}: {local.isoformat()} is out of range") from exc
        except ValueError as exc:
            raise ZoneRulesError(f"{self.key}: no offset for {local.isoformat()}: {exc}") from exc
        if offset is None:
            raise ZoneRulesError(f"{self.key}: no offset for {local.isoformat()}")
        return offset

    def utc_offset(self, instant: datetime) -> timedelta:
        utc = to_utc(instant)
        try:
            offset = utc.astimezone(self._tz).utcoffset()
        except OverflowError as exc:
            raise OutOfRangeError(f"{self.key}: {instant.isoformat()} is out of range") from exc
        except ValueError as exc:
            raise ZoneRulesError(f"{self.key}: no offset at {instant.isoformat()}: {exc}") from exc
        if offset is None:
            raise ZoneRulesError(f"{self.key}: no offset at {instant.isoformat()}")
        return offset

    def is_invalid(self, local: datetime) -> bool:
        # A skipped wall clock does not survive a round trip through UTC.
        local = local.replace(tzinfo=None, fold=0)
        utc = as_utc(local, self._offset(local, 0))
        try:
            back = utc.astimezone(self._tz).replace(tzinfo=None)
        except OverflowError as exc:
            raise OutOfRangeError(f"{self.key}: {local.isoformat()} is out of range") from exc
        except ValueError as exc:
            raise ZoneRulesError(f"{self.key}: cannot convert {local.isoformat()}: {exc}") from exc
        return back != local

    def is_ambiguous(self, local: datetime) -> bool:
        if self.is_invalid(local):
            return False
        return self._offset(local, 0) != self._offset(local, 1)

    def ambiguous_offsets(self, local: datetime) -> tuple[timedelta, timedelta]:
        if not self.is_ambiguous(local):
            raise ZoneRulesError(f"{self.key}: {local.isoformat()} is not ambiguous")
        return self._offset(local, 0), self._offset(local, 1)

    def local_offset(self, local: datetime) -> timedelta:
        if self.is_invalid(local):
            raise ZoneRulesError(f"{self.key}: {local.isoformat()} falls in a DST gap")
        return self._offset(local, 0)


@dataclass(frozen=True)
class Transition:
    """An offset change taking effect at the UTC instant ``at``."""

    at: datetime
    offset: timedelta


class TransitionTableRules:
    """Rules driven by an explicit, strictly increasing transition table.

    ``base_offset`` applies before the first transition; each
    :class:`Transition` applies from its ``at`` instant up to the next one.
    A local wall clock is valid under an offset when subtracting that offset
    lands inside the offset's UTC interval.  Zero candidates means a gap,
    two distinct candidates means a fold.
    """

    def __init__(
        self,
        base_offset: timedelta,
        transitions: Iterable[Transition] = (),
        *,
        key: str = "custom",
    ) -> None:
        self._key = key
        starts: list[datetime] = []
        offsets: list[timedelta] = [_check_offset(base_offset, key)]
        for transition in transitions:
            at = to_utc(transition.at)
            if starts and at <= starts[-1]:
                raise ZoneRulesError(
                    f"{key}: transitions must be strictly increasing at {at.isoformat()}"
                )
            starts.append(at)
            offsets.append(_check_offset(transition.offset, key))
        self._starts = starts
        self._offsets = offsets

    @property
    def key(self) -> str:
        return self._key

    def __repr__(self) -> str:
        return f"TransitionTableRules({self._key!r}, transitions={len(self._starts)})"

    def utc_offset(self, instant: datetime) -> timedelta:
        return self._offsets[bisect.bisect_right(self._starts, to_utc(instant))]

    def _candidates(self, local: datetime) -> list[timedelta]:
        local = local.replace(tzinfo=None)
        found: list[timedelta] = []
        for index, offset in enumerate(self._offsets):
            utc = as_utc(local, offset)
            lower = self._starts[index - 1] if index > 0 else None
            upper = self._starts[index] if index < len(self._starts) else None
            if lower is not None and utc < lower:
                continue
            if upper is not None and utc >= upper:
                continue
            if offset not in found:
                found.append(offset)
        return found

    def is_invalid(self, local: datetime) -> bool:
        return not self._candidates(local)

    def is_ambiguous(self, local: datetime) -> bool:
        return len(self._candidates(local)) > 1

    def ambiguous_offsets(self, local: datetime) -> tuple[timedelta, timedelta]:
        found = self._candidates(local)
        if len(found) != 2:
            raise ZoneRulesError(
                f"{self._key}: expected two offsets for {local.isoformat()}, found {len(found)}"
            )
        return found[0], found[1]

    def local_offset(self, local: datetime) -> timedelta:
        found = self._candidates(local)
        if not found:
            raise ZoneRulesError(f"{self._key}: {local.isoformat()} falls in a DST gap")
        return found[0]


class FixedOffsetRules(TransitionTableRules):
    """A zone that never changes its offset."""

    def __init__(self, offset: timedelta, *, key: str | None = None) -> None:
        super().__init__(offset, (), key=key or _format_offset(offset))


def _check_offset(offset: timedelta, key: str) -> timedelta:
    if not -_MAX_OFFSET < offset < _MAX_OFFSET:
        raise ZoneRulesError(f"{key}: offset {offset} outside +/-24 hours")
    return offset


def _format_offset(offset: timedelta) -> str:
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(offset) // timedelta(minutes=1)
    return f"UTC{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def resolve_zone(zone: TimeZoneRules | tzinfo | str) -> TimeZoneRules:
    """Turn an IANA key, ``tzinfo`` or rules object into a rules provider.

    Raises:
        InvalidZoneError: The key is unknown or the object is unsupported.
    """
    if isinstance(zone, str):
        name = zone.strip()
        if not name:
            raise InvalidZoneError("Time zone key is empty")
        try:
            return TzinfoRules(ZoneInfo(name))
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise InvalidZoneError(f"Unknown time zone: {zone!r}") from exc
    if isinstance(zone, tzinfo):
        return TzinfoRules(zone)
    if isinstance(zone, TimeZoneRules):
        return zone
    raise InvalidZoneError(f"Unsupported time zone reference: {type(zone).__name__}")

