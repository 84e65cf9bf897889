"""Tests for the fixed-convention week operations and ISO week numbers."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from tzweek.domain.errors import NaiveInstantError
from tzweek.domain.instants import TICK
from tzweek.domain.weeks import (
    WEEK,
    end_of_next_week,
    end_of_previous_week,
    end_of_week,
    start_of_next_week,
    start_of_previous_week,
    start_of_week,
    utc_week_number,
)

MINUS_SEVEN = timezone(timedelta(hours=-7))
THURSDAY = datetime(2024, 5, 16, 18, 45, tzinfo=MINUS_SEVEN)
MONDAY = datetime(2024, 5, 13, tzinfo=MINUS_SEVEN)


def _sample_instants() -> list[datetime]:
    base = datetime(2023, 12, 20, tzinfo=UTC)
    return [base + timedelta(hours=13 * i, minutes=7 * i) for i in range(60)]


class TestFixedWeek:
    def test_start_of_week(self) -> None:
        assert start_of_week(THURSDAY) == MONDAY

    def test_end_of_week(self) -> None:
        expected = datetime(2024, 5, 19, 23, 59, 59, 999999, tzinfo=MINUS_SEVEN)
        assert end_of_week(THURSDAY) == expected

    def test_next_and_previous(self) -> None:
        assert start_of_next_week(THURSDAY) == MONDAY + WEEK
        assert start_of_previous_week(THURSDAY) == MONDAY - WEEK
        assert end_of_next_week(THURSDAY) == end_of_week(THURSDAY) + WEEK
        assert end_of_previous_week(THURSDAY) == end_of_week(THURSDAY) - WEEK

    def test_previous_week_ends_before_current_starts(self) -> None:
        assert end_of_previous_week(THURSDAY) + TICK == start_of_week(THURSDAY)

    def test_keeps_instant_offset(self) -> None:
        assert start_of_week(THURSDAY).utcoffset() == timedelta(hours=-7)
        assert end_of_week(THURSDAY).utcoffset() == timedelta(hours=-7)

    def test_naive_rejected(self) -> None:
        with pytest.raises(NaiveInstantError):
            start_of_week(datetime(2024, 5, 16))

    @pytest.mark.parametrize("instant", _sample_instants())
    def test_contains_instant(self, instant: datetime) -> None:
        start = start_of_week(instant)
        assert start <= instant < start + WEEK
        assert start.weekday() == 0

    @pytest.mark.parametrize("instant", _sample_instants())
    def test_end_plus_tick_is_next_start(self, instant: datetime) -> None:
        assert end_of_week(instant) + TICK == start_of_next_week(instant)

    @pytest.mark.parametrize("instant", _sample_instants())
    def test_idempotent(self, instant: datetime) -> None:
        start = start_of_week(instant)
        assert start_of_week(start) == start


class TestUtcWeekNumber:
    def test_first_iso_week(self) -> None:
        assert utc_week_number(datetime(2021, 1, 4, tzinfo=UTC)) == 1

    def test_iso_year_boundary(self) -> None:
        assert utc_week_number(datetime(2020, 12, 31, tzinfo=UTC)) == 53

    def test_uses_utc_date(self) -> None:
        # Sunday evening in New York is already Monday in UTC
        instant = datetime(2021, 1, 3, 21, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert utc_week_number(instant) == 1

    def test_naive_rejected(self) -> None:
        with pytest.raises(NaiveInstantError):
            utc_week_number(datetime(2021, 1, 4))
