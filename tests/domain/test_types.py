"""Tests for Weekday parsing and TimeUnit values."""

from datetime import date

import pytest

from tzweek.domain.errors import InvalidWeekdayError
from tzweek.domain.types import TimeUnit, Weekday


class TestWeekday:
    def test_matches_date_weekday(self) -> None:
        # 2024-03-11 is a Monday
        for offset, day in enumerate(Weekday):
            assert date(2024, 3, 11 + offset).weekday() == day

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("monday", Weekday.MONDAY),
            ("Sunday", Weekday.SUNDAY),
            ("  FRI ", Weekday.FRIDAY),
            ("sat", Weekday.SATURDAY),
            ("3", Weekday.THURSDAY),
            (0, Weekday.MONDAY),
            (6, Weekday.SUNDAY),
            (Weekday.WEDNESDAY, Weekday.WEDNESDAY),
        ],
    )
    def test_parse(self, value: object, expected: Weekday) -> None:
        assert Weekday.parse(value) is expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["funday", "", 7, -1, True, 1.5])
    def test_parse_rejects(self, value: object) -> None:
        with pytest.raises(InvalidWeekdayError):
            Weekday.parse(value)  # type: ignore[arg-type]

    def test_invalid_weekday_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Weekday.parse("someday")


class TestTimeUnit:
    def test_values(self) -> None:
        assert TimeUnit("week") is TimeUnit.WEEK
        assert [u.value for u in TimeUnit] == [
            "second",
            "minute",
            "hour",
            "day",
            "week",
            "month",
            "year",
        ]
