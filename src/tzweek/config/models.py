"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tzweek.toml only contains overrides.
A typical file needs nothing more than ``[week] time_zone = "Europe/Paris"``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, field_validator

from tzweek.domain.errors import InvalidZoneError
from tzweek.domain.rules import resolve_zone
from tzweek.domain.types import Weekday


class WeekConfig(BaseModel):
    """[week] section.

    ``time_zone`` of None selects the fixed-convention (ISO Monday, own
    offset) path.
    """

    model_config = {"frozen": True}

    first_day_of_week: Weekday = Weekday.MONDAY
    time_zone: str | None = None

    @field_validator("first_day_of_week", mode="before")
    @classmethod
    def _parse_weekday(cls, value: Any) -> Weekday:
        return Weekday.parse(value)

    @field_validator("time_zone")
    @classmethod
    def _check_zone(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            resolve_zone(value)
        except InvalidZoneError as exc:
            raise ValueError(str(exc)) from exc
        return value


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    timespec: Literal["auto", "seconds", "milliseconds", "microseconds"] = "microseconds"
