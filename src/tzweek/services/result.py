"""ServiceResult and ServiceError — what WeekService hands back to the CLI.

INVARIANT: WeekService methods never raise TzWeekError; every domain failure
comes back as ``ok=False`` with one of the ``ErrorCode`` values below.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

ErrorCode = Literal[
    "INVALID_INPUT",  # unknown week selector
    "INVALID_ZONE",
    "INVALID_WEEKDAY",
    "NAIVE_INSTANT",
    "OUT_OF_RANGE",  # boundary beyond datetime.min/max
    "ZONE_RULES",
    "TZWEEK_ERROR",  # bare TzWeekError with no narrower code
]


class ServiceError(BaseModel):
    """Why a week computation failed.

    ``detail`` carries the domain exception name under ``"type"`` or, for
    ``INVALID_INPUT``, the accepted values under ``"allowed"``.
    """

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a WeekService call.

    Attributes:
        ok: Whether the computation succeeded.
        op: ``"week_bounds"`` or ``"week_number"``.
        data: Rendered instants and week labels, keyed as the formatters expect.
        warnings: Settings that were ignored (e.g. a first day on the fixed path).
        error: Set when ``ok`` is False.
        meta: Timing spans when telemetry is enabled.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        """Build an ``ok=False`` result carrying a single ServiceError."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
