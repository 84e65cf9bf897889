"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from tzweek.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="week_bounds", data={"start": "2024-10-28"})
        assert result.ok is True
        assert result.op == "week_bounds"
        assert result.data == {"start": "2024-10-28"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_ZONE", message="Unknown time zone")
        result = ServiceResult(ok=False, op="week_bounds", error=error)
        assert result.error is not None
        assert result.error.code == "INVALID_ZONE"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="week_number", data={"week_number": 53})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["week_number"] == 53
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="week_number")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_model_copy_adds_meta(self) -> None:
        result = ServiceResult(ok=True, op="week_number")
        copied = result.model_copy(update={"meta": {"telemetry": {"name": "x"}}})
        assert copied.meta == {"telemetry": {"name": "x"}}
        assert result.meta is None


class TestServiceError:
    def test_unknown_code_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServiceError(code="E001", message="Not a week error")  # type: ignore[arg-type]

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure(
            "week_bounds", "OUT_OF_RANGE", "past datetime.max", type="OutOfRangeError"
        )
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "OUT_OF_RANGE"
        assert result.error.detail == {"type": "OutOfRangeError"}
        assert result.data == {}
