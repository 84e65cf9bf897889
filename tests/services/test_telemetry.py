"""Tests for telemetry primitives: Span and @traced."""

from __future__ import annotations

import time
from collections.abc import Generator

import pytest

from tzweek.services.result import ServiceResult
from tzweek.services.telemetry import (
    Span,
    disable_telemetry,
    enable_telemetry,
    telemetry_enabled,
    traced,
)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    yield
    disable_telemetry()


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert isinstance(d["duration_ms"], float)


class _Service:
    @traced
    def run(self, ok: bool = True) -> ServiceResult:
        return ServiceResult(ok=ok, op="run")

    @traced
    def explode(self) -> ServiceResult:
        raise RuntimeError("boom")


class TestTraced:
    def test_disabled_is_passthrough(self) -> None:
        assert not telemetry_enabled()
        result = _Service().run()
        assert result.meta is None

    def test_enabled_injects_meta(self) -> None:
        enable_telemetry()
        result = _Service().run()
        assert result.meta is not None
        assert result.meta["telemetry"]["name"] == "_Service.run"

    def test_failed_result_still_traced(self) -> None:
        enable_telemetry()
        result = _Service().run(ok=False)
        assert result.ok is False
        assert result.meta is not None
        assert "telemetry" in result.meta

    def test_exception_propagates(self) -> None:
        enable_telemetry()
        with pytest.raises(RuntimeError, match="boom"):
            _Service().explode()

    def test_preserves_metadata(self) -> None:
        assert _Service.run.__name__ == "run"

    def test_disable(self) -> None:
        enable_telemetry()
        disable_telemetry()
        assert not telemetry_enabled()
