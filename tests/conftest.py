"""Shared pytest fixtures and synthetic zones for tzweek tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner

from tzweek.domain.rules import Transition, TransitionTableRules
from tzweek.services.telemetry import disable_telemetry

HOUR = timedelta(hours=1)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() and telemetry toggles made by a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    channels = [logging.getLogger(name) for name in ("tzweek", "tzweek.domain", "tzweek.telemetry")]
    channel_levels = [channel.level for channel in channels]
    yield
    root.handlers = handlers
    root.setLevel(level)
    for channel, channel_level in zip(channels, channel_levels, strict=True):
        channel.setLevel(channel_level)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory with no tzweek config in the environment."""
    monkeypatch.chdir(tmp_path)
    for var in ("TZWEEK_CONFIG", "TZWEEK_WEEK__TIME_ZONE", "TZWEEK_WEEK__FIRST_DAY_OF_WEEK"):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Synthetic zones
# ---------------------------------------------------------------------------


def midnight_gap_zone(jump: timedelta = HOUR) -> TransitionTableRules:
    """UTC-5 zone that springs forward by *jump* at local midnight, Monday 2024-03-11.

    Local wall clocks from 00:00 up to 00:00 + *jump* never occur that day.
    """
    return TransitionTableRules(
        timedelta(hours=-5),
        [Transition(at=datetime(2024, 3, 11, 5, 0, tzinfo=UTC), offset=timedelta(hours=-5) + jump)],
        key="Test/MidnightGap",
    )


def midnight_fold_zone() -> TransitionTableRules:
    """UTC-4 zone that falls back to UTC-5 at local 01:00, Sunday 2024-11-03.

    Local wall clocks from 00:00 to 00:59 that Sunday occur twice.
    """
    return TransitionTableRules(
        timedelta(hours=-4),
        [Transition(at=datetime(2024, 11, 3, 5, 0, tzinfo=UTC), offset=timedelta(hours=-5))],
        key="Test/MidnightFold",
    )


@pytest.fixture
def gap_zone() -> TransitionTableRules:
    return midnight_gap_zone()


@pytest.fixture
def fold_zone() -> TransitionTableRules:
    return midnight_fold_zone()
