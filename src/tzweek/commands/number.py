"""Command: ISO-8601 week number."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import click

from tzweek.commands._base import INSTANT, TzWeekCommand

if TYPE_CHECKING:
    from tzweek.commands._context import AppContext


@click.command(
    cls=TzWeekCommand,
    examples="""\
  tzweek number
  tzweek number 2020-12-31T12:00:00Z
  tzweek number 2021-01-03T23:30:00-05:00 --zone Asia/Tokyo""",
)
@click.argument("instant", type=INSTANT, default="now")
@click.option("-z", "--zone", default=None, help="IANA time zone (default: UTC date).")
@click.option("--assume-utc", is_flag=True, help="Treat an INSTANT without offset as UTC.")
@click.pass_obj
def number(app: AppContext, instant: datetime, zone: str | None, assume_utc: bool) -> None:
    """Print the ISO week number of INSTANT's local date."""
    if assume_utc and instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    app.emit(app.service.number(instant, zone=zone))
