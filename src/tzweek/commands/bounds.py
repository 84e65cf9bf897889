"""Command: start and end of a week."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import click

from tzweek.commands._base import INSTANT, TzWeekCommand
from tzweek.domain.types import Weekday

if TYPE_CHECKING:
    from tzweek.commands._context import AppContext
    from tzweek.services.weeks import WeekSelector

_WEEKDAYS = [day.name.lower() for day in Weekday]


@click.command(
    cls=TzWeekCommand,
    examples="""\
  tzweek bounds
  tzweek bounds 2024-03-12T15:00:00Z --zone America/New_York
  tzweek bounds now --zone Europe/London --first-day sunday --week next
  tzweek --json bounds 2024-11-03T06:30:00+00:00 --zone America/New_York""",
)
@click.argument("instant", type=INSTANT, default="now")
@click.option("-z", "--zone", default=None, help="IANA time zone (default: [week] time_zone).")
@click.option(
    "-f",
    "--first-day",
    type=click.Choice(_WEEKDAYS, case_sensitive=False),
    default=None,
    help="First day of the week (default: [week] first_day_of_week).",
)
@click.option(
    "-w",
    "--week",
    "which",
    type=click.Choice(["current", "next", "previous"]),
    default="current",
    help="Which week relative to INSTANT.",
)
@click.option("--assume-utc", is_flag=True, help="Treat an INSTANT without offset as UTC.")
@click.pass_obj
def bounds(
    app: AppContext,
    instant: datetime,
    zone: str | None,
    first_day: str | None,
    which: WeekSelector,
    assume_utc: bool,
) -> None:
    """Print the first and last instant of the week containing INSTANT."""
    if assume_utc and instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    app.emit(app.service.bounds(instant, zone=zone, first_day=first_day, which=which))
