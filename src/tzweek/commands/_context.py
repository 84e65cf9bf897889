"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Configures logging, builds the WeekService lazily, and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzweek.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tzweek.config.settings import TzWeekSettings
    from tzweek.services.result import ServiceResult
    from tzweek.services.weeks import WeekService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TzWeekSettings) -> None:
        self.settings = settings
        self._service: WeekService | None = None

        from tzweek.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from tzweek.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> WeekService:
        """The week service (created on first access)."""
        if self._service is None:
            from tzweek.services.weeks import WeekService

            self._service = WeekService(self.settings.week, timespec=self.settings.output.timespec)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout.  Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
