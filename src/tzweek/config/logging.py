"""structlog setup for the tzweek CLI.

Two log channels matter here:

- ``tzweek.domain``: the resolver's DST adjustments (gap skipped, fold
  disambiguated).  Records carry ``zone``/``nominal``/``resolved``/``offsets``
  extras, which become first-class fields in both renderers.
- ``tzweek.telemetry``: ``span.complete`` timings from ``@traced``.

Both are silent below WARNING unless ``--verbose`` is given.  Everything is
written to stderr so stdout stays clean for ``--json`` / ``--quiet`` output.
The library never calls this on import; only the CLI does.
"""

from __future__ import annotations

import logging
import sys

import structlog

RESOLVER_LOGGER = "tzweek.domain"
TELEMETRY_LOGGER = "tzweek.telemetry"

# Extras the resolver attaches to its debug records.
RESOLVER_FIELDS = ("zone", "nominal", "resolved", "offsets")


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(allow=RESOLVER_FIELDS),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Args:
        verbose: Show DEBUG records from the resolver and telemetry channels.
        log_json: One JSON object per line instead of the console renderer.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    level = logging.DEBUG if verbose else logging.WARNING
    for name in ("tzweek", RESOLVER_LOGGER, TELEMETRY_LOGGER):
        logging.getLogger(name).setLevel(level)
