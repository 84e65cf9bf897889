"""Format a ServiceResult for the requested output mode.

- ``--json``: the full result as indented JSON
- ``--quiet``: bare values, one per line, for shell pipelines
- default: a Rich key/value table
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tzweek.output.console import create_console, get_output

if TYPE_CHECKING:
    from tzweek.services.result import ServiceResult

_INSTANT_KEYS = frozenset({"instant", "start", "end"})

# Values printed by --quiet, per op.
_QUIET_KEYS: dict[str, tuple[str, ...]] = {
    "week_bounds": ("start", "end"),
    "week_number": ("week_number",),
}


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    keys = _QUIET_KEYS.get(result.op)
    if not keys:
        return f"OK: {result.op}"
    return "\n".join(str(result.data.get(key, "")) for key in keys)


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult through Rich."""
    console = create_console()

    if not result.ok:
        code = result.error.code if result.error else "ERROR"
        msg = result.error.message if result.error else "Unknown error"
        console.print(Text.assemble(("ERROR", "tzw.error"), (f"  {result.op}", "tzw.op")))
        console.print(Text(f"  [{code}] {msg}"))
        return get_output(console).rstrip("\n")

    console.print(Text.assemble(("OK", "tzw.ok"), (f"  {result.op}", "tzw.op")))
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="tzw.key")
    table.add_column()
    for key, value in result.data.items():
        table.add_row(key, _styled(key, value))
    if verbose and result.meta:
        for key, value in result.meta.items():
            table.add_row(key, _styled(key, value))
    console.print(table)
    return get_output(console).rstrip("\n")


def _styled(key: str, value: Any) -> Text:
    if value is None:
        return Text("-", style="tzw.key")
    if key in _INSTANT_KEYS:
        return Text(str(value), style="tzw.instant")
    if key == "zone":
        return Text(str(value), style="tzw.zone")
    return Text(str(value))
