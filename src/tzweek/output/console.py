"""Rich Console factory and theme for tzweek output.

Consoles render into a StringIO buffer so formatting stays a pure
``ServiceResult -> str`` function.  In non-TTY environments (tests, pipes)
Rich disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TZWEEK_THEME = Theme(
    {
        "tzw.ok": "bold green",
        "tzw.error": "bold red",
        "tzw.warning": "bold yellow",
        "tzw.op": "bold cyan",
        "tzw.key": "dim",
        "tzw.instant": "bold blue",
        "tzw.zone": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=TZWEEK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
