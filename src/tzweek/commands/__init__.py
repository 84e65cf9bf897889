"""Subcommand modules for tzweek.

register_commands() uses deferred imports so ``tzweek --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tzweek.commands.bounds import bounds
    from tzweek.commands.number import number

    cli.add_command(bounds)
    cli.add_command(number)
