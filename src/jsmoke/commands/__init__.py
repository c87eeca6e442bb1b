"""Subcommand modules for jsmk.

Provides register_commands() which uses deferred imports to keep
``jsmk --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and standalone commands on the root group."""
    from jsmoke.commands.check import check
    from jsmoke.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(check)
