"""Command: validate every field of the project configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsmoke.commands._base import JsmCommand

if TYPE_CHECKING:
    from jsmoke.commands._context import AppContext


@click.command(
    cls=JsmCommand,
    examples="""\
  jsmk check
  jsmk -v check
  jsmk --json check
  jsmk -c path/to/jsmk.toml check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Check the [project] section of jsmk.toml and report every invalid field."""
    from jsmoke.services.validation import ValidationService

    if app.settings.config_path is None:
        click.echo("WARNING: no jsmk.toml found; checking defaults", err=True)
    app.emit(ValidationService().check_project(app.settings.project))
