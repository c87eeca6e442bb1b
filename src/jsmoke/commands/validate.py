"""Command group: validate single project fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsmoke.commands._base import JsmGroup

if TYPE_CHECKING:
    from jsmoke.commands._context import AppContext


@click.group(
    cls=JsmGroup,
    examples="""\
  jsmk validate group com.example.tools
  jsmk validate lock-version "^1.2"
  jsmk validate lock-version "1.0<=>2.0" --candidate 1.5
  jsmk validate name MyApp
  jsmk validate main-class app.Main
  jsmk -v validate group "Not.Valid\"""",
)
def validate() -> None:
    """Validate a single project field value."""


@validate.command(
    examples="""\
  jsmk validate group com.example
  jsmk validate group "  spaced.ok  \"""",
)
@click.argument("text")
@click.pass_obj
def group(app: AppContext, text: str) -> None:
    """Validate a dotted project group (lowercase words joined by dots)."""
    from jsmoke.services.validation import ValidationService

    app.emit(ValidationService().validate_group(text))


@validate.command(
    "lock-version",
    examples="""\
  jsmk validate lock-version 17
  jsmk validate lock-version "=17.0.2"
  jsmk validate lock-version "11<=>21" --candidate 17.0.1""",
)
@click.argument("text")
@click.option(
    "--candidate",
    default=None,
    help="Also check whether this version satisfies the constraint.",
)
@click.pass_obj
def lock_version(app: AppContext, text: str, candidate: str | None) -> None:
    """Validate a lock version constraint (^A.B.C, =A.B.C, LEFT<=>RIGHT)."""
    from jsmoke.services.validation import ValidationService

    svc = ValidationService()
    if candidate is None:
        app.emit(svc.validate_lock_version(text))
    else:
        app.emit(svc.match_version(text, candidate))


@validate.command(
    examples="""\
  jsmk validate name MyClass
  jsmk validate name "  App  \"""",
)
@click.argument("text")
@click.pass_obj
def name(app: AppContext, text: str) -> None:
    """Validate a class-like project name."""
    from jsmoke.services.validation import ValidationService

    app.emit(ValidationService().validate_name(text))


@validate.command("main-class")
@click.argument("text")
@click.pass_obj
def main_class(app: AppContext, text: str) -> None:
    """Validate a main class path (package.ClassName)."""
    from jsmoke.services.validation import ValidationService

    app.emit(ValidationService().validate_main_class(text))


@validate.command()
@click.argument("text")
@click.pass_obj
def vcs(app: AppContext, text: str) -> None:
    """Validate a version control system name."""
    from jsmoke.services.validation import ValidationService

    app.emit(ValidationService().validate_vcs(text))
