"""Main class path — ``<package>.<ClassName>`` entrypoint references.

The package part follows dot notation, the class part follows the
project-name rules. A bare ``ClassName`` has no package. When a project
does not set one, the default is ``<GROUP>.<NAME>``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from jsmoke.domain.dot_notation import DotNotation
from jsmoke.domain.errors import FieldParseError, InvalidSyntaxError
from jsmoke.domain.group import ProjectGroup
from jsmoke.domain.project_name import ProjectName


class MainClassPathError(InvalidSyntaxError):
    """The main class path is malformed in its package or class part."""

    code: ClassVar[str] = "INVALID_MAIN_CLASS"

    def __init__(self, provided: str, cause: FieldParseError | None = None) -> None:
        super().__init__(
            f"couldn't parse the provided main class path (`{provided}`)",
            provided=provided,
        )
        self.cause = cause

    def guidance(self) -> list[str]:
        lines = [
            "A main class path looks like `package.name.ClassName`:",
            "  - the package part follows the dot notation rules",
            "  - the last part is a class-like name",
            "  - no whitespace between parts",
        ]
        if self.cause is not None:
            lines.append("")
            lines.append(str(self.cause))
            lines.extend(self.cause.guidance())
        return lines


@dataclass(frozen=True)
class MainClassPath:
    package: DotNotation | None
    class_name: ProjectName

    @classmethod
    def parse(cls, text: str) -> MainClassPath:
        expr = text.strip()
        if any(ch.isspace() for ch in expr):
            raise MainClassPathError(text)
        package_text, sep, class_text = expr.rpartition(".")
        try:
            package = DotNotation.parse(package_text) if sep else None
            class_name = ProjectName.parse(class_text)
        except FieldParseError as exc:
            raise MainClassPathError(text, exc) from exc
        return cls(package, class_name)

    @classmethod
    def default_for(cls, group: ProjectGroup, name: ProjectName) -> MainClassPath:
        """``<GROUP>.<NAME>``, used when no main class is configured."""
        return cls(group.notation, name)

    def __str__(self) -> str:
        if self.package is None:
            return str(self.class_name)
        return f"{self.package}.{self.class_name}"
