"""Project group — a dotted identifier with its own error title.

The guidance is the dot-notation guidance; only the error message
changes, so the rendering layer can say *which* field failed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from jsmoke.domain.dot_notation import DotNotation, DotNotationError
from jsmoke.domain.errors import InvalidSyntaxError


class ProjectGroupError(InvalidSyntaxError):
    """A project group failed dot-notation parsing."""

    code: ClassVar[str] = "INVALID_PROJECT_GROUP"

    def __init__(self, provided: str, parse_error: DotNotationError) -> None:
        super().__init__(
            f"fail to parse the provided project group (`{provided}`)",
            provided=provided,
        )
        self.parse_error = parse_error

    def guidance(self) -> list[str]:
        return self.parse_error.guidance()


@dataclass(frozen=True)
class ProjectGroup:
    """The project group, e.g. ``com.example.tools``."""

    notation: DotNotation

    @classmethod
    def parse(cls, text: str) -> ProjectGroup:
        try:
            notation = DotNotation.parse(text)
        except DotNotationError as exc:
            raise ProjectGroupError(text, exc) from exc
        return cls(notation)

    @property
    def words(self) -> tuple[str, ...]:
        return self.notation.words

    def __str__(self) -> str:
        return str(self.notation)
