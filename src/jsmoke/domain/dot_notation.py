"""Dot notation — ``pom.xml``-like lowercase dotted identifiers.

Grammar: optional surrounding whitespace, then one or more words
matching ``[a-z][a-z0-9]*`` joined by single dots. No whitespace is
allowed between words.

Validation is whole-string: ``"group. extra"`` fails even though
``"group"`` alone would match.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from jsmoke.domain.errors import InvalidSyntaxError
from jsmoke.domain.patterns import CompiledPattern, PatternBuilder

WORD_PATTERN = r"[a-z][a-z0-9]*"


def _build_dot_pattern() -> CompiledPattern:
    tail = PatternBuilder(rf"\.{WORD_PATTERN}").with_times(slice(0, None)).try_build()
    return PatternBuilder(WORD_PATTERN).merge(tail).with_leading_spaces().try_build()


DOT_PATTERN = _build_dot_pattern()

DOT_NOTATION_RULES: list[str] = [
    "only lowercases",
    "dot separated words",
    "no leading spaces",
    "only alphanumeric (no emoji/complex glyphs)",
    "only alphabetic (a-z) word starting",
]


class DotNotationError(InvalidSyntaxError):
    """The input is not a valid dotted identifier."""

    code: ClassVar[str] = "INVALID_DOT_NOTATION"

    def __init__(self, provided: str) -> None:
        super().__init__(
            f"couldn't parse the provided dot notation (`{provided}`)",
            provided=provided,
        )

    def guidance(self) -> list[str]:
        lines = ["This field is based on `DotNotation` syntax:"]
        lines.extend(f"  - {rule}" for rule in DOT_NOTATION_RULES)
        lines.append("")
        lines.append("NOTE: about leading spaces, left and right will be trimmed")
        lines.append("but the program can't handle middle whitespaces.")
        return lines


@dataclass(frozen=True)
class DotNotation:
    """An ordered, non-empty sequence of lowercase words (outer to inner)."""

    words: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> DotNotation:
        """Validate *text* and split it into words.

        Raises:
            DotNotationError: *text* is not a whole-string match.
        """
        if not DOT_PATTERN.matches_whole(text):
            raise DotNotationError(text)
        return cls(tuple(text.strip().split(".")))

    def __str__(self) -> str:
        return ".".join(self.words)
