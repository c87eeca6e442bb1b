"""Error taxonomy for field parsing.

Two families:
- Recoverable (``FieldParseError``): the user supplied text that does not
  fit a grammar, or that fits it but describes an inverted range.
- Fatal (``InvariantViolation``): calling code requested an impossible
  pattern, or a grammar and its converter disagree. Never caught by
  services; it signals a bug.

Guidance lines are plain text. Styling belongs to the output layer.
"""

from __future__ import annotations

from typing import ClassVar


class FieldParseError(ValueError):
    """Base for every recoverable parse failure.

    Attributes:
        code: Stable machine-readable error code.
        provided: The raw input that failed, when there is one.
    """

    code: ClassVar[str] = "PARSE_FAILED"

    def __init__(self, message: str, *, provided: str | None = None) -> None:
        super().__init__(message)
        self.provided = provided

    @property
    def message(self) -> str:
        return str(self)

    def guidance(self) -> list[str]:
        """Extended, multi-line help for this failure (empty by default)."""
        return []


class InvalidSyntaxError(FieldParseError):
    """Input does not match the grammar as a whole string."""

    code: ClassVar[str] = "INVALID_SYNTAX"


class InvalidRangeError(FieldParseError):
    """Input is grammatical but describes a logically inverted range."""

    code: ClassVar[str] = "INVALID_RANGE"


class PatternCompileError(ValueError):
    """A built pattern is not valid regex syntax."""

    def __init__(self, pattern: str, cause: Exception) -> None:
        super().__init__(f"invalid pattern {pattern!r}: {cause}")
        self.pattern = pattern
        self.cause = cause


class InvariantViolation(AssertionError):
    """Internal-consistency bug: a contract the code relies on was broken."""
