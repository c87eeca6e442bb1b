"""Project name — class-like names such as ``MyClass`` or ``App``.

Rules run in a fixed priority order and the first one that fires wins:

1. compound name      (``Big Name``)
2. empty              (``"   "``)
3. leading digit      (``5Class``)
4. disallowed char    (``Name$``)
5. leading lowercase  (``myClass``)

The order is a tie-break: ``my name`` is reported as compound, not as
lowercase.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from jsmoke.domain.errors import InvalidSyntaxError, InvariantViolation
from jsmoke.domain.patterns import CompiledPattern

PROJECT_NAME_PATTERN = CompiledPattern.compile(r"[A-Z][A-Za-z0-9]*")

# Names shown as examples in the guidance text.
CLASS_LIKE_VALID_NAMES: tuple[str, ...] = ("MyClass", "Main", "App")


class NameFailure(StrEnum):
    """Why a project name was rejected."""

    COMPOUND_NAME = "compound_name"
    IS_EMPTY = "is_empty"
    STARTS_WITH_NUMBER = "starts_with_number"
    NOT_ALLOWED_CHAR = "not_allowed_char"
    STARTS_WITH_LOWERCASE = "starts_with_lowercase"


_RULES: tuple[tuple[NameFailure, CompiledPattern], ...] = (
    (NameFailure.COMPOUND_NAME, CompiledPattern.compile(r"\S+\s+\S+")),
    (NameFailure.IS_EMPTY, CompiledPattern.compile(r"^\s*$")),
    (NameFailure.STARTS_WITH_NUMBER, CompiledPattern.compile(r"^\s*[0-9]")),
    (NameFailure.NOT_ALLOWED_CHAR, CompiledPattern.compile(r"[^a-zA-Z0-9\s]")),
    (NameFailure.STARTS_WITH_LOWERCASE, CompiledPattern.compile(r"^\s*[a-z]")),
)

_MESSAGES: dict[NameFailure, str] = {
    NameFailure.COMPOUND_NAME: "project name can't be compound",
    NameFailure.IS_EMPTY: "project name can't be empty",
    NameFailure.STARTS_WITH_NUMBER: "project name can't start with a number",
    NameFailure.NOT_ALLOWED_CHAR: "project name contains not allowed chars",
    NameFailure.STARTS_WITH_LOWERCASE: "project name can't start with a lowercase letter",
}


class ProjectNameError(InvalidSyntaxError):
    """A project name broke one of the class-like naming rules.

    Attributes:
        failure: The rule that fired.
        offending: The trimmed input (None for :attr:`NameFailure.IS_EMPTY`).
    """

    code: ClassVar[str] = "INVALID_PROJECT_NAME"

    def __init__(self, failure: NameFailure, offending: str | None = None) -> None:
        message = _MESSAGES[failure]
        if offending is not None:
            message = f"{message} ({offending})"
        super().__init__(message, provided=offending)
        self.failure = failure
        self.offending = offending

    def guidance(self) -> list[str]:
        lines = ["Use a class-like valid name:"]
        lines.extend(f"  * {name}" for name in CLASS_LIKE_VALID_NAMES)
        return lines


def find_name_failure(text: str) -> ProjectNameError | None:
    """Run the rule battery against *text*, returning the first failure."""
    for failure, rule in _RULES:
        if rule.regex.search(text) is None:
            continue
        if failure is NameFailure.IS_EMPTY:
            return ProjectNameError(failure)
        return ProjectNameError(failure, text.strip())
    return None


@dataclass(frozen=True)
class ProjectName:
    """A validated class-like project name."""

    value: str

    @classmethod
    def parse(cls, text: str) -> ProjectName:
        """Validate *text*; surrounding whitespace is trimmed.

        Raises:
            ProjectNameError: the first naming rule that *text* breaks.
        """
        error = find_name_failure(text)
        if error is not None:
            raise error
        found = PROJECT_NAME_PATTERN.regex.search(text.strip())
        if found is None:
            raise InvariantViolation(f"{text!r} passed every name rule but has no class-like name")
        return cls(found.group(0))

    def __str__(self) -> str:
        return self.value
