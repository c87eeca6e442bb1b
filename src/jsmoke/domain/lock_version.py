"""Lock versions — the ``--lock-version`` constraint grammar.

Accepted shapes (surrounding whitespace is trimmed)::

    [^ | ^= | =]MAJOR[.MINOR[.PATCH]]
    LEFT<=>RIGHT            (both sides without prefix)

Classification:
- ``^``, ``^=`` or no prefix -> :class:`GreaterOrEquals`
- ``=``                      -> :class:`StrictlyEquals`
- ``<=>``                    -> :class:`InRange` (inclusive, LEFT <= RIGHT)

Components are unsigned 16-bit integers. A missing MINOR or PATCH means
"unconstrained at that position", not zero; see :meth:`LockVersion.compare`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import ClassVar

from jsmoke.domain.errors import InvalidRangeError, InvalidSyntaxError, InvariantViolation
from jsmoke.domain.patterns import CompiledPattern, PatternBuilder

U16_MAX = 65535
RANGE_SEPARATOR = "<=>"


def _build_version_pattern() -> CompiledPattern:
    minor_patch = PatternBuilder(r"\.[0-9]+").with_times(range(0, 3)).try_build()
    return PatternBuilder(r"[0-9]+").merge(minor_patch).try_build()


def _build_lock_pattern(version: CompiledPattern) -> CompiledPattern:
    in_range = PatternBuilder(rf"({version.pattern}){RANGE_SEPARATOR}({version.pattern})")
    prefixed = PatternBuilder(r"(\^|\^=|=)?").merge(version)
    either = PatternBuilder(rf"({in_range.render()})|({prefixed.render()})").try_build()
    return PatternBuilder("").merge(either).with_leading_spaces().try_build()


VERSION_PATTERN = _build_version_pattern()
VERSION_ONLY_PATTERN = PatternBuilder("").merge(VERSION_PATTERN).with_leading_spaces().try_build()
LOCK_VERSION_PATTERN = _build_lock_pattern(VERSION_PATTERN)


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


class ConstraintKind(StrEnum):
    GREATER_OR_EQUALS = "greater_or_equals"
    STRICTLY_EQUALS = "strictly_equals"
    IN_RANGE = "in_range"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class LockVersionError(InvalidSyntaxError):
    """The lock version text does not match the grammar."""

    code: ClassVar[str] = "UNPARSEABLE_LOCK_VERSION"

    def __init__(self, provided: str) -> None:
        super().__init__(
            f"couldn't parse the provided lock version (`{provided}`)",
            provided=provided,
        )

    def guidance(self) -> list[str]:
        return [
            "The `--lock-version` syntax is regex based and follows these rules:",
            "",
            '1. Can start with "^", "=" or "^=", where:',
            '     - "^" means greater or equals than',
            '     - "=" means strictly equals than',
            '     - "^=" means greater or equals than',
            '   NOTE: no prefix does the same effect of "^=".',
            "",
            "2. Contains the `A.B.C` pattern, where:",
            "     - A means the major version (required)",
            "     - B means the minor version (optional)",
            "     - C means the patch version (optional)",
            "   NOTE: the versions are dot-separated.",
            "",
            "3. Range specify is allowed with the `<LEFT><=><RIGHT>`:",
            "     - <LEFT> means the minimum version",
            "     - <RIGHT> means the maximum version",
            "   WARNING: the <RIGHT> must always greater or equals than <LEFT>.",
        ]


class LockRangeError(InvalidRangeError):
    """``LEFT<=>RIGHT`` where LEFT compares greater than RIGHT."""

    code: ClassVar[str] = "LOCK_RANGE_INVERTED"

    def __init__(self, left: LockVersion, right: LockVersion) -> None:
        super().__init__(
            "couldn't parse the lock version range "
            f"(left value greater than right: {left} | {right})"
        )
        self.left = left
        self.right = right

    def guidance(self) -> list[str]:
        return [
            "The <RIGHT> lock version must be greater or equals than",
            "the <LEFT> one.",
        ]


# ---------------------------------------------------------------------------
# LockVersion
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LockVersion:
    """A ``MAJOR[.MINOR[.PATCH]]`` version.

    ``==`` is structural. Ordering operators use :meth:`compare`, so
    ``LockVersion(1) <= LockVersion(1, 0)`` and ``>=`` both hold while
    ``==`` does not.
    """

    major: int
    minor: int | None = None
    patch: int | None = None

    def __post_init__(self) -> None:
        for value in (self.major, self.minor, self.patch):
            if value is not None and not 0 <= value <= U16_MAX:
                raise InvariantViolation(f"version component {value} is outside 0..{U16_MAX}")

    @classmethod
    def parse(cls, text: str) -> LockVersion:
        """Parse a bare version (no prefix, no range).

        Raises:
            LockVersionError: *text* is not a version number.
        """
        if not VERSION_ONLY_PATTERN.matches_whole(text):
            raise LockVersionError(text)
        return cls.from_digits(text.strip())

    @classmethod
    def from_digits(cls, text: str) -> LockVersion:
        """Convert grammar-checked ``N[.N[.N]]`` text.

        Raises:
            LockVersionError: A component does not fit in 16 bits.
            InvariantViolation: *text* is not dot-separated digits, which
                means the caller skipped the grammar check.
        """
        parts = text.split(".")
        if not 1 <= len(parts) <= 3:
            raise InvariantViolation(f"expected 1 to 3 version components in {text!r}")
        values: list[int] = []
        for part in parts:
            if not (part.isascii() and part.isdigit()):
                raise InvariantViolation(f"non-numeric version component {part!r} in {text!r}")
            value = int(part)
            if value > U16_MAX:
                raise LockVersionError(text)
            values.append(value)
        minor = values[1] if len(values) > 1 else None
        patch = values[2] if len(values) > 2 else None
        return cls(values[0], minor, patch)

    def compare(self, other: LockVersion) -> Ordering:
        """Partial-order comparison used for range checks and matching.

        Positions are compared left to right; the first deciding pair wins:
        - both present and different: numeric order;
        - one side present and non-zero, the other absent: present is greater;
        - one side present and zero, the other absent: undecided, move on.
        No decision at all three positions means EQUAL.
        """
        pairs = (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        )
        for left, right in pairs:
            if left is not None and right is None:
                if left > 0:
                    return Ordering.GREATER
            elif left is None and right is not None:
                if right > 0:
                    return Ordering.LESS
            elif left is not None and right is not None and left != right:
                return Ordering.GREATER if left > right else Ordering.LESS
        return Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LockVersion):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LockVersion):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LockVersion):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LockVersion):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    @property
    def components(self) -> tuple[int, ...]:
        """The present components, in order."""
        parts = [self.major]
        for value in (self.minor, self.patch):
            if value is None:
                break
            parts.append(value)
        return tuple(parts)

    def __str__(self) -> str:
        return ".".join(str(p) for p in self.components)


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------


class LockConstraint(ABC):
    """Base of the three constraint shapes. Use :meth:`parse` to build one.

    The set is closed: :class:`GreaterOrEquals`, :class:`StrictlyEquals`
    and :class:`InRange` are the only concrete subclasses.
    """

    kind: ClassVar[ConstraintKind]

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            msg = f"{cls.__name__}: lock constraints cannot be extended outside {__name__}"
            raise TypeError(msg)

    @staticmethod
    def parse(text: str) -> LockConstraint:
        """Validate and classify a lock version expression.

        Raises:
            LockVersionError: *text* does not match the grammar.
            LockRangeError: a range whose left side is greater than its right.
        """
        if not LOCK_VERSION_PATTERN.matches_whole(text):
            raise LockVersionError(text)
        expr = text.strip()
        try:
            if expr.startswith("^="):
                return GreaterOrEquals(LockVersion.from_digits(expr[2:]))
            if expr.startswith("^"):
                return GreaterOrEquals(LockVersion.from_digits(expr[1:]))
            if expr.startswith("="):
                return StrictlyEquals(LockVersion.from_digits(expr[1:]))
            if RANGE_SEPARATOR in expr:
                left, _, right = expr.partition(RANGE_SEPARATOR)
                return InRange(LockVersion.from_digits(left), LockVersion.from_digits(right))
            return GreaterOrEquals(LockVersion.from_digits(expr))
        except LockVersionError as exc:
            raise LockVersionError(text) from exc

    @abstractmethod
    def allows(self, candidate: LockVersion) -> bool:
        """Whether *candidate* satisfies this constraint."""


@dataclass(frozen=True)
class GreaterOrEquals(LockConstraint):
    """``^A.B.C``, ``^=A.B.C`` or ``A.B.C``."""

    kind: ClassVar[ConstraintKind] = ConstraintKind.GREATER_OR_EQUALS

    version: LockVersion

    def allows(self, candidate: LockVersion) -> bool:
        return candidate.compare(self.version) is not Ordering.LESS

    def __str__(self) -> str:
        return f"^={self.version}"


@dataclass(frozen=True)
class StrictlyEquals(LockConstraint):
    """``=A.B.C``."""

    kind: ClassVar[ConstraintKind] = ConstraintKind.STRICTLY_EQUALS

    version: LockVersion

    def allows(self, candidate: LockVersion) -> bool:
        return candidate.compare(self.version) is Ordering.EQUAL

    def __str__(self) -> str:
        return f"={self.version}"


@dataclass(frozen=True)
class InRange(LockConstraint):
    """``LEFT<=>RIGHT``, inclusive on both ends."""

    kind: ClassVar[ConstraintKind] = ConstraintKind.IN_RANGE

    left: LockVersion
    right: LockVersion

    def __post_init__(self) -> None:
        if self.left.compare(self.right) is Ordering.GREATER:
            raise LockRangeError(self.left, self.right)

    def allows(self, candidate: LockVersion) -> bool:
        return (
            candidate.compare(self.left) is not Ordering.LESS
            and candidate.compare(self.right) is not Ordering.GREATER
        )

    def __str__(self) -> str:
        return f"{self.left}{RANGE_SEPARATOR}{self.right}"
