"""Repetition descriptors — the quantifier half of a regex pattern.

A ``RepetitionSpec`` says how many times a sub-pattern may repeat and
renders the matching regex suffix (``?``, ``*``, ``+``, ``{n}``,
``{n,}``, ``{0,n}``, ``{n,m}``).

Only two range shapes are accepted by :meth:`RepetitionSpec.of`:
``range`` (step 1) and ``slice`` (``None`` means unbounded). Both use an
exclusive end, like Python indexing. Inclusive bounds go through
:meth:`RepetitionSpec.from_bounds`.

INVARIANT: a malformed range is a caller bug, so it raises
:class:`InvariantViolation` instead of a recoverable error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from jsmoke.domain.errors import InvariantViolation


class RepetitionKind(StrEnum):
    """The seven quantifier shapes."""

    ZERO_OR_ONE = "zero_or_one"
    ZERO_OR_MORE = "zero_or_more"
    ONE_OR_MORE = "one_or_more"
    EXACTLY = "exactly"
    AT_LEAST = "at_least"
    UNTIL = "until"
    BETWEEN = "between"


@dataclass(frozen=True)
class RepetitionSpec:
    """A normalized quantifier.

    Attributes:
        kind: Which quantifier shape this is.
        low: Inclusive minimum number of repetitions.
        high: Inclusive maximum, or None when unbounded.
    """

    kind: RepetitionKind
    low: int = 0
    high: int | None = None

    @classmethod
    def of(cls, value: range | slice) -> RepetitionSpec:
        """Build a spec from a ``range`` or ``slice`` (exclusive end)."""
        if isinstance(value, range):
            if value.step != 1:
                raise InvariantViolation(f"repetition range must have step 1, got {value!r}")
            return cls.from_bounds(value.start, value.stop)
        if isinstance(value, slice):
            if value.step not in (None, 1):
                raise InvariantViolation(f"repetition slice must have step 1, got {value!r}")
            return cls.from_bounds(value.start, value.stop)
        msg = f"repetition must be a range or slice, not {type(value).__name__}"
        raise TypeError(msg)

    @classmethod
    def from_bounds(
        cls,
        start: int | None = None,
        end: int | None = None,
        *,
        inclusive: bool = False,
    ) -> RepetitionSpec:
        """Build a spec from explicit bounds.

        Args:
            start: Inclusive lower bound (None means 0).
            end: Upper bound, or None for unbounded.
            inclusive: Whether *end* itself is an allowed count.
        """
        low = 0 if start is None else start
        if low < 0:
            raise InvariantViolation(f"repetition lower bound must be >= 0, got {low}")

        high: int | None
        if end is None:
            high = None
        elif inclusive:
            high = end
        else:
            # Exclusive end: the last allowed count is one below it.
            if end <= 0:
                raise InvariantViolation(f"exclusive repetition upper bound must be > 0, got {end}")
            high = end - 1
        if high is not None and high < 0:
            raise InvariantViolation(f"repetition upper bound must be >= 0, got {high}")

        return cls._classify(low, high)

    @classmethod
    def _classify(cls, low: int, high: int | None) -> RepetitionSpec:
        if low == 0 and high == 1:
            return cls(RepetitionKind.ZERO_OR_ONE, 0, 1)
        if high is None:
            if low == 0:
                return cls(RepetitionKind.ZERO_OR_MORE, 0, None)
            if low == 1:
                return cls(RepetitionKind.ONE_OR_MORE, 1, None)
            return cls(RepetitionKind.AT_LEAST, low, None)
        if low == high:
            return cls(RepetitionKind.EXACTLY, low, high)
        if low > high:
            raise InvariantViolation(f"empty repetition range: {low} > {high}")
        if low == 0:
            return cls(RepetitionKind.UNTIL, 0, high)
        return cls(RepetitionKind.BETWEEN, low, high)

    @property
    def suffix(self) -> str:
        """The regex quantifier text for this spec."""
        kind = self.kind
        if kind is RepetitionKind.ZERO_OR_ONE:
            return "?"
        if kind is RepetitionKind.ZERO_OR_MORE:
            return "*"
        if kind is RepetitionKind.ONE_OR_MORE:
            return "+"
        if kind is RepetitionKind.EXACTLY:
            return f"{{{self.low}}}"
        if kind is RepetitionKind.AT_LEAST:
            return f"{{{self.low},}}"
        if kind is RepetitionKind.UNTIL:
            return f"{{0,{self.high}}}"
        return f"{{{self.low},{self.high}}}"

    def __str__(self) -> str:
        return self.suffix
