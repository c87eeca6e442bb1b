"""Tests for RepetitionSpec — range normalization and quantifier text."""

import re

import pytest

from jsmoke.domain.errors import InvariantViolation
from jsmoke.domain.patterns import RepetitionKind, RepetitionSpec


class TestOf:
    @pytest.mark.parametrize(
        "value,kind,low,high",
        [
            (slice(None, 2), RepetitionKind.ZERO_OR_ONE, 0, 1),
            (range(0, 2), RepetitionKind.ZERO_OR_ONE, 0, 1),
            (slice(None), RepetitionKind.ZERO_OR_MORE, 0, None),
            (slice(0, None), RepetitionKind.ZERO_OR_MORE, 0, None),
            (slice(1, None), RepetitionKind.ONE_OR_MORE, 1, None),
            (range(3, 4), RepetitionKind.EXACTLY, 3, 3),
            (slice(None, 1), RepetitionKind.EXACTLY, 0, 0),
            (slice(3, None), RepetitionKind.AT_LEAST, 3, None),
            (range(0, 41), RepetitionKind.UNTIL, 0, 40),
            (range(10, 21), RepetitionKind.BETWEEN, 10, 20),
        ],
    )
    def test_case_table(
        self, value: range | slice, kind: RepetitionKind, low: int, high: int | None
    ) -> None:
        spec = RepetitionSpec.of(value)
        assert spec.kind is kind
        assert spec.low == low
        assert spec.high == high

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            RepetitionSpec.of((1, 2))  # type: ignore[arg-type]

    def test_rejects_step(self) -> None:
        with pytest.raises(InvariantViolation):
            RepetitionSpec.of(range(0, 10, 2))


class TestFromBounds:
    def test_inclusive_zero_one(self) -> None:
        assert RepetitionSpec.from_bounds(0, 1, inclusive=True).kind is RepetitionKind.ZERO_OR_ONE

    def test_inclusive_exactly(self) -> None:
        spec = RepetitionSpec.from_bounds(7, 7, inclusive=True)
        assert spec.kind is RepetitionKind.EXACTLY
        assert spec.low == 7

    def test_inclusive_until(self) -> None:
        spec = RepetitionSpec.from_bounds(None, 3, inclusive=True)
        assert spec.kind is RepetitionKind.UNTIL
        assert spec.high == 3

    def test_inclusive_between(self) -> None:
        spec = RepetitionSpec.from_bounds(10, 20, inclusive=True)
        assert spec.kind is RepetitionKind.BETWEEN
        assert (spec.low, spec.high) == (10, 20)

    def test_one_to_one_is_exactly(self) -> None:
        assert RepetitionSpec.from_bounds(1, 1, inclusive=True).kind is RepetitionKind.EXACTLY


class TestInvalidRanges:
    def test_exclusive_zero_end(self) -> None:
        with pytest.raises(InvariantViolation):
            RepetitionSpec.of(range(0, 0))

    def test_exclusive_zero_end_slice(self) -> None:
        with pytest.raises(InvariantViolation):
            RepetitionSpec.of(slice(None, 0))

    def test_empty_range(self) -> None:
        with pytest.raises(InvariantViolation):
            RepetitionSpec.of(range(5, 5))

    def test_inverted_inclusive(self) -> None:
        with pytest.raises(InvariantViolation):
            RepetitionSpec.from_bounds(5, 3, inclusive=True)

    def test_negative_start(self) -> None:
        with pytest.raises(InvariantViolation):
            RepetitionSpec.from_bounds(-1, 3)

    def test_not_a_recoverable_error(self) -> None:
        assert not issubclass(InvariantViolation, ValueError)


class TestSuffix:
    @pytest.mark.parametrize(
        "spec,suffix",
        [
            (RepetitionSpec(RepetitionKind.ZERO_OR_ONE, 0, 1), "?"),
            (RepetitionSpec(RepetitionKind.ZERO_OR_MORE), "*"),
            (RepetitionSpec(RepetitionKind.ONE_OR_MORE, 1), "+"),
            (RepetitionSpec(RepetitionKind.EXACTLY, 3, 3), "{3}"),
            (RepetitionSpec(RepetitionKind.AT_LEAST, 2), "{2,}"),
            (RepetitionSpec(RepetitionKind.UNTIL, 0, 43), "{0,43}"),
            (RepetitionSpec(RepetitionKind.BETWEEN, 1, 2), "{1,2}"),
        ],
    )
    def test_suffix(self, spec: RepetitionSpec, suffix: str) -> None:
        assert spec.suffix == suffix
        assert str(spec) == suffix

    @pytest.mark.parametrize("low,high", [(0, 0), (0, 1), (0, 4), (1, 1), (2, 5), (3, 3)])
    def test_quantifier_accepts_exactly_the_range(self, low: int, high: int) -> None:
        spec = RepetitionSpec.from_bounds(low, high, inclusive=True)
        pattern = re.compile(f"(a){spec.suffix}")
        for count in range(high + 3):
            matched = pattern.fullmatch("a" * count) is not None
            assert matched is (low <= count <= high), count
