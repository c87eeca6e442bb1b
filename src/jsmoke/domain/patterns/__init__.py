"""Composable regex building blocks.

:class:`PatternBuilder` assembles text, :class:`CompiledPattern` holds
the compiled result, :class:`RepetitionSpec` describes quantifiers.
"""

from jsmoke.domain.patterns.builder import PatternBuilder
from jsmoke.domain.patterns.compiled import CompiledPattern
from jsmoke.domain.patterns.repetition import RepetitionKind, RepetitionSpec

__all__ = ["CompiledPattern", "PatternBuilder", "RepetitionKind", "RepetitionSpec"]
