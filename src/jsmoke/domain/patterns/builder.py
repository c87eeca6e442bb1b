"""PatternBuilder — assembles regex text from reusable parts.

Immutable: each ``with_*`` / ``merge`` call returns a new builder, so a
partially configured builder can be shared without aliasing surprises.

Final text layout::

    [\\s*] base | (base)<suffix> [\\s*]
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from jsmoke.domain.patterns.compiled import CompiledPattern
from jsmoke.domain.patterns.repetition import RepetitionSpec

_SPACES = r"\s*"


@dataclass(frozen=True)
class PatternBuilder:
    """Builder state for a single pattern.

    Attributes:
        pattern: Base regex text.
        times: Optional repetition applied to the whole base.
        leading_spaces: Tolerate whitespace on both ends.
    """

    pattern: str
    times: RepetitionSpec | None = None
    leading_spaces: bool = False

    def with_times(self, times: range | slice | RepetitionSpec) -> PatternBuilder:
        """Repeat the base pattern (see :meth:`RepetitionSpec.of`)."""
        spec = times if isinstance(times, RepetitionSpec) else RepetitionSpec.of(times)
        return replace(self, times=spec)

    def clear_times(self) -> PatternBuilder:
        return replace(self, times=None)

    def with_leading_spaces(self, yes: bool = True) -> PatternBuilder:
        return replace(self, leading_spaces=yes)

    def merge(self, other: CompiledPattern) -> PatternBuilder:
        """Append *other* as a capturing group onto the base text.

        *other* is already compiled, so its own spacing and repetition
        are part of its text and are kept verbatim.
        """
        return replace(self, pattern=f"{self.pattern}({other.pattern})")

    def render(self) -> str:
        """The final pattern text, without compiling it."""
        body = self.pattern if self.times is None else f"({self.pattern}){self.times.suffix}"
        if self.leading_spaces:
            return f"{_SPACES}{body}{_SPACES}"
        return body

    def try_build(self) -> CompiledPattern:
        """Compile the rendered text.

        Raises:
            PatternCompileError: The rendered text is not valid regex.
        """
        return CompiledPattern.compile(self.render())
