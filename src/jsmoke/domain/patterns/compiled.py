"""CompiledPattern — a compiled regex paired with its source text."""

from __future__ import annotations

import re
from dataclasses import dataclass

from jsmoke.domain.errors import PatternCompileError


@dataclass(frozen=True)
class CompiledPattern:
    """A compiled matcher plus the exact text it was built from.

    The text is kept so the pattern can be nested into a larger one
    by :meth:`PatternBuilder.merge`.
    """

    regex: re.Pattern[str]
    pattern: str

    @classmethod
    def compile(cls, pattern: str) -> CompiledPattern:
        """Compile *pattern*, raising :class:`PatternCompileError` on bad syntax."""
        try:
            regex = re.compile(pattern)
        except re.error as exc:
            raise PatternCompileError(pattern, exc) from exc
        return cls(regex=regex, pattern=pattern)

    def matches_whole(self, text: str) -> bool:
        """Whether the first match found in *text* spans all of it.

        A match that covers only a prefix or a suffix of *text* is a
        failure, even if the rest would be ignorable.
        """
        found = self.regex.search(text)
        return found is not None and found.group(0) == text
