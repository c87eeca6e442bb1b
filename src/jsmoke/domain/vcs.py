"""Version control systems available for new projects.

Only describes the repository init command; running it is the
caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from jsmoke.domain.errors import InvalidSyntaxError


@dataclass(frozen=True)
class VcsCommand:
    """A command line to initialize a repository."""

    name: str
    args: tuple[str, ...]

    def __str__(self) -> str:
        return " ".join((self.name, *self.args))


class VcsError(InvalidSyntaxError):
    code: ClassVar[str] = "UNKNOWN_VCS"

    def __init__(self, provided: str) -> None:
        super().__init__(
            f"unknown version control system (`{provided}`)",
            provided=provided,
        )

    def guidance(self) -> list[str]:
        return [f"Available: {', '.join(v.value for v in VersionControlSystem)}"]


class VersionControlSystem(StrEnum):
    GIT = "git"
    HG = "hg"
    PIJUL = "pijul"
    SVN = "svn"
    NONE = "none"

    @classmethod
    def parse(cls, text: str) -> VersionControlSystem:
        """Case-insensitive lookup by name."""
        try:
            return cls(text.strip().lower())
        except ValueError as exc:
            raise VcsError(text) from exc

    def init_command(self) -> VcsCommand | None:
        """The init command for this system, or None for ``none``."""
        return _INIT_COMMANDS.get(self)


_INIT_COMMANDS: dict[VersionControlSystem, VcsCommand] = {
    VersionControlSystem.GIT: VcsCommand("git", ("init",)),
    VersionControlSystem.HG: VcsCommand("hg", ("init",)),
    VersionControlSystem.PIJUL: VcsCommand("pijul", ("init",)),
    VersionControlSystem.SVN: VcsCommand("svnadmin", ("create",)),
}
