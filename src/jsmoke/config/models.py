"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, jsmk.toml only contains
overrides. Field values are kept as raw strings; ValidationService
parses them so that every broken field is reported, not just the first.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- jsmk.toml sections ---


class ProjectConfig(BaseModel):
    """[project] section."""

    model_config = {"frozen": True}

    name: str | None = None
    group: str | None = None
    description: str | None = None
    lock_version: str | None = None
    main_class: str | None = None
    vcs: str = "git"
    authors: list[str] = Field(default_factory=list)
