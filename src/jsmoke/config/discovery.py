"""Locate the ``jsmk.toml`` that describes the current Java project.

The file normally sits at the project root, next to ``src/``. Commands
run from ``src/main/java/...`` still find it by walking up.
``JSMOKE_CONFIG`` pins one file and disables the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "jsmk.toml"
CONFIG_ENV_VAR = "JSMOKE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``jsmk.toml`` at or above *start* (default: cwd).

    A ``JSMOKE_CONFIG`` path that is not a file yields None rather than
    falling back to the walk.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
