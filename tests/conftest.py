"""Shared pytest fixtures and test helpers for jsmoke tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from jsmoke.config.discovery import CONFIG_FILENAME

VALID_PROJECT_TOML = """\
[project]
name = "App"
group = "com.example"
lock_version = "^17"
vcs = "git"
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's JSMOKE_CONFIG from leaking into tests."""
    monkeypatch.delenv("JSMOKE_CONFIG", raising=False)


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory holding a valid jsmk.toml; also the CWD."""
    (tmp_path / CONFIG_FILENAME).write_text(VALID_PROJECT_TOML)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_config(root: Path, body: str) -> Path:
    """Write *body* as the jsmk.toml under *root*."""
    path = root / CONFIG_FILENAME
    path.write_text(body)
    return path
