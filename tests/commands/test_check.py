"""Tests for check CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from jsmoke.cli import cli
from tests.conftest import write_config


@pytest.mark.usefixtures("project_root")
class TestCheckValidProject:
    def test_check(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "main_class: com.example.App" in result.output
        assert "vcs_command: git init" in result.output

    def test_check_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "check"
        assert data["data"]["count"] == 0
        assert data["data"]["fields"]["lock_version"] == "^=17"


class TestCheckInvalidProject:
    def test_reports_every_issue(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_config(
            tmp_path,
            '[project]\nname = "my app"\ngroup = "Com"\nlock_version = "1<=>0.1"\n',
        )
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 1
        assert "name error: project name can't be compound (my app)" in result.output
        assert "group error" in result.output
        assert "lock_version error" in result.output
        assert "3 invalid field(s)" in result.output

    def test_verbose_guidance(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_config(tmp_path, '[project]\nname = "app"\n')
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["-v", "check"])
        assert result.exit_code == 1
        assert "Use a class-like valid name:" in result.output

    def test_explicit_config_path(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = write_config(tmp_path, '[project]\nname = "App"\nvcs = "cvs"\n')
        result = cli_runner.invoke(cli, ["--json", "-c", str(config), "check"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["data"]["issues"][0]["field"] == "vcs"


class TestCheckWithoutConfig:
    def test_missing_config_warns(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 1
        assert "no jsmk.toml found" in result.output
        assert "project name is required" in result.output


class TestCheckMalformedConfig:
    def test_extra_section_still_checks(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_config(tmp_path, '[project]\nname = "App"\n\n[build]\nout = "x"\n')
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["--json", "check"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["fields"]["name"] == "App"

    def test_wrong_type_reports_error(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_config(tmp_path, "[project]\nname = 5\n")
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert "project.name" in result.output
        assert not isinstance(result.exception, ValueError)
