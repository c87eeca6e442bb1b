"""Tests for ValidationService."""

from __future__ import annotations

import pytest

from jsmoke.config.models import ProjectConfig
from jsmoke.services.validation import ValidationService


@pytest.fixture
def service() -> ValidationService:
    return ValidationService()


class TestValidateGroup:
    def test_valid(self, service: ValidationService) -> None:
        result = service.validate_group("  com.example.tools ")
        assert result.ok
        assert result.op == "validate_group"
        assert result.data == {"group": "com.example.tools", "words": ["com", "example", "tools"]}

    def test_invalid(self, service: ValidationService) -> None:
        result = service.validate_group("Com.Example")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_PROJECT_GROUP"
        assert result.error.message == "fail to parse the provided project group (`Com.Example`)"
        assert result.error.detail["provided"] == "Com.Example"
        assert "  - only lowercases" in result.error.detail["guidance"]


class TestValidateLockVersion:
    def test_greater_or_equals(self, service: ValidationService) -> None:
        result = service.validate_lock_version("^17")
        assert result.ok
        assert result.data == {
            "kind": "greater_or_equals",
            "constraint": "^=17",
            "version": "17",
        }

    def test_strictly_equals(self, service: ValidationService) -> None:
        result = service.validate_lock_version("=1.2.3")
        assert result.data["kind"] == "strictly_equals"
        assert result.data["version"] == "1.2.3"

    def test_range(self, service: ValidationService) -> None:
        result = service.validate_lock_version("1.2<=>1.5")
        assert result.ok
        assert result.data == {
            "kind": "in_range",
            "constraint": "1.2<=>1.5",
            "left": "1.2",
            "right": "1.5",
        }

    def test_unparseable(self, service: ValidationService) -> None:
        result = service.validate_lock_version("^x.1")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNPARSEABLE_LOCK_VERSION"
        assert result.error.detail["guidance"][0].startswith("The `--lock-version` syntax")

    def test_inverted_range(self, service: ValidationService) -> None:
        result = service.validate_lock_version("2<=>1")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "LOCK_RANGE_INVERTED"
        assert result.error.detail["left"] == "2"
        assert result.error.detail["right"] == "1"

    def test_component_overflow_is_recoverable(self, service: ValidationService) -> None:
        result = service.validate_lock_version("70000")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNPARSEABLE_LOCK_VERSION"


class TestMatchVersion:
    @pytest.mark.parametrize(
        ("constraint", "candidate", "allowed"),
        [
            ("^17", "17", True),
            ("^17", "21.0.1", True),
            ("^17", "11", False),
            ("=1.2", "1.2", True),
            ("=1.2", "1.3", False),
            ("1<=>2", "1.5", True),
            ("1<=>2", "3", False),
        ],
    )
    def test_allowed(
        self, service: ValidationService, constraint: str, candidate: str, allowed: bool
    ) -> None:
        result = service.match_version(constraint, candidate)
        assert result.ok
        assert result.op == "match_version"
        assert result.data["allowed"] is allowed
        assert result.data["candidate"] == candidate

    def test_bad_candidate(self, service: ValidationService) -> None:
        result = service.match_version("^17", "^18")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["provided"] == "^18"

    def test_bad_constraint(self, service: ValidationService) -> None:
        result = service.match_version("nope", "17")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["provided"] == "nope"


class TestValidateName:
    def test_valid(self, service: ValidationService) -> None:
        result = service.validate_name(" MyClass ")
        assert result.ok
        assert result.data == {"name": "MyClass"}

    @pytest.mark.parametrize(
        ("text", "failure"),
        [
            ("my name", "compound_name"),
            ("   ", "is_empty"),
            ("5Class", "starts_with_number"),
            ("Name$", "not_allowed_char"),
            ("myClass", "starts_with_lowercase"),
        ],
    )
    def test_failures(self, service: ValidationService, text: str, failure: str) -> None:
        result = service.validate_name(text)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_PROJECT_NAME"
        assert result.error.detail["failure"] == failure
        assert result.error.detail["guidance"][0] == "Use a class-like valid name:"


class TestValidateMainClass:
    def test_with_package(self, service: ValidationService) -> None:
        result = service.validate_main_class("com.example.App")
        assert result.ok
        assert result.data == {
            "main_class": "com.example.App",
            "package": "com.example",
            "class_name": "App",
        }

    def test_bare_class(self, service: ValidationService) -> None:
        result = service.validate_main_class("Main")
        assert result.ok
        assert result.data["package"] is None

    def test_invalid(self, service: ValidationService) -> None:
        result = service.validate_main_class("com.example.app")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_MAIN_CLASS"


class TestValidateVcs:
    def test_git(self, service: ValidationService) -> None:
        result = service.validate_vcs("Git")
        assert result.ok
        assert result.data == {"vcs": "git", "init_command": "git init"}

    def test_none(self, service: ValidationService) -> None:
        result = service.validate_vcs("none")
        assert result.data == {"vcs": "none", "init_command": None}

    def test_unknown(self, service: ValidationService) -> None:
        result = service.validate_vcs("cvs")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_VCS"


class TestCheckProject:
    def test_valid_project(self, service: ValidationService) -> None:
        project = ProjectConfig(name="App", group="com.example", lock_version="^17")
        result = service.check_project(project)
        assert result.ok
        assert result.op == "check"
        assert result.data["count"] == 0
        assert result.data["fields"] == {
            "name": "App",
            "group": "com.example",
            "lock_version": "^=17",
            "main_class": "com.example.App",
            "vcs": "git",
            "vcs_command": "git init",
        }
        assert result.warnings == []

    def test_explicit_main_class(self, service: ValidationService) -> None:
        project = ProjectConfig(name="App", group="com.example", main_class="org.other.Main")
        result = service.check_project(project)
        assert result.data["fields"]["main_class"] == "org.other.Main"

    def test_no_group_warns(self, service: ValidationService) -> None:
        result = service.check_project(ProjectConfig(name="App", vcs="none"))
        assert result.ok
        assert result.data["fields"]["main_class"] == "App"
        assert "vcs_command" not in result.data["fields"]
        assert len(result.warnings) == 1

    def test_missing_name(self, service: ValidationService) -> None:
        result = service.check_project(ProjectConfig())
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PROJECT_INVALID"
        assert result.data["issues"][0]["field"] == "name"
        assert result.data["issues"][0]["code"] == "MISSING_FIELD"

    def test_reports_every_bad_field(self, service: ValidationService) -> None:
        project = ProjectConfig(
            name="my app",
            group="Com",
            lock_version="2<=>1",
            main_class="a b",
            vcs="cvs",
        )
        result = service.check_project(project)
        assert not result.ok
        assert result.data["count"] == 5
        assert [issue["field"] for issue in result.data["issues"]] == [
            "name",
            "group",
            "lock_version",
            "main_class",
            "vcs",
        ]
        assert result.error is not None
        assert result.error.message == "5 project field(s) failed validation"
        assert result.data["fields"] == {}

    def test_invalid_group_skips_default_main_class(self, service: ValidationService) -> None:
        result = service.check_project(ProjectConfig(name="App", group="Bad Group"))
        assert not result.ok
        assert "main_class" not in result.data["fields"]
