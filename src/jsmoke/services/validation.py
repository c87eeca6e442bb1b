"""ValidationService — field parsing behind the ServiceResult contract.

Each ``validate_*`` method parses one raw string. ``check_project``
validates every field of a ``[project]`` section independently and
aggregates the outcome, so one bad field never hides another.

INVARIANT: recoverable parse errors become failed results.
InvariantViolation is a bug and propagates.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from jsmoke.domain.errors import FieldParseError
from jsmoke.domain.group import ProjectGroup
from jsmoke.domain.lock_version import (
    GreaterOrEquals,
    InRange,
    LockConstraint,
    LockRangeError,
    LockVersion,
    StrictlyEquals,
)
from jsmoke.domain.main_class import MainClassPath
from jsmoke.domain.project_name import ProjectName, ProjectNameError
from jsmoke.domain.vcs import VersionControlSystem
from jsmoke.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from jsmoke.config.models import ProjectConfig

logger = logging.getLogger(__name__)


def error_detail(exc: FieldParseError, provided: str) -> dict[str, Any]:
    """The ``detail`` payload for a field parse failure."""
    detail: dict[str, Any] = {"provided": provided, "guidance": exc.guidance()}
    if isinstance(exc, ProjectNameError):
        detail["failure"] = exc.failure.value
    elif isinstance(exc, LockRangeError):
        detail["left"] = str(exc.left)
        detail["right"] = str(exc.right)
    return detail


def _failed(op: str, exc: FieldParseError, provided: str) -> ServiceResult:
    logger.debug("%s rejected %r: %s", op, provided, exc)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail=error_detail(exc, provided)),
    )


def _constraint_data(constraint: LockConstraint) -> dict[str, Any]:
    data: dict[str, Any] = {"kind": constraint.kind.value, "constraint": str(constraint)}
    if isinstance(constraint, InRange):
        data["left"] = str(constraint.left)
        data["right"] = str(constraint.right)
    elif isinstance(constraint, (GreaterOrEquals, StrictlyEquals)):
        data["version"] = str(constraint.version)
    return data


def _group_data(group: ProjectGroup) -> dict[str, Any]:
    return {"group": str(group), "words": list(group.words)}


def _main_class_data(path: MainClassPath) -> dict[str, Any]:
    return {
        "main_class": str(path),
        "package": str(path.package) if path.package is not None else None,
        "class_name": str(path.class_name),
    }


def _vcs_data(vcs: VersionControlSystem) -> dict[str, Any]:
    command = vcs.init_command()
    return {"vcs": vcs.value, "init_command": str(command) if command else None}


class ValidationService:
    """Validates the structured text fields of a project."""

    # ------------------------------------------------------------------
    # Single fields
    # ------------------------------------------------------------------

    def validate_group(self, text: str) -> ServiceResult:
        op = "validate_group"
        try:
            group = ProjectGroup.parse(text)
        except FieldParseError as exc:
            return _failed(op, exc, text)
        return ServiceResult(ok=True, op=op, data=_group_data(group))

    def validate_lock_version(self, text: str) -> ServiceResult:
        op = "validate_lock_version"
        try:
            constraint = LockConstraint.parse(text)
        except FieldParseError as exc:
            return _failed(op, exc, text)
        return ServiceResult(ok=True, op=op, data=_constraint_data(constraint))

    def validate_name(self, text: str) -> ServiceResult:
        op = "validate_name"
        try:
            name = ProjectName.parse(text)
        except FieldParseError as exc:
            return _failed(op, exc, text)
        return ServiceResult(ok=True, op=op, data={"name": str(name)})

    def validate_main_class(self, text: str) -> ServiceResult:
        op = "validate_main_class"
        try:
            path = MainClassPath.parse(text)
        except FieldParseError as exc:
            return _failed(op, exc, text)
        return ServiceResult(ok=True, op=op, data=_main_class_data(path))

    def validate_vcs(self, text: str) -> ServiceResult:
        op = "validate_vcs"
        try:
            vcs = VersionControlSystem.parse(text)
        except FieldParseError as exc:
            return _failed(op, exc, text)
        return ServiceResult(ok=True, op=op, data=_vcs_data(vcs))

    def match_version(self, constraint_text: str, candidate_text: str) -> ServiceResult:
        """Check whether *candidate_text* satisfies the lock constraint.

        A candidate outside the constraint is still ``ok``: the answer is
        in ``data["allowed"]``. Only unparseable input fails.
        """
        op = "match_version"
        try:
            constraint = LockConstraint.parse(constraint_text)
        except FieldParseError as exc:
            return _failed(op, exc, constraint_text)
        try:
            candidate = LockVersion.parse(candidate_text)
        except FieldParseError as exc:
            return _failed(op, exc, candidate_text)
        allowed = constraint.allows(candidate)
        logger.debug("%s: %s against %s -> %s", op, candidate, constraint, allowed)
        data = _constraint_data(constraint)
        data["candidate"] = str(candidate)
        data["allowed"] = allowed
        return ServiceResult(ok=True, op=op, data=data)

    # ------------------------------------------------------------------
    # Whole project
    # ------------------------------------------------------------------

    def check_project(self, project: ProjectConfig) -> ServiceResult:
        """Validate every configured field of a ``[project]`` section.

        Missing optional fields are skipped. ``name`` is required. When
        ``main_class`` is unset and both name and group are valid, the
        default ``<GROUP>.<NAME>`` is reported.
        """
        op = "check"
        fields: dict[str, Any] = {}
        issues: list[dict[str, Any]] = []
        warnings: list[str] = []

        def record(field: str, provided: str, exc: FieldParseError) -> None:
            issues.append(
                {
                    "field": field,
                    "code": exc.code,
                    "message": str(exc),
                    **error_detail(exc, provided),
                }
            )

        name: ProjectName | None = None
        if project.name is None:
            issues.append(
                {
                    "field": "name",
                    "code": "MISSING_FIELD",
                    "message": "project name is required",
                    "provided": None,
                    "guidance": [],
                }
            )
        else:
            try:
                name = ProjectName.parse(project.name)
                fields["name"] = str(name)
            except FieldParseError as exc:
                record("name", project.name, exc)

        group: ProjectGroup | None = None
        if project.group is not None:
            try:
                group = ProjectGroup.parse(project.group)
                fields["group"] = str(group)
            except FieldParseError as exc:
                record("group", project.group, exc)

        if project.lock_version is not None:
            try:
                fields["lock_version"] = str(LockConstraint.parse(project.lock_version))
            except FieldParseError as exc:
                record("lock_version", project.lock_version, exc)

        if project.main_class is not None:
            try:
                fields["main_class"] = str(MainClassPath.parse(project.main_class))
            except FieldParseError as exc:
                record("main_class", project.main_class, exc)
        elif name is not None and group is not None:
            fields["main_class"] = str(MainClassPath.default_for(group, name))
        elif name is not None and project.group is None:
            warnings.append("No project group set; main class defaults to the bare name")
            fields["main_class"] = str(name)

        try:
            vcs = VersionControlSystem.parse(project.vcs)
            fields["vcs"] = vcs.value
            command = vcs.init_command()
            if command is not None:
                fields["vcs_command"] = str(command)
        except FieldParseError as exc:
            record("vcs", project.vcs, exc)

        data: dict[str, Any] = {"fields": fields, "issues": issues, "count": len(issues)}
        if not issues:
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

        logger.debug("check found %d invalid field(s)", len(issues))
        return ServiceResult(
            ok=False,
            op=op,
            data=data,
            warnings=warnings,
            error=ServiceError(
                code="PROJECT_INVALID",
                message=f"{len(issues)} project field(s) failed validation",
            ),
        )
