"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from jsmoke.output.console import create_console, get_output, style_for_tag

if TYPE_CHECKING:
    from rich.console import Console

    from jsmoke.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Guidance lines attached to an error are printed only when *verbose*
    is set by the caller.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        renderer = _FAILURE_RENDERERS.get(result.op, _render_error)
        renderer(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="jsm.ok")
    op = Text(f"  {result.op}", style="jsm.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="jsm.key")
    if isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value), style="jsm.value")
    console.print(k, v, sep="")


def _render_guidance(console: Console, lines: list[str], *, indent: int = 2) -> None:
    """Print guidance lines, highlighting NOTE/WARNING tags."""
    pad = " " * indent
    console.print()
    for line in lines:
        console.print(Text(f"{pad}{line}", style=style_for_tag(line)))


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="jsm.warning"), Text(warning), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="jsm.error")
    op = Text(f"  {result.op}", style="jsm.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    if not (verbose and err and err.detail):
        return
    extra = {k: v for k, v in err.detail.items() if k != "guidance"}
    if extra:
        console.print(Text("  detail:", style="dim"))
        for k, v in extra.items():
            console.print(Text(f"    {k}: {v}"))
    guidance = err.detail.get("guidance") or []
    if guidance:
        _render_guidance(console, guidance)


# ── Field renderers ───────────────────────────────────────────────────


def _render_group(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "group", result.data.get("group", ""))
    if verbose:
        _field(console, "words", result.data.get("words", []))


def _render_lock_version(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    for key in ("kind", "constraint", "version", "left", "right"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_match(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    allowed = bool(result.data.get("allowed"))
    verdict = (
        Text("allowed", style="jsm.allowed") if allowed else Text("not allowed", style="jsm.denied")
    )
    candidate = Text(f"  {result.data.get('candidate', '')} ")
    constraint = Text(f" by {result.data.get('constraint', '')}")
    console.print(candidate, verdict, constraint, sep="")


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render project check results: valid fields, then issues."""
    fields: dict[str, Any] = result.data.get("fields", {})
    issues: list[dict[str, Any]] = result.data.get("issues", [])

    if result.ok:
        _status_line(console, result)
    else:
        _render_error(result, console)

    for key, value in fields.items():
        _field(console, key, value)
    _render_warnings(console, result)

    for issue in issues:
        console.print()
        field = Text(f"  {issue.get('field', '?')}", style="jsm.field")
        label = Text(" error", style="jsm.error")
        console.print(field, label, Text(f": {issue.get('message', '')}"), sep="")
        if verbose and issue.get("guidance"):
            _render_guidance(console, issue["guidance"], indent=4)

    if issues:
        console.print(f"\n{len(issues)} invalid field(s)")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)


# ── Dispatch tables ───────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate_group": _render_group,
    "validate_lock_version": _render_lock_version,
    "validate_name": _render_generic,
    "validate_main_class": _render_generic,
    "validate_vcs": _render_generic,
    "match_version": _render_match,
    "check": _render_check,
}

_FAILURE_RENDERERS: dict[str, Any] = {
    "check": _render_check,
}
