"""Rich Console factory and theme for jsmk output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

JSM_THEME = Theme(
    {
        "jsm.ok": "bold green",
        "jsm.error": "bold red",
        "jsm.warning": "bold yellow",
        "jsm.note": "bold blue",
        "jsm.op": "bold cyan",
        "jsm.key": "dim",
        "jsm.field": "bold",
        "jsm.value": "bright_blue",
        "jsm.allowed": "green",
        "jsm.denied": "red",
    }
)

# Guidance line prefixes and the style used to highlight them.
_TAG_STYLES: dict[str, str] = {
    "NOTE:": "jsm.note",
    "WARNING:": "jsm.warning",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=JSM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_tag(line: str) -> str:
    """Return the Rich style for a guidance line's leading tag, if any."""
    stripped = line.lstrip()
    for tag, style in _TAG_STYLES.items():
        if stripped.startswith(tag):
            return style
    return ""
