"""Rich Console factory and theme for layerguard output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LG_THEME = Theme(
    {
        "lg.ok": "bold green",
        "lg.error": "bold red",
        "lg.warning": "bold yellow",
        "lg.op": "bold cyan",
        "lg.key": "dim",
        "lg.path": "bold",
        "lg.loc": "dim",
        "lg.layer": "bold blue",
        "lg.import": "magenta",
        "lg.hint": "italic",
        "lg.verdict.allowed": "green",
        "lg.verdict.same-layer": "green",
        "lg.verdict.unresolved": "dim",
        "lg.verdict.violation": "bold red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=LG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_verdict(verdict: str | None) -> str:
    """Return the Rich style name for a boundary verdict."""
    if not verdict:
        return "lg.verdict.unresolved"
    return f"lg.verdict.{verdict}"
