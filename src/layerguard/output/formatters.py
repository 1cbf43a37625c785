"""Output mode dispatch for ServiceResult.

The CLI renders ServiceResult for humans (Rich output, colors) or
machines (--json). ``--quiet`` emits one line per finding, in the
``path:line:col: message`` shape editors and CI annotators understand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from layerguard.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from layerguard.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags relevant to formatting."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the Rich renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
