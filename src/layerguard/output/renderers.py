"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`; every
operation the services expose has one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from layerguard.output.console import create_console, get_output, style_for_verdict

if TYPE_CHECKING:
    from rich.console import Console

    from layerguard.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op in ("check", "check_source"):
        lines = [f"config: {issue['message']}" for issue in result.data.get("config_issues", [])]
        lines.extend(_location_line(v) for v in result.data.get("violations", []))
        if lines:
            return "\n".join(lines)

    if result.op == "init":
        return str(result.data.get("config_path", ""))

    if result.op == "resolve":
        layer = result.data.get("to_layer", result.data.get("layer"))
        return layer or "-"

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _location_line(violation: dict[str, Any]) -> str:
    """``path:line:col: message`` for one violation."""
    line = violation.get("line") or 1
    column = violation.get("column") or 0
    return f"{violation.get('file', '')}:{line}:{column}: {violation.get('message', '')}"


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="lg.ok")
    op = Text(f"  {result.op}", style="lg.op")
    console.print(Text.assemble(label, op))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="lg.key")
    if key.endswith("layer") or key == "layers":
        v = Text(str(value), style="lg.layer")
    elif key in ("target", "from_file", "config_path"):
        v = Text(str(value), style="lg.path")
    elif key == "reference":
        v = Text(str(value), style="lg.import")
    elif key == "verdict":
        v = Text(str(value), style=style_for_verdict(value))
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))

def _render_config_issues(console: Console, issues: list[dict[str, Any]]) -> None:
    if not issues:
        return
    console.print(Text("configuration", style="bold"))
    for issue in issues:
        console.print(Text.assemble(("  error", "lg.error"), f": {issue.get('message', '')}"))
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="lg.error")
    op = Text(f"  {result.op}", style="lg.op")
    console.print(Text.assemble(label, op, " — ", msg))

    if err and err.detail.get("issues"):
        for issue in err.detail["issues"]:
            console.print(Text(f"  {issue.get('message', '')}"))
    elif verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Check renderers ───────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render violations grouped by file, config issues first."""
    violations: list[dict[str, Any]] = result.data.get("violations", [])
    issues: list[dict[str, Any]] = result.data.get("config_issues", [])
    checked = result.data.get("files_checked", 0)

    if not violations and not issues:
        console.print(
            Text.assemble(("OK", "lg.ok"), f"  No boundary violations ({checked} files checked).")
        )
        return

    _render_config_issues(console, issues)

    by_file: dict[str, list[dict[str, Any]]] = {}
    for violation in violations:
        by_file.setdefault(str(violation.get("file", "")), []).append(violation)

    for path, file_violations in by_file.items():
        console.print(Text(path, style="lg.path"))
        for v in file_violations:
            loc = Text(f"  {v.get('line', '?')}:{v.get('column', '?')}", style="lg.loc")
            layers = Text.assemble(
                "  ",
                (str(v.get("from_layer", "")), "lg.layer"),
                " -> ",
                (str(v.get("to_layer", "")), "lg.layer"),
                "  ",
                (str(v.get("import_path", "")), "lg.import"),
            )
            console.print(loc, layers, sep="")
            console.print(Text(f"      {v.get('hint', '')}", style="lg.hint"))
            if verbose:
                console.print(Text(f"      kind: {v.get('kind', '')}", style="dim"))
        console.print()

    summary = f"{len(violations)} violations in {len(by_file)} files ({checked} files checked)"
    if issues:
        summary += f", {len(issues)} config issues"
    console.print(Text(summary))


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("target", "layer", "reference", "from_file", "from_layer", "to_layer", "verdict"):
        if key in result.data:
            _field(console, key, result.data[key] if result.data[key] is not None else "-")
    if result.data.get("message"):
        console.print(Text(f"  {result.data['message']}", style="lg.hint"))


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "layers", ", ".join(result.data.get("layers", [])) or "-")
    _field(console, "root", result.data.get("root", ""))
    _field(console, "aliases", ", ".join(result.data.get("aliases", [])))
    if result.data.get("config_path"):
        _field(console, "config_path", result.data["config_path"])


def _render_layers(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the declared layers as a table."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(Text("No layers configured.", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Layer", style="lg.layer", no_wrap=True)
    table.add_column("Can import")
    table.add_column("Used by", style="dim")
    for item in items:
        can_import = "any" if item.get("wildcard") else ", ".join(item.get("can_import", []))
        table.add_row(
            str(item.get("name", "")),
            can_import or "(none)",
            ", ".join(item.get("dependents", [])),
        )
    console.print(table)

    tiers: list[list[str]] = result.data.get("tiers", [])
    if tiers and verbose:
        console.print()
        console.print(Text("tiers (leaves first):", style="dim"))
        for index, tier in enumerate(tiers):
            console.print(Text(f"  {index}: {', '.join(tier)}"))

    _render_config_issues(console, result.data.get("config_issues", []))


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "config_path", result.data.get("config_path", ""))
    _field(console, "preset", result.data.get("preset", ""))
    _field(console, "layers", ", ".join(result.data.get("layers", [])) or "-")


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "check": _render_check,
    "check_source": _render_check,
    "resolve": _render_resolve,
    "validate": _render_validate,
    "layers": _render_layers,
    "init": _render_init,
}
