"""Command: write a starter config (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from layerguard.commands._base import LayerguardCommand
from layerguard.config.presets import DEFAULT_PRESET, PRESETS

if TYPE_CHECKING:
    from layerguard.commands._context import AppContext

_INIT_EXAMPLES = """\
  layerguard init
  layerguard init path/to/project
  layerguard init --preset recommended --force"""


@click.command("init", cls=LayerguardCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=".")
@click.option(
    "--preset",
    type=click.Choice(sorted(PRESETS), case_sensitive=False),
    default=DEFAULT_PRESET,
    show_default=True,
    help="Layer layout to start from.",
)
@click.option("--force", is_flag=True, help="Overwrite an existing layerguard.toml.")
@click.pass_obj
def init_cmd(app: AppContext, path: str, preset: str, force: bool) -> None:
    """Write a layerguard.toml for PATH (default: current directory)."""
    from layerguard.services.init import InitService

    app.emit(InitService.init_project(Path(path).resolve(), preset=preset.lower(), force=force))
