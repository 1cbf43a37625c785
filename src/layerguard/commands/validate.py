"""Command: validate the layer configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from layerguard.commands._base import LayerguardCommand

if TYPE_CHECKING:
    from layerguard.commands._context import AppContext


@click.command(
    cls=LayerguardCommand,
    examples="""\
  layerguard validate
  layerguard -c ci/layerguard.toml validate
  layerguard --json validate""",
)
@click.pass_obj
def validate(app: AppContext) -> None:
    """Check that every canImport entry names a declared layer."""
    from layerguard.services.boundaries import BoundaryService

    app.emit(BoundaryService(app.project).validate())
