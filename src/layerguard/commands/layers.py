"""Command: show declared layers and their allowed dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from layerguard.commands._base import LayerguardCommand

if TYPE_CHECKING:
    from layerguard.commands._context import AppContext


@click.command(
    cls=LayerguardCommand,
    examples="""\
  layerguard layers
  layerguard -v layers
  layerguard --json layers""",
)
@click.pass_obj
def layers(app: AppContext) -> None:
    """List layers, what they may import, and who depends on them."""
    from layerguard.services.boundaries import BoundaryService

    app.emit(BoundaryService(app.project).layers())
