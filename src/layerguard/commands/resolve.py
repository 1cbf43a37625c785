"""Command: explain which layer a file or reference belongs to."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from layerguard.commands._base import LayerguardCommand
from layerguard.commands._context import from_cwd

if TYPE_CHECKING:
    from layerguard.commands._context import AppContext


@click.command(
    cls=LayerguardCommand,
    examples="""\
  layerguard resolve layers/cart/components/Cart.vue
  layerguard resolve '#layers/shared/utils' --from layers/cart/components/Cart.vue
  layerguard resolve ../../products/x --from layers/cart/a/b/Comp.vue""",
)
@click.argument("target")
@click.option(
    "--from",
    "from_file",
    default=None,
    help="Treat TARGET as a module reference found in this file.",
)
@click.pass_obj
def resolve(app: AppContext, target: str, from_file: str | None) -> None:
    """Resolve TARGET to a layer, and check it when --from is given."""
    from layerguard.services.boundaries import BoundaryService

    svc = BoundaryService(app.project)
    if from_file is None:
        result = svc.resolve(from_cwd(target))
    else:
        result = svc.resolve(target, from_file=from_cwd(from_file))
    app.emit(result)
