"""Command: check sources for layer-boundary violations."""

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
  layerguard check
  layerguard check layers/cart
  layerguard --json check
  layerguard -q check layers/cart/components/Cart.vue
  layerguard check --exit-zero
  cat Cart.vue | layerguard check --stdin-filename layers/cart/components/Cart.vue""",
)
@click.argument("paths", nargs=-1, type=click.Path())
@click.option("--exit-zero", is_flag=True, help="Exit 0 even when violations are found.")
@click.option(
    "--stdin-filename",
    default=None,
    help="Read source from stdin and check it as if it lived at this path.",
)
@click.pass_obj
def check(
    app: AppContext,
    paths: tuple[str, ...],
    exit_zero: bool,
    stdin_filename: str | None,
) -> None:
    """Check source files for imports that cross layer boundaries.

    Exits 1 when violations or configuration issues are found.
    """
    from layerguard.services.boundaries import BoundaryService

    svc = BoundaryService(app.project)

    if stdin_filename:
        source = click.get_text_stream("stdin").read()
        result = svc.check_source(from_cwd(stdin_filename), source)
    else:
        result = svc.check([from_cwd(p) for p in paths])

    app.emit(result)
    if not exit_zero and not result.data.get("healthy", True):
        raise SystemExit(1)
