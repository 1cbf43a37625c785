"""Click base classes for layerguard commands.

Every command takes an optional ``examples`` text. It is kept out of
``--help`` and printed by an eager ``--examples`` flag instead. The root
group lists subcommands in the order they were registered (``check``
first), not alphabetically.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


class _ExamplesMixin:
    """Adds an eager ``--examples`` flag when examples text is given."""

    params: list[click.Parameter]

    def _install_examples(self, examples: str | None) -> None:
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        if self.examples is None:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._show_examples,
                help="Show usage examples and exit.",
            )
        )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(self.examples or "", "  "))
        ctx.exit(0)


class LayerguardCommand(_ExamplesMixin, click.Command):
    """A command that accepts ``examples=...``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)


class LayerguardGroup(_ExamplesMixin, click.Group):
    """The root group: ``examples=...`` support and registration-order listing."""

    command_class = LayerguardCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)

    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(self.commands)
