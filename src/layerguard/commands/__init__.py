"""Subcommand modules for layerguard.

Provides register_commands() which uses deferred imports to keep
``layerguard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from layerguard.commands.check import check
    from layerguard.commands.init_cmd import init_cmd
    from layerguard.commands.layers import layers
    from layerguard.commands.resolve import resolve
    from layerguard.commands.validate import validate

    cli.add_command(check)
    cli.add_command(validate)
    cli.add_command(resolve)
    cli.add_command(layers)
    cli.add_command(init_cmd)
