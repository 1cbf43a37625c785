"""Allow ``python -m layerguard``."""

from layerguard.cli import cli

if __name__ == "__main__":
    cli()
