"""layerguard — import-boundary checker for layered codebases."""

__version__ = "0.1.0"
