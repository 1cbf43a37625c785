"""Project — the single dependency injected into every service.

Owns the resolved settings and lazily builds the layer graph, resolver,
and evaluator. Commands that never need the graph (``--help``,
``--version``) never build it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from layerguard.domain.evaluator import BoundaryEvaluator
from layerguard.domain.graph import LayerGraph
from layerguard.domain.resolver import LayerResolver
from layerguard.infrastructure.filesystem import find_source_files

if TYPE_CHECKING:
    from collections.abc import Iterable

    from layerguard.config.settings import LayerguardSettings

logger = logging.getLogger(__name__)


class Project:
    """A codebase under analysis plus its layer configuration."""

    def __init__(self, settings: LayerguardSettings) -> None:
        self.settings = settings
        self._graph: LayerGraph | None = None
        self._evaluator: BoundaryEvaluator | None = None

    @property
    def root(self) -> Path:
        return self.settings.project_root

    @property
    def graph(self) -> LayerGraph:
        """The layer graph, built from ``[boundaries]`` on first access.

        Raises:
            LayerConfigError: If the configured layers have an invalid shape.
        """
        if self._graph is None:
            cfg = self.settings.boundaries
            self._graph = LayerGraph.build(cfg.raw_layers(), root=cfg.root, aliases=cfg.aliases)
            logger.debug(
                "Built layer graph: %d layers, %d config issues",
                len(self._graph.layers),
                len(self._graph.issues),
            )
        return self._graph

    @property
    def evaluator(self) -> BoundaryEvaluator:
        if self._evaluator is None:
            self._evaluator = BoundaryEvaluator(self.graph)
        return self._evaluator

    @property
    def resolver(self) -> LayerResolver:
        return self.evaluator.resolver

    def resolve_path(self, path: str | Path) -> Path:
        """Absolute path for *path*, relative paths taken from the project root."""
        p = Path(path)
        return p if p.is_absolute() else self.root / p

    def display_path(self, path: Path) -> str:
        """Project-relative POSIX path when possible, else the path as given."""
        try:
            return path.resolve().relative_to(self.root.resolve()).as_posix()
        except ValueError:
            return path.as_posix()

    def find_sources(self, paths: Iterable[str | Path] | None = None) -> list[Path]:
        """Source files under *paths* (default: the project root)."""
        roots = [self.resolve_path(p) for p in paths] if paths else [self.root]
        scan = self.settings.scan
        return find_source_files(roots, extensions=scan.extensions, exclude=scan.exclude)
