"""BaseService — abstract foundation for all layerguard services.

Every service receives a :class:`Project` at construction time. The
Project provides the settings, the layer graph, and source discovery.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from layerguard.domain.graph import LayerConfigError
from layerguard.services.result import ServiceResult

if TYPE_CHECKING:
    from layerguard.domain.graph import LayerGraph
    from layerguard.infrastructure.project import Project

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class BoundaryService(BaseService):
            def check(self, paths=None) -> ServiceResult:
                graph = self._load_graph("check")
                if isinstance(graph, ServiceResult):
                    return graph
                ...
    """

    def __init__(self, project: Project) -> None:
        self._project = project

    def _load_graph(self, op: str) -> LayerGraph | ServiceResult:
        """Build the project's layer graph, or an ``INVALID_CONFIG`` failure.

        INVARIANT: Malformed layer configuration is reported once, before any
        file is processed.
        """
        try:
            return self._project.graph
        except LayerConfigError as exc:
            logger.debug("Invalid layer configuration: %s", exc)
            return ServiceResult.failure(
                op,
                "INVALID_CONFIG",
                str(exc),
                config_path=_path_or_none(self._project.settings.config_path),
            )


def _path_or_none(path: object) -> str | None:
    return None if path is None else str(path)
