"""BoundaryService — layer-boundary checking for a project.

Follows the linter pattern: per file, resolve its layer once; skip files
outside every layer; evaluate each extracted module reference; collect
violations. Configuration issues are reported once per run, never per file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import networkx as nx

from layerguard.domain.references import extract_references
from layerguard.domain.types import WILDCARD
from layerguard.infrastructure.filesystem import is_single_file_component, read_source_file
from layerguard.services.base import BaseService
from layerguard.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from layerguard.domain.graph import LayerGraph

logger = logging.getLogger(__name__)


class BoundaryService(BaseService):
    """Checks sources against the project's layer graph."""

    # ------------------------------------------------------------------
    # Checking
    # ------------------------------------------------------------------

    def check(self, paths: Iterable[str | Path] | None = None) -> ServiceResult:
        """Check every source file under *paths* (default: project root)."""
        graph = self._load_graph("check")
        if isinstance(graph, ServiceResult):
            return graph

        warnings: list[str] = []
        requested = list(paths or [])
        for raw in requested:
            target = self._project.resolve_path(raw)
            if not target.exists():
                warnings.append(f"Path not found: {self._project.display_path(target)}")

        files = self._project.find_sources(requested)
        if not files:
            warnings.append("No source files found")

        violations: list[dict[str, Any]] = []
        checked = 0
        skipped = 0
        for path in files:
            rel = self._project.display_path(path)
            layer = self._project.resolver.resolve_file_layer(rel)
            if layer is None:
                skipped += 1
                continue
            try:
                source = read_source_file(path)
            except (OSError, UnicodeDecodeError) as exc:
                warnings.append(f"Failed to read {rel}: {exc}")
                continue
            checked += 1
            violations.extend(
                self._check_text(layer, rel, source, sfc=is_single_file_component(path))
            )

        logger.debug(
            "Checked %d files (%d outside any layer), %d violations",
            checked,
            skipped,
            len(violations),
        )
        return self._check_result("check", graph, violations, checked, skipped, warnings)

    def check_source(self, file_path: str, source: str) -> ServiceResult:
        """Check one in-memory source as though it lived at *file_path*."""
        graph = self._load_graph("check_source")
        if isinstance(graph, ServiceResult):
            return graph

        rel = self._project.display_path(self._project.resolve_path(file_path))
        layer = self._project.resolver.resolve_file_layer(rel)
        if layer is None:
            return self._check_result("check_source", graph, [], 0, 1, [])

        violations = self._check_text(
            layer, rel, source, sfc=is_single_file_component(Path(file_path))
        )
        return self._check_result("check_source", graph, violations, 1, 0, [])

    def _check_text(
        self,
        layer: str,
        rel_path: str,
        source: str,
        *,
        sfc: bool,
    ) -> list[dict[str, Any]]:
        """Evaluate every reference in *source* from a file of *layer*."""
        evaluator = self._project.evaluator
        findings: list[dict[str, Any]] = []
        for ref in extract_references(source, single_file_component=sfc):
            outcome = evaluator.check_reference(layer, ref, rel_path)
            if outcome.violation is None:
                continue
            v = outcome.violation
            findings.append(
                {
                    "file": rel_path,
                    "line": ref.location.line if ref.location else None,
                    "column": ref.location.column if ref.location else None,
                    "kind": str(ref.kind),
                    "from_layer": v.from_layer,
                    "to_layer": v.to_layer,
                    "import_path": v.raw_text,
                    "hint": v.hint,
                    "message": v.message,
                }
            )
        return findings

    @staticmethod
    def _check_result(
        op: str,
        graph: LayerGraph,
        violations: list[dict[str, Any]],
        checked: int,
        skipped: int,
        warnings: list[str],
    ) -> ServiceResult:
        config_issues = [issue.to_dict() for issue in graph.issues]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "violations": violations,
                "count": len(violations),
                "files_checked": checked,
                "files_skipped": skipped,
                "config_issues": config_issues,
                "healthy": not violations and not config_issues,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def validate(self) -> ServiceResult:
        """Validate the layer configuration without scanning any files."""
        graph = self._load_graph("validate")
        if isinstance(graph, ServiceResult):
            return graph

        if graph.issues:
            count = len(graph.issues)
            return ServiceResult.failure(
                "validate",
                "INVALID_LAYER_REFERENCE",
                f"{count} invalid layer reference(s) in canImport",
                issues=[issue.to_dict() for issue in graph.issues],
            )

        config_path = self._project.settings.config_path
        return ServiceResult(
            ok=True,
            op="validate",
            data={
                "layers": list(graph.names),
                "root": graph.root,
                "aliases": list(graph.aliases),
                "config_path": str(config_path) if config_path else None,
            },
            warnings=[] if graph.layers else ["No layers configured"],
        )

    def resolve(self, target: str, *, from_file: str | None = None) -> ServiceResult:
        """Explain which layer *target* belongs to.

        Without *from_file*, *target* is a file path. With it, *target* is a
        module reference found in *from_file* and the boundary verdict is
        included.
        """
        graph = self._load_graph("resolve")
        if isinstance(graph, ServiceResult):
            return graph

        resolver = self._project.resolver
        if from_file is None:
            rel = self._project.display_path(self._project.resolve_path(target))
            return ServiceResult(
                ok=True,
                op="resolve",
                data={"target": rel, "layer": resolver.resolve_file_layer(rel)},
            )

        rel_from = self._project.display_path(self._project.resolve_path(from_file))
        from_layer = resolver.resolve_file_layer(rel_from)
        data: dict[str, Any] = {
            "reference": target,
            "from_file": rel_from,
            "from_layer": from_layer,
            "to_layer": resolver.resolve_reference_layer(target, rel_from),
            "verdict": None,
        }
        warnings: list[str] = []
        if from_layer is None:
            warnings.append(f"{rel_from} is not in any layer; its references are not checked")
        else:
            outcome = self._project.evaluator.check(from_layer, target, rel_from)
            data["verdict"] = str(outcome.verdict)
            if outcome.violation is not None:
                data["message"] = outcome.violation.message
        return ServiceResult(ok=True, op="resolve", data=data, warnings=warnings)

    def layers(self) -> ServiceResult:
        """Describe declared layers, their dependents, and allow-list cycles."""
        graph = self._load_graph("layers")
        if isinstance(graph, ServiceResult):
            return graph

        g = _allow_graph(graph)
        items: list[dict[str, Any]] = []
        for name, rule in graph.layers.items():
            items.append(
                {
                    "name": name,
                    "can_import": list(rule.can_import),
                    "wildcard": rule.allows_any,
                    "dependents": sorted(g.predecessors(name)),
                }
            )

        warnings: list[str] = []
        cycles = _sorted_cycles(g)
        for cycle in cycles:
            warnings.append(f"Allowed dependency cycle: {' -> '.join([*cycle, cycle[0]])}")

        tiers: list[list[str]] = []
        if not cycles:
            # Leaves first: layers that depend on nothing come before their users.
            tiers = [sorted(gen) for gen in nx.topological_generations(g.reverse(copy=True))]

        return ServiceResult(
            ok=True,
            op="layers",
            data={
                "items": items,
                "count": len(items),
                "tiers": tiers,
                "cycles": cycles,
                "config_issues": [issue.to_dict() for issue in graph.issues],
            },
            warnings=warnings,
        )


# ---------------------------------------------------------------------------
# Graph helpers
# ---------------------------------------------------------------------------


def _allow_graph(graph: LayerGraph) -> nx.DiGraph:
    """Directed ``from -> to`` graph of permitted layer dependencies.

    Wildcard rules expand to every other declared layer. Self edges and
    dangling entries are left out.
    """
    g: nx.DiGraph = nx.DiGraph()
    g.add_nodes_from(graph.names)
    for name, rule in graph.layers.items():
        targets = graph.names if rule.allows_any else rule.can_import
        for target in targets:
            if target != name and target != WILDCARD and target in graph:
                g.add_edge(name, target)
    return g


def _sorted_cycles(g: nx.DiGraph) -> list[list[str]]:
    """Simple cycles, each rotated to start at its smallest name, sorted."""
    cycles: list[list[str]] = []
    for cycle in nx.simple_cycles(g):
        pivot = cycle.index(min(cycle))
        cycles.append(cycle[pivot:] + cycle[:pivot])
    return sorted(cycles)

