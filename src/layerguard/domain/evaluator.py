"""BoundaryEvaluator — decide whether one module reference crosses a boundary.

The evaluator is reference-kind agnostic: static imports, dynamic imports,
re-exports, and ``require()`` calls all funnel through :meth:`check` with
the literal reference text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layerguard.domain.resolver import LayerResolver
from layerguard.domain.types import Outcome, Verdict, Violation

if TYPE_CHECKING:
    from layerguard.domain.graph import LayerGraph
    from layerguard.domain.types import Reference


class BoundaryEvaluator:
    """Check references from a known layer against the layer graph."""

    def __init__(self, graph: LayerGraph, resolver: LayerResolver | None = None) -> None:
        self._graph = graph
        self._resolver = resolver or LayerResolver(graph)

    @property
    def resolver(self) -> LayerResolver:
        return self._resolver

    def check(self, from_layer: str, reference: str, referencing_file: str) -> Outcome:
        """Evaluate *reference*, found in *referencing_file* of *from_layer*.

        1. Unresolved target -> nothing to check.
        2. Same layer (however the path is spelled) -> allowed.
        3. Otherwise the graph decides; a refusal carries a :class:`Violation`.
        """
        to_layer = self._resolver.resolve_reference_layer(reference, referencing_file)
        if to_layer is None:
            return Outcome(Verdict.UNRESOLVED)
        if to_layer == from_layer:
            return Outcome(Verdict.SAME_LAYER, to_layer)
        if self._graph.is_allowed(from_layer, to_layer):
            return Outcome(Verdict.ALLOWED, to_layer)

        violation = Violation(
            from_layer=from_layer,
            to_layer=to_layer,
            raw_text=reference,
            hint=self._graph.hint_for(from_layer, to_layer),
        )
        return Outcome(Verdict.VIOLATION, to_layer, violation)

    def check_reference(
        self, from_layer: str, reference: Reference, referencing_file: str
    ) -> Outcome:
        return self.check(from_layer, reference.raw_text, referencing_file)
