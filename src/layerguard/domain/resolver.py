"""LayerResolver — map file paths and module references to layer names.

Two conventions locate a layer in a path:

- the first ``/<root>/`` marker, followed by the layer directory
  (``/repo/layers/cart/components/Cart.vue`` -> ``cart``);
- an ``app`` directory anywhere in the path, when ``app`` is declared.

References are resolved by alias prefix (``#layers/shared/utils``) or, for
relative specifiers, by joining with the referencing file's directory and
running the same path search. Anything else is unresolved and never checked.
"""

from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING

from layerguard.domain.types import APP_LAYER

if TYPE_CHECKING:
    from layerguard.domain.graph import LayerGraph


def normalize_path(path: str) -> str:
    """Canonical ``/``-separated, ``/``-anchored form of *path*.

    Backslashes become slashes and ``.``/``..`` segments are collapsed.
    Repo-relative paths are anchored at ``/`` so that a leading root
    directory still matches the ``/<root>/`` marker.

    Examples:
        >>> normalize_path("C:\\\\repo\\\\layers\\\\cart\\\\a.ts")
        '/C:/repo/layers/cart/a.ts'
        >>> normalize_path("layers/cart/../shared/x.ts")
        '/layers/shared/x.ts'
    """
    canonical = path.replace("\\", "/")
    if not canonical.startswith("/"):
        canonical = "/" + canonical
    return posixpath.normpath(canonical)


def is_relative_reference(reference: str) -> bool:
    """Whether *reference* is a ``./`` or ``../`` style specifier."""
    return reference in (".", "..") or reference.startswith(("./", "../"))


class LayerResolver:
    """Classify paths and references against a :class:`LayerGraph`."""

    def __init__(self, graph: LayerGraph) -> None:
        self._graph = graph
        self._marker = f"/{graph.root}/"

    @property
    def graph(self) -> LayerGraph:
        return self._graph

    def resolve_file_layer(self, file_path: str) -> str | None:
        """Layer that *file_path* belongs to, or None if it has none."""
        return self._layer_from_path(normalize_path(file_path))

    def resolve_reference_layer(self, reference: str, referencing_file: str) -> str | None:
        """Layer that *reference* points into, seen from *referencing_file*.

        Alias prefixes are tried first, in configured order. Relative
        references are resolved against the referencing file's directory,
        so nesting depth does not matter.
        """
        for prefix in self._graph.aliases:
            lead = prefix + "/"
            if reference.startswith(lead):
                candidate = reference[len(lead) :].split("/", 1)[0]
                if candidate in self._graph:
                    return candidate

        if is_relative_reference(reference):
            base_dir = posixpath.dirname(normalize_path(referencing_file))
            target = posixpath.normpath(posixpath.join(base_dir, reference))
            return self._layer_from_path(target)

        return None

    def _layer_from_path(self, normalized: str) -> str | None:
        idx = normalized.find(self._marker)
        if idx != -1:
            candidate = normalized[idx + len(self._marker) :].split("/", 1)[0]
            if candidate in self._graph:
                return candidate

        # Only directory segments count; a module file named "app" does not.
        directories = normalized.split("/")[:-1]
        if APP_LAYER in directories and APP_LAYER in self._graph:
            return APP_LAYER

        return None
