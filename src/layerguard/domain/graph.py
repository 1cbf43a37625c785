"""LayerGraph — declared layers and their directed allow-lists.

Built once from configuration, immutable afterwards. Both configuration
shapes normalize to :class:`LayerRule` at construction::

    shared = []                           # bare list
    cart = { canImport = ["shared"] }     # explicit record

INVARIANT: every non-wildcard ``can_import`` entry names a declared layer.
Entries that don't are collected as :class:`ConfigIssue` once per graph and
never match in :meth:`LayerGraph.is_allowed`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from layerguard.domain.types import DEFAULT_ALIASES, DEFAULT_ROOT, WILDCARD, ConfigIssue

_RECORD_KEYS = ("canImport", "can_import")


class LayerConfigError(ValueError):
    """Layer configuration has the wrong shape and cannot be used."""


@dataclass(frozen=True)
class LayerRule:
    """Normalized allow-list for one layer."""

    can_import: tuple[str, ...] = ()

    @property
    def allows_any(self) -> bool:
        return WILDCARD in self.can_import


@dataclass(frozen=True)
class LayerGraph:
    """Declared layers, root marker, alias prefixes, and validation issues.

    Construct via :meth:`build`; the dataclass constructor expects
    already-normalized values.
    """

    layers: Mapping[str, LayerRule]
    root: str = DEFAULT_ROOT
    aliases: tuple[str, ...] = DEFAULT_ALIASES
    issues: tuple[ConfigIssue, ...] = ()

    @classmethod
    def build(
        cls,
        layers: Mapping[str, Any],
        *,
        root: str | None = None,
        aliases: Iterable[str] | None = None,
    ) -> LayerGraph:
        """Normalize and validate raw layer configuration.

        Raises:
            LayerConfigError: If *layers* or any rule has an unsupported shape.
        """
        if not isinstance(layers, Mapping):
            msg = f"'layers' must be a mapping, got {type(layers).__name__}"
            raise LayerConfigError(msg)

        rules: dict[str, LayerRule] = {}
        for name, value in layers.items():
            if not isinstance(name, str) or not name:
                msg = f"Layer names must be non-empty strings, got {name!r}"
                raise LayerConfigError(msg)
            rules[name] = _normalize_rule(name, value)

        return cls(
            layers=MappingProxyType(rules),
            root=_normalize_root(root),
            aliases=_normalize_aliases(aliases),
            issues=_find_issues(rules),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def names(self) -> tuple[str, ...]:
        """Declared layer names in configuration order."""
        return tuple(self.layers)

    def __contains__(self, name: object) -> bool:
        return name in self.layers

    def rule_for(self, name: str) -> LayerRule | None:
        return self.layers.get(name)

    def is_allowed(self, from_layer: str, to_layer: str) -> bool:
        """Whether *from_layer* may depend on *to_layer*.

        Layers without a rule are unrestricted.
        """
        rule = self.layers.get(from_layer)
        if rule is None:
            return True
        if rule.allows_any:
            return True
        return to_layer in rule.can_import

    def hint_for(self, from_layer: str, to_layer: str) -> str:
        """Remediation hint for a disallowed ``from_layer -> to_layer`` import."""
        rule = self.layers.get(from_layer)
        if rule is None:
            return "Check your layerguard config."
        if not rule.can_import:
            return "This layer must not import from other layers."
        allowed = ", ".join(rule.can_import)
        suggestion = (
            f'To allow this import, add "{to_layer}" to the canImport array for "{from_layer}".'
        )
        return f"Allowed imports: [{allowed}]. {suggestion}"


# ---------------------------------------------------------------------------
# Normalization helpers
# ---------------------------------------------------------------------------


def _normalize_rule(name: str, value: Any) -> LayerRule:
    """Turn either config shape into a :class:`LayerRule`."""
    if isinstance(value, Mapping):
        unknown = [k for k in value if k not in _RECORD_KEYS]
        if unknown:
            msg = f"Layer {name!r} has unknown keys: {', '.join(map(str, unknown))}"
            raise LayerConfigError(msg)
        present = [k for k in _RECORD_KEYS if k in value]
        if not present:
            msg = f"Layer {name!r} must define 'canImport'"
            raise LayerConfigError(msg)
        value = value[present[0]]

    if isinstance(value, str) or not isinstance(value, Iterable):
        kind = type(value).__name__
        msg = f"Layer {name!r} allow-list must be a list of layer names, got {kind}"
        raise LayerConfigError(msg)

    entries: list[str] = []
    for entry in value:
        if not isinstance(entry, str):
            msg = f"Layer {name!r} allow-list entries must be strings, got {entry!r}"
            raise LayerConfigError(msg)
        if entry not in entries:
            entries.append(entry)
    return LayerRule(can_import=tuple(entries))


def _find_issues(rules: Mapping[str, LayerRule]) -> tuple[ConfigIssue, ...]:
    """One issue per dangling (layer, reference) pair, in declared order."""
    available = tuple(sorted(rules))
    issues: list[ConfigIssue] = []
    for layer_name, rule in rules.items():
        for ref in rule.can_import:
            if ref != WILDCARD and ref not in rules:
                issues.append(ConfigIssue(layer_name, ref, available))
    return tuple(issues)


def _normalize_root(root: str | None) -> str:
    if not root:
        return DEFAULT_ROOT
    normalized = root.replace("\\", "/").strip("/")
    return normalized or DEFAULT_ROOT


def _normalize_aliases(aliases: Iterable[str] | None) -> tuple[str, ...]:
    """Drop empty prefixes and trailing slashes; fall back to the default."""
    if aliases is None:
        return DEFAULT_ALIASES
    if isinstance(aliases, str):
        msg = "'aliases' must be a list of prefixes, not a single string"
        raise LayerConfigError(msg)
    result: list[str] = []
    for alias in aliases:
        if not isinstance(alias, str):
            msg = f"Alias prefixes must be strings, got {alias!r}"
            raise LayerConfigError(msg)
        cleaned = alias.rstrip("/")
        if cleaned and cleaned not in result:
            result.append(cleaned)
    return tuple(result) or DEFAULT_ALIASES
