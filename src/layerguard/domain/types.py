"""Value types shared by the graph, resolver, and evaluator.

All types are frozen: they are classification results and findings,
constructed once and handed to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

WILDCARD = "*"
DEFAULT_ROOT = "layers"
DEFAULT_ALIASES: tuple[str, ...] = ("#layers",)

# Recognized by path segment alone, without the root marker, when declared.
APP_LAYER = "app"


class ReferenceKind(StrEnum):
    """Syntactic forms that carry a module reference."""

    STATIC_IMPORT = "static-import"
    DYNAMIC_IMPORT = "dynamic-import"
    RE_EXPORT = "re-export"
    MODULE_LOAD_CALL = "module-load-call"


class Verdict(StrEnum):
    """Result classification of a single boundary check."""

    UNRESOLVED = "unresolved"
    SAME_LAYER = "same-layer"
    ALLOWED = "allowed"
    VIOLATION = "violation"


@dataclass(frozen=True)
class Location:
    """Position of a reference literal: 1-based line, 0-based column."""

    line: int
    column: int


@dataclass(frozen=True)
class Reference:
    """A module-reference string extracted from a source file."""

    raw_text: str
    kind: ReferenceKind
    location: Location | None = None


@dataclass(frozen=True)
class Violation:
    """Why an import from one layer into another is disallowed."""

    from_layer: str
    to_layer: str
    raw_text: str
    hint: str

    @property
    def message(self) -> str:
        return (
            f"{self.from_layer} cannot import from {self.to_layer} ({self.raw_text}). {self.hint}"
        )


@dataclass(frozen=True)
class Outcome:
    """Outcome of checking one reference against the layer graph."""

    verdict: Verdict
    to_layer: str | None = None
    violation: Violation | None = None

    @property
    def ok(self) -> bool:
        return self.verdict is not Verdict.VIOLATION


@dataclass(frozen=True)
class ConfigIssue:
    """A ``canImport`` entry naming a layer that is not declared."""

    layer: str
    bad_reference: str
    available_layers: tuple[str, ...]

    @property
    def message(self) -> str:
        available = ", ".join(self.available_layers)
        return (
            f'Layer "{self.layer}" references non-existent layer "{self.bad_reference}" '
            f"in canImport. Available layers: {available}"
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "layer": self.layer,
            "bad_reference": self.bad_reference,
            "available_layers": list(self.available_layers),
            "message": self.message,
        }
