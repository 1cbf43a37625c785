"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, layerguard.toml only contains
overrides. A working project needs only a ``[boundaries.layers]`` table.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from layerguard.domain.types import DEFAULT_ALIASES, DEFAULT_ROOT

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    ".js",
    ".mjs",
    ".cjs",
    ".jsx",
    ".ts",
    ".mts",
    ".cts",
    ".tsx",
    ".vue",
)

DEFAULT_EXCLUDE: tuple[str, ...] = ("node_modules", ".nuxt", ".output", "dist", ".git")


# --- layerguard.toml sections ---


class LayerRuleConfig(BaseModel):
    """Record form of a layer entry: ``cart = { canImport = ["shared"] }``."""

    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}

    can_import: list[str] = Field(alias="canImport")


class BoundariesConfig(BaseModel):
    """[boundaries] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    root: str = DEFAULT_ROOT
    aliases: list[str] = Field(default_factory=lambda: list(DEFAULT_ALIASES))
    layers: dict[str, list[str] | LayerRuleConfig] = Field(default_factory=dict)

    @field_validator("aliases")
    @classmethod
    def _default_when_empty(cls, value: list[str]) -> list[str]:
        """An empty alias list falls back to the default prefix."""
        return value or list(DEFAULT_ALIASES)

    def raw_layers(self) -> dict[str, list[str]]:
        """Layer allow-lists with both entry shapes flattened to plain lists."""
        result: dict[str, list[str]] = {}
        for name, entry in self.layers.items():
            result[name] = list(entry.can_import if isinstance(entry, LayerRuleConfig) else entry)
        return result


class ScanConfig(BaseModel):
    """[scan] section."""

    model_config = {"frozen": True}

    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))

    @field_validator("extensions")
    @classmethod
    def _dotted(cls, value: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]
