"""InitService — write a starter ``layerguard.toml``.

Runs before any configuration exists, so unlike the other services it
takes a directory instead of a :class:`Project`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from layerguard.config.discovery import CONFIG_FILENAME
from layerguard.config.presets import DEFAULT_PRESET, PRESETS
from layerguard.infrastructure.templates import build_template_environment
from layerguard.services.result import ServiceResult

logger = logging.getLogger(__name__)

_TEMPLATE = "layerguard.toml.j2"


class InitService:
    """Creates the config file for a new project."""

    @staticmethod
    def init_project(
        root: Path,
        *,
        preset: str = DEFAULT_PRESET,
        force: bool = False,
    ) -> ServiceResult:
        """Write ``layerguard.toml`` for *preset* into *root*.

        Refuses to replace an existing file unless *force* is set.
        """
        boundaries = PRESETS.get(preset)
        if boundaries is None:
            return ServiceResult.failure(
                "init",
                "UNKNOWN_PRESET",
                f"Unknown preset: {preset}",
                available=sorted(PRESETS),
            )

        config_path = root / CONFIG_FILENAME
        if config_path.exists() and not force:
            return ServiceResult.failure(
                "init",
                "CONFIG_EXISTS",
                f"{config_path} already exists (use --force to overwrite)",
                config_path=str(config_path),
            )

        layers = boundaries.raw_layers()
        text = (
            build_template_environment()
            .get_template(_TEMPLATE)
            .render(
                preset=preset,
                root=boundaries.root,
                aliases=boundaries.aliases,
                layers=layers,
            )
        )
        root.mkdir(parents=True, exist_ok=True)
        config_path.write_text(text, encoding="utf-8")
        logger.debug("Wrote %s from preset %s", config_path, preset)

        return ServiceResult(
            ok=True,
            op="init",
            data={
                "config_path": str(config_path),
                "preset": preset,
                "root": boundaries.root,
                "aliases": list(boundaries.aliases),
                "layers": list(layers),
            },
        )
