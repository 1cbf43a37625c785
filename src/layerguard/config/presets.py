"""Named starting configurations for ``layerguard init``."""

from __future__ import annotations

from layerguard.config.models import BoundariesConfig

# A shared base, two feature layers that may only use it, and an app layer
# that assembles everything.
RECOMMENDED = BoundariesConfig(
    root="layers",
    aliases=["#layers", "@layers"],
    layers={
        "shared": [],
        "products": ["shared"],
        "cart": ["shared"],
        "app": ["*"],
    },
)

PRESETS: dict[str, BoundariesConfig] = {
    "recommended": RECOMMENDED,
}

DEFAULT_PRESET = "recommended"
