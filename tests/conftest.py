"""Shared pytest fixtures and test helpers for layerguard tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from layerguard.config.settings import LayerguardSettings
from layerguard.domain.graph import LayerGraph
from layerguard.infrastructure.project import Project

CONFIG_TOML = """\
[boundaries]
root = "layers"
aliases = ["#layers", "@layers"]

[boundaries.layers]
shared = []
products = ["shared"]
cart = { canImport = ["shared"] }
my-feature = ["shared"]
app = ["*"]
"""

CART_VUE = """\
<template>
  <div>import x from '#layers/products/not-scanned'</div>
</template>
<script setup lang="ts">
import ProductList from '#layers/products/components/ProductList.vue'
import { fmt } from '../../shared/utils'
</script>
"""

PRODUCT_LIST_VUE = """\
<script setup>
import { fmt } from '#layers/shared/utils'
</script>
"""

FORMAT_JS = """\
// shared has no dependencies
export const fmt = (value) => String(value)
"""

APP_INDEX_VUE = """\
<script setup>
import Cart from '#layers/cart/components/Cart.vue'
import ProductList from '@layers/products/components/ProductList.vue'
</script>
"""

# Outside every layer: never checked.
BUILD_SCRIPT_JS = """\
import cart from '#layers/cart/components/Cart.vue'
"""

# Excluded directory: never scanned.
VENDORED_JS = """\
const products = require('#layers/products/components/ProductList.vue')
"""


def scenario_graph() -> LayerGraph:
    """The canonical four-layer graph used across domain tests."""
    return LayerGraph.build(
        {
            "shared": [],
            "products": ["shared"],
            "cart": ["shared"],
            "app": ["*"],
        },
        aliases=["#layers", "@layers"],
    )


def write_file(root: Path, rel: str, content: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project with a layer config and a few source files.

    ``cart`` imports from ``products`` (one violation); everything else
    stays inside its allow-list.
    """
    write_file(tmp_path, "layerguard.toml", CONFIG_TOML)
    write_file(tmp_path, "layers/shared/utils/format.js", FORMAT_JS)
    write_file(tmp_path, "layers/products/components/ProductList.vue", PRODUCT_LIST_VUE)
    write_file(tmp_path, "layers/cart/components/Cart.vue", CART_VUE)
    write_file(tmp_path, "app/pages/index.vue", APP_INDEX_VUE)
    write_file(tmp_path, "scripts/build.js", BUILD_SCRIPT_JS)
    write_file(tmp_path, "layers/cart/node_modules/vendored/index.js", VENDORED_JS)
    return tmp_path


@pytest.fixture
def clean_project_root(project_root: Path) -> Path:
    """The sample project with the cart violation removed."""
    write_file(
        project_root,
        "layers/cart/components/Cart.vue",
        "<script setup>\nimport { fmt } from '#layers/shared/utils'\n</script>\n",
    )
    return project_root


@pytest.fixture
def project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> Project:
    """Project built from the sample layerguard.toml."""
    monkeypatch.delenv("LAYERGUARD_CONFIG", raising=False)
    settings = LayerguardSettings.from_cli(project_root=project_root)
    return Project(settings)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the sample project so the CLI discovers its config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.delenv("LAYERGUARD_CONFIG", raising=False)
    monkeypatch.chdir(project_root)
