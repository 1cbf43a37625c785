"""Tests for BoundaryService: check, check_source, validate, resolve, layers."""

from __future__ import annotations

from pathlib import Path

from layerguard.config.settings import LayerguardSettings
from layerguard.infrastructure.project import Project
from layerguard.services.boundaries import BoundaryService
from tests.conftest import write_file


def _service_for(root: Path, toml: str) -> BoundaryService:
    write_file(root, "layerguard.toml", toml)
    return BoundaryService(Project(LayerguardSettings.from_cli(project_root=root)))


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheck:
    def test_reports_cart_violation(self, project: Project) -> None:
        result = BoundaryService(project).check()
        assert result.ok is True
        assert result.data["count"] == 1
        assert result.data["healthy"] is False
        v = result.data["violations"][0]
        assert v == {
            "file": "layers/cart/components/Cart.vue",
            "line": 5,
            "column": 24,
            "kind": "static-import",
            "from_layer": "cart",
            "to_layer": "products",
            "import_path": "#layers/products/components/ProductList.vue",
            "hint": (
                "Allowed imports: [shared]. "
                'To allow this import, add "products" to the canImport array for "cart".'
            ),
            "message": (
                "cart cannot import from products "
                "(#layers/products/components/ProductList.vue). Allowed imports: [shared]. "
                'To allow this import, add "products" to the canImport array for "cart".'
            ),
        }

    def test_counts_checked_and_skipped(self, project: Project) -> None:
        result = BoundaryService(project).check()
        # scripts/build.js is outside every layer; node_modules is excluded.
        assert result.data["files_checked"] == 4
        assert result.data["files_skipped"] == 1

    def test_clean_project_is_healthy(self, clean_project_root: Path) -> None:
        service = BoundaryService(
            Project(LayerguardSettings.from_cli(project_root=clean_project_root))
        )
        result = service.check()
        assert result.data["violations"] == []
        assert result.data["healthy"] is True
        assert result.warnings == []

    def test_restrict_to_paths(self, project: Project) -> None:
        result = BoundaryService(project).check(["layers/shared", "layers/products"])
        assert result.data["files_checked"] == 2
        assert result.data["count"] == 0

    def test_missing_path_warns(self, project: Project) -> None:
        result = BoundaryService(project).check(["layers/ghost"])
        assert "Path not found: layers/ghost" in result.warnings
        assert "No source files found" in result.warnings

    def test_config_issues_reported_once(self, tmp_path: Path) -> None:
        service = _service_for(
            tmp_path, '[boundaries.layers]\nshared = []\ncart = ["shared", "ghost"]\n'
        )
        write_file(tmp_path, "layers/cart/a.ts", "import x from '#layers/shared/x'\n")
        write_file(tmp_path, "layers/cart/b.ts", "import y from '#layers/shared/y'\n")
        result = service.check()
        assert result.ok is True
        assert result.data["count"] == 0
        assert len(result.data["config_issues"]) == 1
        assert result.data["config_issues"][0]["bad_reference"] == "ghost"
        assert result.data["healthy"] is False

    def test_invalid_config_is_failure(self, tmp_path: Path) -> None:
        service = _service_for(tmp_path, '[boundaries.layers]\n"" = []\n')
        result = service.check()
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_CONFIG"
        assert result.error.detail["config_path"].endswith("layerguard.toml")

    def test_every_reference_kind_checked(self, tmp_path: Path) -> None:
        service = _service_for(tmp_path, "[boundaries.layers]\nshared = []\ncart = []\n")
        write_file(
            tmp_path,
            "layers/shared/all.ts",
            "import a from '#layers/cart/a'\n"
            "export * from '#layers/cart/b'\n"
            "const c = require('#layers/cart/c')\n"
            "const d = await import('#layers/cart/d')\n",
        )
        result = service.check()
        assert [v["kind"] for v in result.data["violations"]] == [
            "static-import",
            "re-export",
            "module-load-call",
            "dynamic-import",
        ]
        assert [v["line"] for v in result.data["violations"]] == [1, 2, 3, 4]

    def test_unreadable_file_warns(self, tmp_path: Path) -> None:
        service = _service_for(tmp_path, "[boundaries.layers]\nshared = []\n")
        path = tmp_path / "layers" / "shared" / "bad.ts"
        path.parent.mkdir(parents=True)
        path.write_bytes(b"\xff\xfe\x00import")
        result = service.check()
        assert result.data["files_checked"] == 0
        assert any(w.startswith("Failed to read layers/shared/bad.ts") for w in result.warnings)


class TestCheckSource:
    def test_in_memory_source(self, project: Project) -> None:
        result = BoundaryService(project).check_source(
            "layers/shared/x.ts", "import c from '#layers/cart/components/Cart.vue'\n"
        )
        assert result.op == "check_source"
        assert result.data["count"] == 1
        assert result.data["violations"][0]["hint"] == (
            "This layer must not import from other layers."
        )

    def test_single_file_component_by_name(self, project: Project) -> None:
        source = (
            "<template>import x from '#layers/cart/x'</template>\n"
            "<script setup>\nimport y from '#layers/shared/y'\n</script>\n"
        )
        result = BoundaryService(project).check_source("layers/shared/X.vue", source)
        assert result.data["count"] == 0

    def test_file_outside_layers_skipped(self, project: Project) -> None:
        result = BoundaryService(project).check_source(
            "scripts/x.ts", "import c from '#layers/cart/x'\n"
        )
        assert result.data["files_checked"] == 0
        assert result.data["files_skipped"] == 1
        assert result.data["violations"] == []


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidate:
    def test_valid_config(self, project: Project) -> None:
        result = BoundaryService(project).validate()
        assert result.ok is True
        assert result.data["layers"] == ["shared", "products", "cart", "my-feature", "app"]
        assert result.data["root"] == "layers"
        assert result.data["aliases"] == ["#layers", "@layers"]
        assert result.data["config_path"].endswith("layerguard.toml")

    def test_dangling_reference(self, tmp_path: Path) -> None:
        service = _service_for(tmp_path, '[boundaries.layers]\nshared = []\ncart = ["ghost"]\n')
        result = service.validate()
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_LAYER_REFERENCE"
        assert result.error.message == "1 invalid layer reference(s) in canImport"
        assert result.error.detail["issues"][0]["message"] == (
            'Layer "cart" references non-existent layer "ghost" in canImport. '
            "Available layers: cart, shared"
        )

    def test_no_layers_warns(self, tmp_path: Path) -> None:
        service = _service_for(tmp_path, '[boundaries]\nroot = "layers"\n')
        result = service.validate()
        assert result.ok is True
        assert result.warnings == ["No layers configured"]


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


class TestResolve:
    def test_file_layer(self, project: Project) -> None:
        result = BoundaryService(project).resolve("layers/cart/components/Cart.vue")
        assert result.data == {"target": "layers/cart/components/Cart.vue", "layer": "cart"}

    def test_absolute_file_in_project(self, project: Project) -> None:
        target = str(project.root / "app" / "pages" / "index.vue")
        result = BoundaryService(project).resolve(target)
        assert result.data["layer"] == "app"

    def test_file_outside_layers(self, project: Project) -> None:
        result = BoundaryService(project).resolve("scripts/build.js")
        assert result.data["layer"] is None

    def test_reference_violation(self, project: Project) -> None:
        result = BoundaryService(project).resolve(
            "#layers/products/x", from_file="layers/cart/components/Cart.vue"
        )
        assert result.data["from_layer"] == "cart"
        assert result.data["to_layer"] == "products"
        assert result.data["verdict"] == "violation"
        assert result.data["message"].startswith("cart cannot import from products")

    def test_reference_allowed(self, project: Project) -> None:
        result = BoundaryService(project).resolve(
            "../../shared/utils", from_file="layers/cart/components/Cart.vue"
        )
        assert result.data["to_layer"] == "shared"
        assert result.data["verdict"] == "allowed"
        assert "message" not in result.data

    def test_reference_unresolved(self, project: Project) -> None:
        result = BoundaryService(project).resolve(
            "vue", from_file="layers/cart/components/Cart.vue"
        )
        assert result.data["to_layer"] is None
        assert result.data["verdict"] == "unresolved"

    def test_reference_from_unlayered_file(self, project: Project) -> None:
        result = BoundaryService(project).resolve("#layers/cart/x", from_file="scripts/build.js")
        assert result.data["from_layer"] is None
        assert result.data["to_layer"] == "cart"
        assert result.data["verdict"] is None
        assert result.warnings == [
            "scripts/build.js is not in any layer; its references are not checked"
        ]


# ---------------------------------------------------------------------------
# layers
# ---------------------------------------------------------------------------


class TestLayers:
    def test_items_and_dependents(self, project: Project) -> None:
        result = BoundaryService(project).layers()
        items = {item["name"]: item for item in result.data["items"]}
        assert result.data["count"] == 5
        assert items["shared"]["dependents"] == ["app", "cart", "my-feature", "products"]
        assert items["cart"]["can_import"] == ["shared"]
        assert items["app"]["wildcard"] is True
        assert items["app"]["dependents"] == []

    def test_tiers_leaves_first(self, project: Project) -> None:
        result = BoundaryService(project).layers()
        assert result.data["cycles"] == []
        assert result.data["tiers"] == [["shared"], ["cart", "my-feature", "products"], ["app"]]

    def test_cycles_warned(self, tmp_path: Path) -> None:
        service = _service_for(
            tmp_path, '[boundaries.layers]\nb = ["a"]\na = ["b"]\nc = ["c"]\n'
        )
        result = service.layers()
        assert result.data["cycles"] == [["a", "b"]]
        assert result.data["tiers"] == []
        assert result.warnings == ["Allowed dependency cycle: a -> b -> a"]

    def test_dangling_entries_ignored_in_graph(self, tmp_path: Path) -> None:
        service = _service_for(tmp_path, '[boundaries.layers]\nshared = []\ncart = ["ghost"]\n')
        result = service.layers()
        items = {item["name"]: item for item in result.data["items"]}
        assert items["cart"]["can_import"] == ["ghost"]
        assert items["shared"]["dependents"] == []
        assert len(result.data["config_issues"]) == 1
