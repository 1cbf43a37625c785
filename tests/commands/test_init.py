"""Tests for init CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from layerguard.cli import cli


@pytest.fixture
def empty_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.delenv("LAYERGUARD_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestInitCommand:
    def test_writes_config_in_cwd(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["init"])
        assert result.exit_code == 0, result.output
        assert "OK  init" in result.stdout
        assert "layers: shared, products, cart, app" in result.stdout
        assert (empty_dir / "layerguard.toml").is_file()

    def test_validate_after_init(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        cli_runner.invoke(cli, ["init"])
        result = cli_runner.invoke(cli, ["--json", "validate"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)["data"]
        assert data["layers"] == ["shared", "products", "cart", "app"]
        assert data["aliases"] == ["#layers", "@layers"]

    def test_path_argument(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "init", "web"])
        assert result.exit_code == 0
        assert result.stdout.strip() == str(empty_dir.resolve() / "web" / "layerguard.toml")

    def test_existing_config_exits_one(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        (empty_dir / "layerguard.toml").write_text("[boundaries.layers]\nmine = []\n")
        result = cli_runner.invoke(cli, ["--json", "init"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "CONFIG_EXISTS"

    def test_force(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        (empty_dir / "layerguard.toml").write_text("[boundaries.layers]\nmine = []\n")
        result = cli_runner.invoke(cli, ["init", "--force"])
        assert result.exit_code == 0
        assert "products" in (empty_dir / "layerguard.toml").read_text(encoding="utf-8")

    def test_unknown_preset_rejected(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        result = cli_runner.invoke(cli, ["init", "--preset", "strict"])
        assert result.exit_code == 2
        assert not (empty_dir / "layerguard.toml").exists()
