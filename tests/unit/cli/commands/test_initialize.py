"""
Unit tests for the 'init' command.
"""

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from kglight.cli.commands.initialize import detect_inventories
from kglight.cli.main import main


class TestDetectInventories:
    def test_finds_inventory_by_header(self, tmp_path):
        (tmp_path / "inventory.csv").write_text("Producer,Consumer\nA,B\n")
        (tmp_path / "legacy.csv").write_text("Publisher,Consumer\nA,B\n")
        (tmp_path / "other.csv").write_text("name,value\nx,1\n")

        found = detect_inventories(tmp_path)
        assert [p.name for p in found] == ["inventory.csv", "legacy.csv"]

    def test_empty_directory(self, tmp_path):
        assert detect_inventories(tmp_path) == []


class TestInitCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_writes_config_for_detected_inventory(self, runner):
        with runner.isolated_filesystem():
            Path("inventory.csv").write_text("Producer,Consumer\nA,B\n")
            result = runner.invoke(main, ["init"])

            assert result.exit_code == 0, result.output
            config = yaml.safe_load(Path(".kglight/config.yaml").read_text())
            assert config["dataset"] == "inventory.csv"

    def test_existing_config_declined(self, runner):
        with runner.isolated_filesystem():
            Path(".kglight").mkdir()
            Path(".kglight/config.yaml").write_text("dataset: keep.csv\n")

            result = runner.invoke(main, ["init"], input="n\n")

            assert "Aborted" in result.output
            assert "keep.csv" in Path(".kglight/config.yaml").read_text()

    def test_force_overwrites(self, runner):
        with runner.isolated_filesystem():
            Path(".kglight").mkdir()
            Path(".kglight/config.yaml").write_text("dataset: keep.csv\n")

            result = runner.invoke(main, ["init", "--force"])

            assert result.exit_code == 0
            assert "keep.csv" not in Path(".kglight/config.yaml").read_text()

    def test_demo(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["init", "--demo"])

            assert result.exit_code == 0, result.output
            demo_dir = Path("kglight-demo")
            assert (demo_dir / "inventory.csv").exists()
            config = yaml.safe_load((demo_dir / ".kglight/config.yaml").read_text())
            assert config["dataset"] == "inventory.csv"
