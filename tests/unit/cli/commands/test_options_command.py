"""
Unit tests for the 'options' and 'stats' commands.
"""

import json

import pytest
from click.testing import CliRunner

from kglight.cli.main import main


class TestOptionsCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_json(self, runner, inventory_file):
        result = runner.invoke(main, ["options", str(inventory_file), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["lifecycle"] == ["Active", "Deprecated"]
        assert data["capability"] == ["x", "y", "z"]
        assert data["org_level1"] == ["Data", "Finance", "Sales"]
        assert data["org_level2"] == ["Analytics", "Billing", "CRM"]

    def test_table(self, runner, inventory_file):
        result = runner.invoke(main, ["options", str(inventory_file)])

        assert result.exit_code == 0, result.output
        assert "Filter Options" in result.output
        assert "Lifecycle" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["options", str(tmp_path / "missing.csv")])
        assert result.exit_code == 1


class TestStatsCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_json(self, runner, inventory_file):
        result = runner.invoke(main, ["stats", str(inventory_file), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["total_records"] == 2
        assert data["filtered_records"] == 2
        assert data["total_nodes"] == 3
        assert data["edges_by_type"] == {"REST-API": 1, "Batch": 1}

    def test_filtered(self, runner, inventory_file):
        result = runner.invoke(main, ["stats", str(inventory_file), "--json", "-l", "Deprecated"])

        data = json.loads(result.output)["data"]
        assert data["filtered_records"] == 1
        assert data["total_nodes"] == 2

    def test_text(self, runner, inventory_file):
        result = runner.invoke(main, ["stats", str(inventory_file)])

        assert result.exit_code == 0, result.output
        assert "Records: 2 of 2" in result.output
        assert "Integrations by Type" in result.output
