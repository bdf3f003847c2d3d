"""
Unit tests for the Demo Manager.
"""

from kglight.core.demo import DemoManager
from kglight.core.loader import load_inventory
from kglight.core.options import derive_filter_options


class TestDemoManager:
    """Test the demo inventory provisioning."""

    def test_provision_creates_inventory(self, tmp_path):
        demo_dir = DemoManager(tmp_path).provision()
        assert demo_dir == tmp_path / "kglight-demo"
        assert (demo_dir / "inventory.csv").exists()

    def test_inventory_loads_and_covers_every_dimension(self, tmp_path):
        demo_dir = DemoManager(tmp_path).provision()
        records = load_inventory(demo_dir / "inventory.csv")
        assert len(records) == 12

        options = derive_filter_options(records)
        assert "Active" in options.lifecycle
        # JSON-array and plain cells both contribute tags
        assert {"Invoicing", "Payments", "Customer Data", "Fulfillment"} <= set(options.capability)
        assert "Finance" in options.org_level1
        assert "Analytics" in options.org_level2

    def test_provision_twice_overwrites(self, tmp_path):
        manager = DemoManager(tmp_path)
        manager.provision()
        demo_dir = manager.provision()
        assert (demo_dir / "inventory.csv").exists()
