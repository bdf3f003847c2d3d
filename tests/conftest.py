"""Shared fixtures for kglight tests."""

import pytest

from kglight.core.types import InventoryRecord


def make_record(producer, consumer, **fields) -> InventoryRecord:
    return InventoryRecord(producer=producer, consumer=consumer, **fields)


@pytest.fixture
def spec_records():
    """The two-record inventory used throughout the docs."""
    return [
        make_record(
            "A", "B",
            integration_type="REST-API",
            lifecycle_status="Active",
            capabilities_supported='["x","y"]',
        ),
        make_record(
            "B", "C",
            integration_type="Batch",
            lifecycle_status="Deprecated",
            capabilities_supported="z",
        ),
    ]


@pytest.fixture
def org_records():
    """Records with org tags on either side."""
    return [
        make_record(
            "Billing", "Ledger",
            producer_type="Service", consumer_type="Database",
            integration_type="REST-API", lifecycle_status="Active",
            capabilities_supported='["Invoicing", "Payments"]',
            producer_org_level1="Finance", producer_org_level2="Billing Ops",
            consumer_org_level1="Finance", consumer_org_level2="Accounting",
        ),
        make_record(
            "CRM", "Billing",
            producer_type="SaaS", consumer_type="Service",
            integration_type="REST-API", lifecycle_status="Active",
            capabilities_supported="Customer Data, Invoicing",
            producer_org_level1="Sales", producer_org_level2="CRM Team",
            consumer_org_level1="Finance", consumer_org_level2="Billing Ops",
        ),
        make_record(
            "CRM", "Data Lake",
            producer_type="SaaS", consumer_type="Storage",
            integration_type="Batch", lifecycle_status="Deprecated",
            capabilities_supported='["Customer Data"]',
            producer_org_level1="Sales", producer_org_level2="CRM Team",
            consumer_org_level1="Data", consumer_org_level2="Analytics",
        ),
        make_record(
            "Notifications", "Mail Gateway",
            producer_type="Service", consumer_type="External",
            integration_type="SMTP", lifecycle_status="Pilot",
            capabilities_supported="Messaging",
            producer_org_level1="Platform",
        ),
    ]


INVENTORY_CSV = """Producer,Consumer,Producer-Type,Consumer-Type,Integration-Type,Lifecycle-Status,Capabilities-Supported,Producer-Org-Level1,Producer-Org-Level2,Consumer-Org-Level1,Consumer-Org-Level2
A,B,Service,Service,REST-API,Active,"[""x"",""y""]",Finance,Billing,Sales,CRM
B,C,Service,Database,Batch,Deprecated,z,Sales,CRM,Data,Analytics
"""


@pytest.fixture
def inventory_file(tmp_path):
    path = tmp_path / "inventory.csv"
    path.write_text(INVENTORY_CSV, encoding="utf-8")
    return path


@pytest.fixture
def record_factory():
    return make_record
