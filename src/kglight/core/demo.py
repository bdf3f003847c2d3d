"""
Demo Manager - Scaffolds an example inventory.

Writes a small integration inventory that exercises every filter
dimension, including both capability cell formats (JSON arrays and plain
comma-delimited strings), so a first `kglight graph` shows something useful.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class DemoManager:
    """
    Manages the creation of the demo inventory.
    """

    INVENTORY_CSV = """Producer,Consumer,Producer-Type,Consumer-Type,Integration-Type,Lifecycle-Status,Capabilities-Supported,Producer-Org-Level1,Producer-Org-Level2,Consumer-Org-Level1,Consumer-Org-Level2
Billing,Ledger,Service,Database,REST-API,Active,"[""Invoicing"", ""Payments""]",Finance,Billing Ops,Finance,Accounting
Billing,Notifications,Service,Service,Event,Active,Invoicing,Finance,Billing Ops,Platform,Messaging
CRM,Billing,SaaS,Service,REST-API,Active,"Customer Data, Invoicing",Sales,CRM Team,Finance,Billing Ops
CRM,Data Lake,SaaS,Storage,Batch,Deprecated,"[""Customer Data""]",Sales,CRM Team,Data,Analytics
Orders,Billing,Service,Service,Messaging,Active,"[""Payments"", ""Orders""]",Commerce,Checkout,Finance,Billing Ops
Orders,Warehouse,Service,Service,File-Transfer,Pilot,Fulfillment,Commerce,Checkout,Operations,Logistics
Warehouse,Data Lake,Service,Storage,Batch,Active,"[""Inventory"", ""Fulfillment""]",Operations,Logistics,Data,Analytics
Ledger,Data Lake,Database,Storage,Database,Retired,Reporting,Finance,Accounting,Data,Analytics
Data Lake,BI Dashboards,Storage,Application,Batch,Active,"[""Reporting""]",Data,Analytics,Data,Insights
Identity,CRM,Service,SaaS,REST-API,Active,"[""Authentication""]",Platform,Security,Sales,CRM Team
Identity,Orders,Service,Service,REST-API,Active,"[""Authentication""]",Platform,Security,Commerce,Checkout
Notifications,Mail Gateway,Service,External,SMTP,Pilot,Messaging,Platform,Messaging,,
"""

    def __init__(self, root_dir: Path):
        self.root_dir = root_dir
        self.demo_dir = root_dir / "kglight-demo"

    def provision(self) -> Path:
        """Create the demo directory with its inventory and return the directory."""
        if self.demo_dir.exists():
            logger.warning(f"Demo directory {self.demo_dir} already exists. Overwriting files.")

        self.demo_dir.mkdir(parents=True, exist_ok=True)
        (self.demo_dir / "inventory.csv").write_text(self.INVENTORY_CSV.strip() + "\n", encoding="utf-8")

        return self.demo_dir
