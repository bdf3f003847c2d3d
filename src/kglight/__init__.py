"""
kglight - Integration Inventory Graph.

Renders producer/consumer integration relationships from a CSV inventory
as an interactive force-directed graph, filterable by lifecycle status,
capability tags and organizational level.

Key Components:
- core: Record model, cell parsing, filtering, normalization, session
- graph: HTML/D3 visualization
- cli: Command line interface

Usage:
    from kglight import GraphSession, FilterSelection

    session = GraphSession.from_csv("inventory.csv")
    view = session.apply(FilterSelection(lifecycle={"Active"}))
"""

__version__ = "0.1.0"

from .core.session import GraphSession
from .core.types import (
    Edge, FilterDimension, FilterOptions, FilterSelection,
    GraphView, InventoryRecord, Node,
)

__all__ = [
    "__version__",
    "GraphSession",
    "Edge",
    "FilterDimension",
    "FilterOptions",
    "FilterSelection",
    "GraphView",
    "InventoryRecord",
    "Node",
]
