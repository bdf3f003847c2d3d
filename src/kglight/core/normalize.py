"""
Graph normalization.

Turns a (filtered) list of inventory records into a deduplicated node list
and a producer -> consumer edge list. The model is rebuilt from scratch on
every call; nothing is patched incrementally.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from .types import Edge, InventoryRecord, Node

logger = logging.getLogger(__name__)


def normalize(records: Sequence[InventoryRecord]) -> Tuple[List[Node], List[Edge]]:
    """
    Build nodes and edges from records.

    Nodes keep first-seen order; a node's type comes from the record (and
    role) that introduced it. Edges are 1:1 with records, so repeated
    producer/consumer pairs give parallel edges.
    """
    registry: Dict[str, Node] = {}
    edges: List[Edge] = []

    for record in records:
        if record.producer not in registry:
            registry[record.producer] = Node(id=record.producer, type=record.producer_type)
        if record.consumer not in registry:
            registry[record.consumer] = Node(id=record.consumer, type=record.consumer_type)

        edges.append(Edge(
            source=record.producer,
            target=record.consumer,
            type=record.integration_type,
            lifecycle=record.lifecycle_status,
            capability=record.capabilities_supported,
        ))

    nodes = list(registry.values())
    logger.debug("Normalized %d records into %d nodes, %d edges", len(records), len(nodes), len(edges))
    return nodes, edges


def denormalize(nodes: Sequence[Node], edges: Sequence[Edge]) -> List[InventoryRecord]:
    """
    Rebuild inventory records from a node/edge pair.

    Org-level tags are not part of the graph model and come back empty.
    """
    types = {node.id: node.type for node in nodes}
    return [
        InventoryRecord(
            producer=edge.source,
            consumer=edge.target,
            producer_type=types.get(edge.source, ""),
            consumer_type=types.get(edge.target, ""),
            integration_type=edge.type,
            lifecycle_status=edge.lifecycle,
            capabilities_supported=edge.capability,
        )
        for edge in edges
    ]
