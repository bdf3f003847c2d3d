"""
Integration graph backed by rustworkx.

Wraps a normalized (nodes, edges) pair for analysis: degree lookups for
tooltips and summary statistics. Layout is not computed here; the
visualization does its own force simulation.

It manages:
- The bimap between string node IDs and rustworkx integer indices.
- Parallel edges (one per inventory record).
"""

from collections import Counter
from typing import Any, Dict, Iterator, List, Optional, Sequence, Set, Tuple

import rustworkx as rx

from .types import Edge, Node


class IntegrationGraph:
    """
    Directed multigraph of producer -> consumer integrations.

    Edges whose endpoints are not in the node set are dropped; the
    normalizer always registers both endpoints first, so this only matters
    for hand-built inputs.
    """

    def __init__(self, nodes: Sequence[Node] = (), edges: Sequence[Edge] = ()):
        self._graph = rx.PyDiGraph(multigraph=True)
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: Dict[int, str] = {}

        for node in nodes:
            self.add_node(node)
        for edge in edges:
            self.add_edge(edge)

    def add_node(self, node: Node) -> None:
        """Add a node; a repeated ID keeps the first node."""
        if node.id in self._id_to_idx:
            return
        idx = self._graph.add_node(node)
        self._id_to_idx[node.id] = idx
        self._idx_to_id[idx] = node.id

    def add_edge(self, edge: Edge) -> bool:
        """Add an edge, returning False if an endpoint is unknown."""
        if edge.source not in self._id_to_idx or edge.target not in self._id_to_idx:
            return False
        self._graph.add_edge(self._id_to_idx[edge.source], self._id_to_idx[edge.target], edge)
        return True

    def get_node(self, node_id: str) -> Optional[Node]:
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def degree(self, node_id: str) -> Tuple[int, int]:
        """Return (in_degree, out_degree), counting parallel edges."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return 0, 0
        return self._graph.in_degree(idx), self._graph.out_degree(idx)

    def consumers_of(self, node_id: str) -> Set[str]:
        """IDs of nodes this node produces for."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return set()
        return {self._idx_to_id[i] for i in self._graph.successor_indices(idx)}

    def producers_of(self, node_id: str) -> Set[str]:
        """IDs of nodes feeding this node."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return set()
        return {self._idx_to_id[i] for i in self._graph.predecessor_indices(idx)}

    def edges_between(self, source_id: str, target_id: str) -> List[Edge]:
        if source_id not in self._id_to_idx or target_id not in self._id_to_idx:
            return []
        u = self._id_to_idx[source_id]
        v = self._id_to_idx[target_id]
        if not self._graph.has_edge(u, v):
            return []
        return list(self._graph.get_all_edge_data(u, v))

    def iter_nodes(self) -> Iterator[Node]:
        return iter(self._graph.nodes())

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self._graph.edges())

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def get_stats(self) -> Dict[str, Any]:
        edges = list(self.iter_edges())
        orphans = len([
            n for n in self._graph.node_indices()
            if self._graph.in_degree(n) == 0 and self._graph.out_degree(n) == 0
        ])
        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "nodes_by_type": dict(Counter(n.type or "unknown" for n in self.iter_nodes())),
            "edges_by_type": dict(Counter(e.type or "unknown" for e in edges)),
            "edges_by_lifecycle": dict(Counter(e.lifecycle or "unknown" for e in edges)),
            "orphans": orphans,
            "backend": "rustworkx",
        }
