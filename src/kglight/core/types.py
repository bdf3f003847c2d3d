"""
Core type definitions for kglight.

Records are loaded once per session and never mutated. Nodes and edges are
derived from them on every filter pass.
"""

from enum import StrEnum
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FilterDimension(StrEnum):
    """Filterable dimensions of the inventory."""
    LIFECYCLE = "lifecycle"
    CAPABILITY = "capability"
    ORG_LEVEL1 = "org_level1"
    ORG_LEVEL2 = "org_level2"


# CSV header for each record field. Also used as pydantic aliases.
COLUMN_ALIASES: Dict[str, str] = {
    "producer": "Producer",
    "consumer": "Consumer",
    "producer_type": "Producer-Type",
    "consumer_type": "Consumer-Type",
    "integration_type": "Integration-Type",
    "lifecycle_status": "Lifecycle-Status",
    "capabilities_supported": "Capabilities-Supported",
    "producer_org_level1": "Producer-Org-Level1",
    "producer_org_level2": "Producer-Org-Level2",
    "consumer_org_level1": "Consumer-Org-Level1",
    "consumer_org_level2": "Consumer-Org-Level2",
}


class InventoryRecord(BaseModel):
    """
    One row of the integration inventory.

    Every column except Producer and Consumer is optional; absent values
    are normalized to the empty string.
    """
    producer: str = Field(alias="Producer")
    consumer: str = Field(alias="Consumer")
    producer_type: str = Field(default="", alias="Producer-Type")
    consumer_type: str = Field(default="", alias="Consumer-Type")
    integration_type: str = Field(default="", alias="Integration-Type")
    lifecycle_status: str = Field(default="", alias="Lifecycle-Status")
    capabilities_supported: str = Field(default="", alias="Capabilities-Supported")
    producer_org_level1: str = Field(default="", alias="Producer-Org-Level1")
    producer_org_level2: str = Field(default="", alias="Producer-Org-Level2")
    consumer_org_level1: str = Field(default="", alias="Consumer-Org-Level1")
    consumer_org_level2: str = Field(default="", alias="Consumer-Org-Level2")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _clean(cls, value):
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return str(value)

    def org_values(self, level: int) -> Tuple[str, str]:
        """Return the (producer, consumer) org tags for a hierarchy level."""
        if level == 1:
            return self.producer_org_level1, self.consumer_org_level1
        if level == 2:
            return self.producer_org_level2, self.consumer_org_level2
        raise ValueError(f"Unknown org level: {level}")

    def to_row(self) -> Dict[str, str]:
        """Dump back to a CSV-shaped dict keyed by column header."""
        return self.model_dump(by_alias=True)


class Node(BaseModel):
    """A unique component/system in the integration graph."""
    id: str
    type: str = ""

    model_config = ConfigDict(frozen=True)


class Edge(BaseModel):
    """
    One producer -> consumer relationship.

    The capability descriptor is kept raw; tooltips display it as loaded.
    """
    source: str
    target: str
    type: str = ""
    lifecycle: str = ""
    capability: str = ""

    model_config = ConfigDict(frozen=True)


class FilterSelection(BaseModel):
    """
    Active filter state: selected values per dimension.

    An empty set for a dimension means no restriction on it.
    """
    lifecycle: FrozenSet[str] = frozenset()
    capability: FrozenSet[str] = frozenset()
    org_level1: FrozenSet[str] = frozenset()
    org_level2: FrozenSet[str] = frozenset()

    model_config = ConfigDict(frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _to_frozenset(cls, value):
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        return frozenset(v.strip() for v in value if v and v.strip())

    @classmethod
    def from_mapping(cls, selection: Mapping[str, Iterable[str]]) -> "FilterSelection":
        """Build a selection from a {dimension: values} mapping."""
        return cls(**{FilterDimension(k).value: v for k, v in selection.items()})

    def values(self, dimension: FilterDimension) -> FrozenSet[str]:
        return getattr(self, FilterDimension(dimension).value)

    def with_values(self, dimension: FilterDimension, values: Iterable[str]) -> "FilterSelection":
        """Return a copy with one dimension's selection replaced."""
        data = {d.value: self.values(d) for d in FilterDimension}
        data[FilterDimension(dimension).value] = values
        return FilterSelection(**data)

    def active_dimensions(self) -> List[FilterDimension]:
        return [d for d in FilterDimension if self.values(d)]

    def is_empty(self) -> bool:
        return not self.active_dimensions()

    def to_dict(self) -> Dict[str, List[str]]:
        return {d.value: sorted(self.values(d)) for d in FilterDimension}


class FilterOptions(BaseModel):
    """Legal values per filterable dimension, derived once per data load."""
    lifecycle: List[str] = Field(default_factory=list)
    capability: List[str] = Field(default_factory=list)
    org_level1: List[str] = Field(default_factory=list)
    org_level2: List[str] = Field(default_factory=list)

    def for_dimension(self, dimension: FilterDimension) -> List[str]:
        return getattr(self, FilterDimension(dimension).value)


class GraphView(BaseModel):
    """The outcome of one filter pass over the full record set."""
    selection: FilterSelection
    records: List[InventoryRecord]
    nodes: List[Node]
    edges: List[Edge]

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def to_dict(self) -> Dict[str, list]:
        return {
            "nodes": [n.model_dump() for n in self.nodes],
            "edges": [e.model_dump() for e in self.edges],
        }
