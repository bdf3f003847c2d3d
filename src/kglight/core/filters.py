"""
Filter engine.

Semantics:
    - OR within a dimension: a record passes if any selected value matches.
    - AND across dimensions: every active dimension must pass.
    - An empty selection for a dimension passes everything.

Org-level matching is role-agnostic: either the producer-side or the
consumer-side tag may satisfy the selection. Capability matching is a set
intersection against the parsed capability tags.
"""

import logging
from typing import FrozenSet, List, Sequence

from .cells import parse_tag_cell
from .types import FilterSelection, InventoryRecord

logger = logging.getLogger(__name__)


def _matches_lifecycle(record: InventoryRecord, selected: FrozenSet[str]) -> bool:
    return not selected or record.lifecycle_status in selected


def _matches_capability(record: InventoryRecord, selected: FrozenSet[str]) -> bool:
    if not selected:
        return True
    return not parse_tag_cell(record.capabilities_supported).isdisjoint(selected)


def _matches_org_level(record: InventoryRecord, level: int, selected: FrozenSet[str]) -> bool:
    if not selected:
        return True
    producer_side, consumer_side = record.org_values(level)
    return producer_side in selected or consumer_side in selected


def record_matches(record: InventoryRecord, selection: FilterSelection) -> bool:
    """Check a single record against every active dimension."""
    return (
        _matches_lifecycle(record, selection.lifecycle)
        and _matches_capability(record, selection.capability)
        and _matches_org_level(record, 1, selection.org_level1)
        and _matches_org_level(record, 2, selection.org_level2)
    )


def filter_records(
    records: Sequence[InventoryRecord],
    selection: FilterSelection,
) -> List[InventoryRecord]:
    """
    Return the records matching the selection, in input order.

    The input sequence and the selection are left untouched.
    """
    if selection.is_empty():
        return list(records)

    filtered = [r for r in records if record_matches(r, selection)]
    logger.debug(
        "Filtered %d -> %d records on %s",
        len(records),
        len(filtered),
        [d.value for d in selection.active_dimensions()],
    )
    return filtered
