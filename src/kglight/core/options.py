"""
Filter option derivation.

Computes the distinct legal values per filterable dimension from the full,
unfiltered record set. Run once per data load; menus do not shrink as
filters are applied.
"""

import logging
from typing import Iterable, List, Sequence

from .cells import parse_tag_cell
from .types import FilterDimension, FilterOptions, InventoryRecord

logger = logging.getLogger(__name__)


def _ordered(values: Iterable[str]) -> List[str]:
    return sorted({v.strip() for v in values if v and v.strip()}, key=lambda v: (v.lower(), v))


def _column_values(record: InventoryRecord, dimension: FilterDimension) -> List[str]:
    if dimension == FilterDimension.LIFECYCLE:
        return [record.lifecycle_status]
    if dimension == FilterDimension.ORG_LEVEL1:
        return list(record.org_values(1))
    if dimension == FilterDimension.ORG_LEVEL2:
        return list(record.org_values(2))
    raise ValueError(f"{dimension} is not a plain-valued dimension")


def derive_options(records: Sequence[InventoryRecord], dimension: FilterDimension) -> List[str]:
    """
    Distinct values of a plain-valued dimension.

    Org levels union the producer-side and consumer-side columns, since
    either role may carry the organizational tag.
    """
    dimension = FilterDimension(dimension)
    if dimension == FilterDimension.CAPABILITY:
        return derive_capability_options(records)

    values: List[str] = []
    for record in records:
        values.extend(_column_values(record, dimension))
    return _ordered(values)


def derive_capability_options(records: Sequence[InventoryRecord]) -> List[str]:
    """Union of the parsed capability tags of every record."""
    tags = set()
    for record in records:
        tags |= parse_tag_cell(record.capabilities_supported)
    return _ordered(tags)


def derive_filter_options(records: Sequence[InventoryRecord]) -> FilterOptions:
    """Derive the option menus for every dimension at once."""
    options = FilterOptions(
        lifecycle=derive_options(records, FilterDimension.LIFECYCLE),
        capability=derive_capability_options(records),
        org_level1=derive_options(records, FilterDimension.ORG_LEVEL1),
        org_level2=derive_options(records, FilterDimension.ORG_LEVEL2),
    )
    logger.debug(
        "Derived options: %s",
        {d.value: len(options.for_dimension(d)) for d in FilterDimension},
    )
    return options
