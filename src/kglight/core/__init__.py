"""
kglight Core Module.

Pure functions over the in-memory inventory:
    - parse_tag_cell: capability cell normalization
    - derive_filter_options: option menus per dimension
    - filter_records: multi-dimensional filtering
    - normalize: records -> (nodes, edges)

Plus the GraphSession context that ties them to one loaded dataset.
"""

from .cells import parse_tag_cell
from .filters import filter_records, record_matches
from .normalize import denormalize, normalize
from .options import derive_capability_options, derive_filter_options, derive_options

__all__ = [
    "parse_tag_cell",
    "filter_records",
    "record_matches",
    "normalize",
    "denormalize",
    "derive_options",
    "derive_capability_options",
    "derive_filter_options",
]
