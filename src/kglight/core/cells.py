"""
Capability cell parsing.

The Capabilities-Supported column is inconsistent across inventories: some
rows hold a JSON array literal (``["Billing", "Invoicing"]``), others a bare
or comma-delimited string (``Billing, Invoicing``). Both normalize to a set
of trimmed tags.

Precedence:
    1. blank cell -> empty set
    2. JSON array -> its elements
    3. JSON string -> that single string
    4. anything else -> comma split
"""

import json
from typing import Any, Optional, Set

from .result import Err, Ok, Result


def _decode_json(raw: str) -> Result[Any, str]:
    try:
        return Ok(json.loads(raw))
    except (ValueError, TypeError, RecursionError) as e:
        return Err(str(e))


def _clean(values) -> Set[str]:
    return {str(v).strip() for v in values if v is not None and str(v).strip()}


def split_delimited(raw: str, delimiter: str = ",") -> Set[str]:
    """Split a plain delimited string into trimmed, non-empty tags."""
    return _clean(raw.split(delimiter))


def parse_tag_cell(raw: Optional[str]) -> Set[str]:
    """
    Normalize a capability cell into a set of scalar tags.

    Never raises: malformed or too deeply nested JSON falls through to the
    delimited form.
    """
    if raw is None or not str(raw).strip():
        return set()

    raw = str(raw).strip()
    decoded = _decode_json(raw)

    if decoded.is_ok():
        value = decoded.unwrap()
        if isinstance(value, list):
            return _clean(value)
        if isinstance(value, str):
            return _clean([value])

    return split_delimited(raw)
