"""
Inventory loading.

Reads the CSV inventory into immutable records. A load failure is fatal to
the session: callers must not go on to filter or draw without data.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Dict, List, Union

from pydantic import ValidationError

from .errors import InventoryLoadError
from .types import COLUMN_ALIASES, InventoryRecord

logger = logging.getLogger(__name__)

# Headers used by earlier inventory variants
HEADER_ALIASES: Dict[str, str] = {
    "Publisher": "Producer",
    "Publisher-Type": "Producer-Type",
    "Lifecycle": "Lifecycle-Status",
    "Capability": "Capabilities-Supported",
}

REQUIRED_COLUMNS = ("Producer", "Consumer")


def _canonical_header(name: str) -> str:
    name = (name or "").strip()
    return HEADER_ALIASES.get(name, name)


def read_inventory(text: str, source: str = "<string>") -> List[InventoryRecord]:
    """Parse inventory records from CSV text."""
    if text.startswith("\ufeff"):
        text = text[1:]

    reader = csv.DictReader(io.StringIO(text))
    try:
        fieldnames = reader.fieldnames
    except csv.Error as e:
        raise InventoryLoadError(f"Malformed CSV header ({e})", source) from e
    if not fieldnames:
        raise InventoryLoadError("Inventory has no header row", source)

    headers = [_canonical_header(h) for h in fieldnames]
    missing = [c for c in REQUIRED_COLUMNS if c not in headers]
    if missing:
        raise InventoryLoadError(f"Inventory is missing columns {missing}", source)

    unknown = set(headers) - set(COLUMN_ALIASES.values())
    if unknown:
        logger.debug("Ignoring unknown columns: %s", sorted(unknown))

    records: List[InventoryRecord] = []
    try:
        for row in reader:
            line_no = reader.line_num
            data = {
                _canonical_header(k): v
                for k, v in row.items()
                if k is not None
            }
            try:
                record = InventoryRecord.model_validate(data)
            except ValidationError as e:
                raise InventoryLoadError(f"Invalid row at line {line_no}: {e}", source) from e

            if not record.producer or not record.consumer:
                logger.warning("Skipping line %d: blank Producer or Consumer", line_no)
                continue
            records.append(record)
    except csv.Error as e:
        raise InventoryLoadError(f"Malformed CSV at line {reader.line_num} ({e})", source) from e

    logger.debug("Loaded %d records from %s", len(records), source)
    return records


def load_inventory(path: Union[str, Path]) -> List[InventoryRecord]:
    """
    Load inventory records from a CSV file.

    Raises:
        InventoryLoadError: the file is missing, unreadable, or malformed.
    """
    csv_path = Path(path)
    if not csv_path.is_file():
        raise InventoryLoadError("Inventory file not found", str(csv_path))

    try:
        text = csv_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InventoryLoadError(f"Failed to read inventory ({e})", str(csv_path)) from e

    return read_inventory(text, source=str(csv_path))
