"""CSV file mapping loader."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from ..core.errors import MalformedMappingError, MappingNotFoundError
from ..core.models import MappingRow

logger = logging.getLogger(__name__)

ORIGIN_COLUMN = "FileOrigin"
DESTINATION_COLUMN = "FileDestination"


def load_mappings(mapping_path: Path) -> list[MappingRow]:
    """Read the origin/destination table in file order.

    Args:
        mapping_path: Path to a comma-delimited file with ``FileOrigin`` and
            ``FileDestination`` header columns

    Returns:
        Mapping rows, in the order they appear in the file
    """
    if not mapping_path.exists():
        raise MappingNotFoundError(f"Mapping file not found: {mapping_path}")

    # utf-8-sig tolerates the byte-order mark written by Export-Csv
    with mapping_path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        header = [name.strip() for name in reader.fieldnames or []]
        missing = [c for c in (ORIGIN_COLUMN, DESTINATION_COLUMN) if c not in header]
        if missing:
            raise MalformedMappingError(
                f"Mapping file {mapping_path} is missing column(s): {', '.join(missing)}"
            )
        reader.fieldnames = header

        rows: list[MappingRow] = []
        for record in reader:
            origin = (record.get(ORIGIN_COLUMN) or "").strip()
            destination = (record.get(DESTINATION_COLUMN) or "").strip()
            if not origin and not destination:
                continue
            rows.append(MappingRow(source_path=Path(origin), destination_path=destination))

    logger.debug(f"Loaded {len(rows)} mapping row(s) from {mapping_path}")
    return rows
