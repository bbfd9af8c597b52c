"""
Loading raw records from files.

Two shapes are supported:
  - ``.csv`` files: one column holds the identifiers (first column unless
    named). An empty cell is an absent record.
  - anything else: one identifier per line. A whitespace-only line is an
    absent record.

Both shapes skip completely empty lines, the way csv.DictReader skips
empty rows, so a trailing blank line never becomes a record.

Loaders only move text around. They never normalize; that is the
pipeline's job, so nulls reach it as None.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Optional

from .exceptions import IngestionError

logger = logging.getLogger(__name__)


def load_records(
    path: str | Path, column: Optional[str] = None
) -> list[Optional[str]]:
    """Read raw records from a text or CSV file.

    Args:
        path: File to read (UTF-8).
        column: CSV column holding identifiers. Ignored for plain text.

    Raises:
        IngestionError: if the file can't be read or the column is missing.
    """
    resolved = Path(path)
    try:
        text = resolved.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise IngestionError(
            f"Could not read records from '{resolved}': {e}",
            details={"path": str(resolved)},
        ) from e

    if resolved.suffix.lower() == ".csv":
        records = parse_csv_text(text, column)
    else:
        records = parse_lines(text)

    logger.info("Loaded %d raw record(s) from %s", len(records), resolved)
    return records


def parse_lines(text: str) -> list[Optional[str]]:
    """One record per line.

    Empty lines are skipped; whitespace-only lines are absent records.
    """
    return [line if line.strip() else None for line in text.splitlines() if line]


def parse_csv_text(text: str, column: Optional[str] = None) -> list[Optional[str]]:
    """Pull one column out of CSV text.

    Raises:
        IngestionError: if the CSV has no header or lacks ``column``.
    """
    reader = csv.DictReader(io.StringIO(text, newline=""))
    fieldnames = reader.fieldnames
    if not fieldnames:
        raise IngestionError("CSV input has no header row")

    target = column if column is not None else fieldnames[0]
    if target not in fieldnames:
        raise IngestionError(
            f"CSV column '{target}' not found",
            details={"column": target, "available": list(fieldnames)},
        )

    records: list[Optional[str]] = []
    for row in reader:
        value = row.get(target)
        records.append(value if value and value.strip() else None)
    return records
