"""
Raw record normalization.

A raw record is a nullable string straight from ingestion: possibly absent,
padded with whitespace, or mixed-case. Normalization is total over that
domain: nulls become a sentinel (they are NOT filtered here; the sentinel
always fails the format rule later), strings are trimmed and upper-cased.

Anything that is neither a string nor None is a caller bug and fails fast.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .exceptions import RecordTypeError

NULL_SENTINEL = ""


def normalize_identifier(raw: Optional[str], sentinel: str = NULL_SENTINEL) -> str:
    """Trim and upper-case one raw record.

    Args:
        raw: The raw record, or None when absent.
        sentinel: Value substituted for None.

    Returns:
        The normalized identifier. Digits and punctuation pass through.

    Raises:
        RecordTypeError: if ``raw`` is not a string or None.
    """
    if raw is None:
        return sentinel
    if not isinstance(raw, str):
        raise RecordTypeError(
            f"Raw record must be a string or None, got {type(raw).__name__}",
            details={"value": repr(raw), "type": type(raw).__name__},
        )
    return raw.strip().upper()


def normalize_records(
    records: Iterable[Optional[str]], sentinel: str = NULL_SENTINEL
) -> list[str]:
    """Normalize every record, preserving input order."""
    return [normalize_identifier(r, sentinel) for r in records]
