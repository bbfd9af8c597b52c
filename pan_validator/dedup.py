"""Deduplication of normalized identifiers.

Tie-break: the first occurrence in input order is the representative, and
the output keeps first-seen order. All copies are textually identical, so
the choice only makes the output deterministic.
"""

from __future__ import annotations

from typing import Iterable


def deduplicate(identifiers: Iterable[str]) -> list[str]:
    """Return one entry per distinct identifier, in first-seen order."""
    seen: set[str] = set()
    unique: list[str] = []
    for identifier in identifiers:
        if identifier in seen:
            continue
        seen.add(identifier)
        unique.append(identifier)
    return unique
