"""
Main validation pipeline — orchestrates the full workflow.

Flow:
  ┌─────────────┐
  │ Raw records │   ← str | None, straight from ingestion
  └──────┬──────┘
         │
  ┌──────▼──────┐
  │ Normalizer  │   ← trim, upper-case, null → sentinel
  └──────┬──────┘
         │
  ┌──────▼──────┐
  │ Deduplicate │   ← first occurrence wins
  └──────┬──────┘
         │
  ┌──────▼──────┐
  │ Rule engine │   ← ordered cascade, one verdict each
  └──────┬──────┘
         │
  ┌──────▼──────┐
  │   Report    │   ← summary counts + per-identifier verdicts
  └─────────────┘

Design principles:
  - Every stage is a pure function; the pipeline holds only settings.
  - Nulls are normalized BEFORE deduplication, so every absent record
    collapses into a single invalid sentinel. ``null_records`` keeps the
    original count visible.
  - The deduplicated identifier list is SHA-256 hashed for audit trail.
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Iterable, Optional

from .dedup import deduplicate
from .models import Summary, ValidationReport
from .normalizer import normalize_records
from .rules import classify_all
from .settings import ValidatorSettings, get_settings

logger = logging.getLogger(__name__)


class PanValidationPipeline:
    """Orchestrates normalize → deduplicate → classify → summarize.

    Usage:
        pipeline = PanValidationPipeline()
        report = pipeline.run(["abxcd1934f", "ABXCD1934F", None])
        print(report.summary.total_valid, report.summary.total_invalid)
    """

    def __init__(self, settings: ValidatorSettings | None = None):
        self.settings = settings or get_settings()

    def run(self, records: Iterable[Optional[str]]) -> ValidationReport:
        """Execute the full pipeline on raw records.

        Args:
            records: Raw records; each a string or None.

        Returns:
            ValidationReport with summary and per-identifier verdicts.

        Raises:
            RecordTypeError: if any record is neither a string nor None.
        """
        raw = list(records)
        null_count = sum(1 for r in raw if r is None)

        # ── Step 1: Normalize ───────────────────────────────────────
        normalized = normalize_records(raw, self.settings.null_sentinel)

        # ── Step 2: Deduplicate ─────────────────────────────────────
        unique = deduplicate(normalized)
        logger.info(
            "Normalized %d record(s) into %d distinct identifier(s)",
            len(raw),
            len(unique),
        )

        # ── Step 3: Classify ────────────────────────────────────────
        results = classify_all(unique)
        for result in results:
            if not result.is_valid:
                logger.debug("%r -> %s", result.identifier, result.verdict.value)

        # ── Step 4: Summarize ───────────────────────────────────────
        summary = Summary.from_results(results)
        logger.info(
            "Validation finished: %d total, %d valid, %d invalid",
            summary.total_records,
            summary.total_valid,
            summary.total_invalid,
        )

        return ValidationReport(
            summary=summary,
            results=results,
            raw_records=len(raw),
            duplicates_removed=len(raw) - len(unique),
            null_records=null_count,
            audit_hash=_audit_hash(unique),
        )


def _audit_hash(identifiers: list[str]) -> str:
    """SHA-256 over the deduplicated identifiers as a JSON array."""
    payload = json.dumps(identifiers, ensure_ascii=False, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
