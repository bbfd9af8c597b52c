"""
Pydantic models for PAN validation, typed strictly at every stage boundary.

Every stage hands the next one an immutable value. Models are frozen so a
report cannot drift away from the verdicts it was built from.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from functools import cached_property

from pydantic import BaseModel, Field, model_validator


# ─── Verdicts ───────────────────────────────────────────────────────


class Verdict(str, Enum):
    """The single classification label assigned to an identifier."""

    VALID = "Valid"
    INVALID_FORMAT = "InvalidFormat"
    INVALID_ADJACENT_ALPHABETS = "InvalidAdjacentAlphabets"
    INVALID_ADJACENT_DIGITS = "InvalidAdjacentDigits"
    INVALID_SEQUENTIAL_ALPHABETS = "InvalidSequentialAlphabets"
    INVALID_SEQUENTIAL_DIGITS = "InvalidSequentialDigits"

    @property
    def is_valid(self) -> bool:
        return self is Verdict.VALID


# ─── Per-Identifier Result ──────────────────────────────────────────


class IdentifierResult(BaseModel):
    """One deduplicated identifier and the verdict the rule engine gave it."""

    model_config = {"frozen": True}

    identifier: str
    verdict: Verdict

    @property
    def is_valid(self) -> bool:
        return self.verdict.is_valid


# ─── Summary ────────────────────────────────────────────────────────


class Summary(BaseModel):
    """Aggregate counts over the deduplicated identifier set."""

    model_config = {"frozen": True}

    total_records: int = Field(ge=0)
    total_valid: int = Field(ge=0)
    total_invalid: int = Field(ge=0)

    @model_validator(mode="after")
    def _counts_add_up(self) -> Summary:
        if self.total_valid + self.total_invalid != self.total_records:
            raise ValueError(
                f"total_valid ({self.total_valid}) + total_invalid "
                f"({self.total_invalid}) != total_records ({self.total_records})"
            )
        return self

    @classmethod
    def from_results(cls, results: list[IdentifierResult]) -> Summary:
        """Count valid and invalid verdicts."""
        valid = sum(1 for r in results if r.is_valid)
        return cls(
            total_records=len(results),
            total_valid=valid,
            total_invalid=len(results) - valid,
        )


# ─── Validation Report ──────────────────────────────────────────────


class ValidationReport(BaseModel):
    """The final output of the validation pipeline."""

    model_config = {"frozen": True}

    summary: Summary
    results: list[IdentifierResult] = Field(default_factory=list)
    raw_records: int = 0  # Before deduplication
    duplicates_removed: int = 0
    null_records: int = 0  # Absent inputs, all collapsed into one sentinel
    audit_hash: str = ""  # SHA-256 of the deduplicated identifiers

    @property
    def is_valid(self) -> bool:
        """True when every deduplicated identifier passed."""
        return self.summary.total_invalid == 0

    @property
    def breakdown(self) -> dict[Verdict, int]:
        """Number of identifiers per verdict, every verdict included."""
        counts = Counter(r.verdict for r in self.results)
        return {verdict: counts.get(verdict, 0) for verdict in Verdict}

    @cached_property
    def by_identifier(self) -> dict[str, Verdict]:
        """Verdicts keyed by normalized identifier, built once per report."""
        return {r.identifier: r.verdict for r in self.results}

    def verdict_for(self, identifier: str) -> Verdict | None:
        """Look up the verdict of an already-normalized identifier."""
        return self.by_identifier.get(identifier)

    def invalid(self) -> list[IdentifierResult]:
        return [r for r in self.results if not r.is_valid]
