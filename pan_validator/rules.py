"""
Deterministic rule engine — one identifier in, one verdict out.

The cascade is an ordered list of (verdict, predicate) pairs. Predicates
are evaluated top to bottom and the first one that fires decides the
verdict. Nothing after it runs.

Order matters for correctness, not just speed:
  - The format rule runs first. Every later predicate indexes into the
    letter block (positions 1-5) and the digit block (positions 6-9), so
    they only make sense on a 10-character, correctly-classed string.
  - Adjacent-repeat rules run before sequential rules. A repeat and a
    strict increase can't coexist inside one block, but a repeat in the
    letters plus a sequence in the digits reports only the repeat.

Each predicate:
  - Takes a normalized identifier that already passed every earlier rule
  - Returns True when the identifier VIOLATES the rule
  - Is a pure function, independently testable
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Optional

from .models import IdentifierResult, Verdict
from .normalizer import normalize_identifier

Predicate = Callable[[str], bool]


# ─── Constants ───────────────────────────────────────────────────────

PAN_LENGTH = 10

# 5 letters, 4 digits, 1 letter. ASCII only; str.isalpha() would accept "É".
PAN_PATTERN = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")

ALPHA_BLOCK = slice(0, 5)
DIGIT_BLOCK = slice(5, 9)


# ─── Block Helpers ───────────────────────────────────────────────────


def _has_adjacent_repeat(block: str) -> bool:
    return any(a == b for a, b in zip(block, block[1:]))


def _is_consecutive_run(block: str) -> bool:
    """Every character code is exactly one more than the previous one.

    A partial run (e.g. 3 of 4 steps ascending) is NOT a run.
    """
    return all(ord(b) - ord(a) == 1 for a, b in zip(block, block[1:]))


# ─── Individual Rules ────────────────────────────────────────────────


def violates_format(identifier: str) -> bool:
    """Length or character class is wrong anywhere in the string."""
    return PAN_PATTERN.fullmatch(identifier) is None


def violates_adjacent_alphabets(identifier: str) -> bool:
    """Two identical letters side by side in positions 1-5 (e.g. AABCD)."""
    return _has_adjacent_repeat(identifier[ALPHA_BLOCK])


def violates_adjacent_digits(identifier: str) -> bool:
    """Two identical digits side by side in positions 6-9 (e.g. 1123)."""
    return _has_adjacent_repeat(identifier[DIGIT_BLOCK])


def violates_sequential_alphabets(identifier: str) -> bool:
    """Positions 1-5 are a full consecutive run such as ABCDE."""
    return _is_consecutive_run(identifier[ALPHA_BLOCK])


def violates_sequential_digits(identifier: str) -> bool:
    """Positions 6-9 are a full consecutive run such as 1234."""
    return _is_consecutive_run(identifier[DIGIT_BLOCK])


# ─── The Cascade ─────────────────────────────────────────────────────

RULES: tuple[tuple[Verdict, Predicate], ...] = (
    (Verdict.INVALID_FORMAT, violates_format),
    (Verdict.INVALID_ADJACENT_ALPHABETS, violates_adjacent_alphabets),
    (Verdict.INVALID_ADJACENT_DIGITS, violates_adjacent_digits),
    (Verdict.INVALID_SEQUENTIAL_ALPHABETS, violates_sequential_alphabets),
    (Verdict.INVALID_SEQUENTIAL_DIGITS, violates_sequential_digits),
)


def classify(identifier: str) -> Verdict:
    """Run the rule cascade on one normalized identifier.

    Args:
        identifier: An already-normalized identifier (trimmed, upper-cased).

    Returns:
        The verdict of the first violated rule, or ``Verdict.VALID``.
    """
    for verdict, violates in RULES:
        if violates(identifier):
            return verdict
    return Verdict.VALID


def classify_all(identifiers: Iterable[str]) -> list[IdentifierResult]:
    """Classify each identifier independently, preserving order."""
    return [
        IdentifierResult(identifier=identifier, verdict=classify(identifier))
        for identifier in identifiers
    ]


def validate_identifier(raw: Optional[str]) -> Verdict:
    """Normalize a single raw record and classify it."""
    return classify(normalize_identifier(raw))
