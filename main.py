#!/usr/bin/env python3
"""
PAN Validator — Entry Point
============================

Runs the validation pipeline on a file of PAN identifiers (or a built-in
sample) and prints a summary report.

Usage:
    python main.py                          # Built-in sample records
    python main.py pans.txt                 # One identifier per line
    python main.py pans.csv --column pan    # CSV column
    PAN_LOG_LEVEL=DEBUG python main.py      # Log every invalid identifier
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from pan_validator.exceptions import IngestionError
from pan_validator.ingest import load_records
from pan_validator.models import ValidationReport, Verdict
from pan_validator.pipeline import PanValidationPipeline
from pan_validator.settings import get_settings

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Sample Records — Messy on Purpose ──────────────────────────────

SAMPLE_RECORDS: list[str | None] = [
    "ABCDE1234F",
    "AABCD1923F",
    "ABXCD1123F",
    "ABXCD1934F",
    "  abxcd1934f ",
    "ABXCD123",
    None,
    "",
    "PQRSX6789Z",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 60


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(report: ValidationReport) -> int:
    """Pretty-print the validation report with ANSI color codes.

    Returns:
        0 if every identifier is valid, 1 otherwise.
    """
    summary = report.summary

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  PAN VALIDATION REPORT{_RESET}")
    print(f"{'=' * _WIDTH}")
    print(f"  Raw records:     {report.raw_records}")
    print(f"  Duplicates:      {report.duplicates_removed}")
    print(f"  Null records:    {report.null_records}")
    print(f"  Audit Hash:      {_DIM}{report.audit_hash[:16]}...{_RESET}")
    print(f"{'─' * _WIDTH}")
    print(f"  Total records:   {summary.total_records}")
    print(f"  Total valid:     {_GREEN}{summary.total_valid}{_RESET}")
    print(f"  Total invalid:   {_RED}{summary.total_invalid}{_RESET}")
    print(f"{'─' * _WIDTH}")

    for verdict, count in report.breakdown.items():
        if verdict is Verdict.VALID or not count:
            continue
        print(f"  {verdict.value:<28} {count}")

    invalid = report.invalid()
    if invalid:
        print()
        for result in invalid:
            shown = result.identifier or "<empty>"
            print(f"    {_RED}[{result.verdict.value}]{_RESET} {shown}")

    print(f"{'=' * _WIDTH}")
    if report.is_valid:
        print(f"  {_GREEN}{_BOLD}ALL IDENTIFIERS VALID{_RESET}")
    else:
        print(f"  {_RED}{_BOLD}{summary.total_invalid} INVALID IDENTIFIER(S){_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 0 if report.is_valid else 1


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Load records, run the pipeline, print the report."""
    parser = argparse.ArgumentParser(description="Validate PAN identifiers.")
    parser.add_argument("path", nargs="?", help="Text or CSV file of identifiers")
    parser.add_argument("--column", help="CSV column holding the identifiers")
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"{_RED}[CONFIG_INVALID]{_RESET} {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.path:
        try:
            records = load_records(args.path, args.column or settings.csv_column)
        except IngestionError as e:
            print(f"{_RED}[{e.code}]{_RESET} {e}", file=sys.stderr)
            return 2
    else:
        records = SAMPLE_RECORDS

    pipeline = PanValidationPipeline(settings)
    report = pipeline.run(records)
    return print_report(report)


if __name__ == "__main__":
    sys.exit(main())
