"""
Custom exception hierarchy for PAN validation.

The classification core never raises: every string gets a verdict.
These exceptions cover the boundaries around it, where a caller hands us
something that is not a record at all, or a source file cannot be read.
"""

from __future__ import annotations


class PanValidationError(Exception):
    """Base exception for all PAN validator failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class RecordTypeError(PanValidationError, TypeError):
    """A raw record was neither a string nor None."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("RECORD_TYPE_INVALID", message, details)


class IngestionError(PanValidationError):
    """Raw records could not be loaded from their source."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INGESTION_FAILED", message, details)
