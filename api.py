"""
PAN Validator — FastAPI Server
===============================

RESTful API for validating batches of PAN identifiers.

Endpoints:
    POST /validate          Validate a JSON list of raw records
    POST /validate/file     Upload a text or CSV file for validation
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import PurePath
from typing import Optional

import asyncio

from fastapi import FastAPI, HTTPException, UploadFile
from pydantic import BaseModel, Field

from pan_validator import __version__
from pan_validator.exceptions import IngestionError
from pan_validator.ingest import parse_csv_text, parse_lines
from pan_validator.models import IdentifierResult, Summary, ValidationReport
from pan_validator.pipeline import PanValidationPipeline

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Application Lifespan ────────────────────────────────────────────

_pipeline: PanValidationPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the pipeline (reads settings from the environment) on startup."""
    global _pipeline  # noqa: PLW0603
    _pipeline = PanValidationPipeline()
    yield
    _pipeline = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="PAN Validator API",
    description=(
        "Rule-based validation for Indian PAN identifiers. "
        "Normalization, deduplication, an ordered first-match-wins rule "
        "cascade, and total/valid/invalid summary counts."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ValidateRequest(BaseModel):
    """Request body for the /validate endpoint."""

    records: list[Optional[str]] = Field(
        ...,
        description="Raw identifiers; null marks an absent record.",
        json_schema_extra={
            "example": ["ABCDE1234F", "abxcd1934f", "ABXCD1934F", None]
        },
    )


class ValidateResponse(BaseModel):
    """Structured validation report returned by the API."""

    is_valid: bool
    summary: Summary
    breakdown: dict[str, int]
    raw_records: int
    duplicates_removed: int
    null_records: int
    audit_hash: str = Field(description="SHA-256 of the deduplicated identifiers")
    results: list[IdentifierResult]

    model_config = {"json_schema_extra": {"example": {
        "is_valid": False,
        "summary": {"total_records": 3, "total_valid": 1, "total_invalid": 2},
        "breakdown": {"Valid": 1, "InvalidFormat": 1, "InvalidSequentialAlphabets": 1},
        "raw_records": 4,
        "duplicates_removed": 1,
        "null_records": 1,
        "audit_hash": "a1b2c3d4...",
        "results": [
            {"identifier": "ABCDE1234F", "verdict": "InvalidSequentialAlphabets"},
            {"identifier": "ABXCD1934F", "verdict": "Valid"},
            {"identifier": "", "verdict": "InvalidFormat"},
        ],
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> PanValidationPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised")
    return _pipeline


def _build_response(report: ValidationReport) -> ValidateResponse:
    """Convert the internal ValidationReport to the API response schema."""
    return ValidateResponse(
        is_valid=report.is_valid,
        summary=report.summary,
        breakdown={v.value: n for v, n in report.breakdown.items()},
        raw_records=report.raw_records,
        duplicates_removed=report.duplicates_removed,
        null_records=report.null_records,
        audit_hash=report.audit_hash,
        results=report.results,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/validate",
    summary="Validate a batch of raw PAN records",
    tags=["Validation"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def validate_records(request: ValidateRequest) -> ValidateResponse:
    """Run the full pipeline on a JSON list of raw records.

    Returns a structured report with:
    - **summary**: total / valid / invalid over the deduplicated set
    - **results**: one verdict per distinct normalized identifier
    - **breakdown**: identifier count per verdict
    """
    pipeline = _get_pipeline()
    report = pipeline.run(request.records)
    return _build_response(report)


@app.post(
    "/validate/file",
    summary="Validate PAN records from an uploaded file",
    tags=["Validation"],
    responses={
        413: {"description": "File too large"},
        400: {"description": "File is not valid UTF-8 text"},
        422: {"description": "CSV header or column missing"},
        503: {"description": "Pipeline not yet initialised"},
    },
)
async def validate_file(
    file: UploadFile, column: Optional[str] = None
) -> ValidateResponse:
    """Upload a `.txt` (one identifier per line) or `.csv` file.

    For CSV uploads, `column` names the identifier column (default: first).
    """
    pipeline = _get_pipeline()
    limit = pipeline.settings.max_upload_bytes
    if file.size and file.size > limit:
        raise HTTPException(status_code=413, detail=f"File too large (max {limit} bytes)")

    # size is unknown for some multipart clients
    content = await file.read()
    if len(content) > limit:
        raise HTTPException(status_code=413, detail=f"File too large (max {limit} bytes)")

    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded text")

    if PurePath(file.filename or "").suffix.lower() == ".csv":
        try:
            records = parse_csv_text(text, column or pipeline.settings.csv_column)
        except IngestionError as e:
            raise HTTPException(status_code=422, detail=str(e))
    else:
        records = parse_lines(text)

    report = await asyncio.to_thread(pipeline.run, records)
    return _build_response(report)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and version."""
    _get_pipeline()
    return HealthResponse(status="healthy", version=__version__)
