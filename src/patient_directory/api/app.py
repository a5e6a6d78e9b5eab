"""
HTTP API - FastAPI Application.

Exposes the query pipeline as a read-only JSON resource:

    GET /api/patients                  one page of patients + meta
    GET /api/patients/medical-issues   issues present in the dataset
    GET /health                        liveness with dataset size

Mutating verbs on the patient resources answer 405. Validation errors
answer 400, dataset failures 500; both use the ``{error, message?}``
body shape.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from patient_directory import __version__
from patient_directory.adapters.json_provider import DataLoadError, JsonPatientProvider
from patient_directory.config.loader import load_config
from patient_directory.config.models import DirectoryConfig
from patient_directory.observability.observability_manager import ObservabilityManager
from patient_directory.pipeline.query_pipeline import (
    PatientProviderProtocol,
    PatientQueryPipeline,
)
from patient_directory.validation.request_validator import ValidationError

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate"}
MUTATING_METHODS = ["POST", "PUT", "PATCH", "DELETE"]

router = APIRouter()


def get_pipeline(request: Request) -> PatientQueryPipeline:
    return request.app.state.pipeline


def _method_not_allowed() -> JSONResponse:
    return JSONResponse(
        {"error": "Method not allowed"},
        status_code=405,
        headers={"Allow": "GET", **NO_CACHE_HEADERS},
    )


@router.get("/api/patients")
def list_patients(
    request: Request,
    pipeline: PatientQueryPipeline = Depends(get_pipeline),
) -> JSONResponse:
    """
    List patients.

    - **search**: case-insensitive substring of name or medical issue
    - **ageMin** / **ageMax**: inclusive bounds, ignored when not integers
    - **medical_issue**: comma-separated issues, any of which may match
    - **sortBy**: `age` or `patient_name`
    - **sortOrder**: `asc` (default) or `desc`
    - **page**: 1-based page (default 1)
    - **limit**: page size (default 20, max 100)
    """
    correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
    result = pipeline.run(dict(request.query_params), correlation_id=correlation_id)
    return JSONResponse(
        result.to_response(),
        status_code=200,
        headers={"X-Correlation-ID": correlation_id, **NO_CACHE_HEADERS},
    )


@router.get("/api/patients/medical-issues")
def list_medical_issues(
    pipeline: PatientQueryPipeline = Depends(get_pipeline),
) -> JSONResponse:
    """Distinct medical issues found in the dataset, sorted."""
    return JSONResponse(
        {"data": pipeline.medical_issue_vocabulary()},
        headers=NO_CACHE_HEADERS,
    )


@router.api_route("/api/patients", methods=MUTATING_METHODS, include_in_schema=False)
@router.api_route(
    "/api/patients/medical-issues", methods=MUTATING_METHODS, include_in_schema=False
)
def reject_mutation() -> JSONResponse:
    return _method_not_allowed()


@router.get("/health")
def health_check(
    pipeline: PatientQueryPipeline = Depends(get_pipeline),
) -> JSONResponse:
    patients = pipeline.provider.get_patients()
    return JSONResponse({"status": "healthy", "patients": len(patients)})


async def _handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    body = {"error": exc.message}
    if exc.field:
        body["field"] = exc.field
        body["allowed"] = exc.allowed
    return JSONResponse(body, status_code=400, headers=NO_CACHE_HEADERS)


async def _handle_data_load_error(request: Request, exc: DataLoadError) -> JSONResponse:
    logger.error(f"API error on {request.url.path}: {exc}")
    return JSONResponse(
        {"error": "Internal server error", "message": "Failed to load patients data"},
        status_code=500,
        headers=NO_CACHE_HEADERS,
    )


def create_pipeline(
    config: DirectoryConfig,
    provider: Optional[PatientProviderProtocol] = None,
) -> PatientQueryPipeline:
    """Wire a pipeline from configuration."""
    provider = provider or JsonPatientProvider(
        path=config.data_source.path,
        encoding=config.data_source.encoding,
    )
    audit_logger = ObservabilityManager(
        use_json=config.logging.use_json,
        log_level=logging.getLevelName(config.logging.level.upper()),
    )
    return PatientQueryPipeline(
        provider=provider,
        config=config,
        audit_logger=audit_logger,
    )


def create_app(
    config: Optional[DirectoryConfig] = None,
    provider: Optional[PatientProviderProtocol] = None,
    pipeline: Optional[PatientQueryPipeline] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Directory configuration (defaults to ``load_config()``)
        provider: Patient provider (defaults to the configured JSON file)
        pipeline: Fully wired pipeline; overrides config and provider

    Returns:
        Configured FastAPI app
    """
    config = config or load_config()
    app = FastAPI(
        title="Patient Directory",
        description="Read-only patient listing with search, filters and pagination",
        version=__version__,
    )
    app.state.config = config
    app.state.pipeline = pipeline or create_pipeline(config, provider)

    app.include_router(router)
    app.add_exception_handler(ValidationError, _handle_validation_error)
    app.add_exception_handler(DataLoadError, _handle_data_load_error)
    return app
