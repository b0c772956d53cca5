from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile
from starlette.concurrency import run_in_threadpool

from claims_api.core.config import Settings
from claims_api.core.constants import COLUMN_TYPES
from claims_api.core.enums import SortDirection
from claims_api.core.exceptions import BadRequestError, PayloadTooLargeError, ValidationException
from claims_api.interfaces.dependencies import get_app_settings, get_ingestion_service, get_query_service
from claims_api.schemas.base import ErrorResponse
from claims_api.schemas.claims import ClaimRecordSchema, ClaimsSummaryResponse, UploadResultResponse
from claims_api.services import ClaimFilters, ClaimsIngestionService, ClaimsQueryService
from claims_api.utils.date_utils import parse_date
from claims_api.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


def _parse_date_param(name: str, value: Optional[str]) -> Optional[date]:
    if value is None or not value.strip():
        return None
    parsed = parse_date(value)
    if parsed is None:
        raise ValidationException(f"Invalid date for {name}", field=name, value=value)
    return parsed


def get_claim_filters(
    member_id: Optional[str] = Query(None, alias="memberId", description="Exact member ID"),
    start_date: Optional[str] = Query(None, alias="startDate", description="Inclusive lower bound, ISO date"),
    end_date: Optional[str] = Query(None, alias="endDate", description="Inclusive upper bound, ISO date"),
) -> ClaimFilters:
    return ClaimFilters(
        member_id=member_id or None,
        start_date=_parse_date_param("startDate", start_date),
        end_date=_parse_date_param("endDate", end_date),
    )


@router.post(
    "/upload",
    response_model=UploadResultResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}},
)
async def upload_claims(
    file: UploadFile = File(..., description="Claims CSV file"),
    service: ClaimsIngestionService = Depends(get_ingestion_service),
    settings: Settings = Depends(get_app_settings),
) -> UploadResultResponse:
    """Validate an uploaded claims file and commit it if every row is valid"""
    allowed_types = settings.upload.allowed_content_types
    if file.content_type and file.content_type not in allowed_types:
        raise BadRequestError(
            f"File type {file.content_type} not supported. Allowed types: {', '.join(allowed_types)}",
            details={"content_type": file.content_type},
        )

    content = await file.read()
    if len(content) > settings.upload.max_file_size:
        logger.warning(f"Rejected upload {file.filename}: {len(content)} bytes")
        raise PayloadTooLargeError(size=len(content), limit=settings.upload.max_file_size)

    # Parsing and validation are CPU bound; keep them off the event loop
    result = await run_in_threadpool(service.ingest, content, file_name=file.filename)
    return UploadResultResponse.from_entity(result)


@router.get(
    "",
    response_model=List[ClaimRecordSchema],
    response_model_exclude_none=True,
    responses={422: {"model": ErrorResponse}},
)
async def list_claims(
    filters: ClaimFilters = Depends(get_claim_filters),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="Column to re-sort by"),
    direction: SortDirection = Query(SortDirection.ASC, description="Direction for sortBy"),
    service: ClaimsQueryService = Depends(get_query_service),
) -> List[ClaimRecordSchema]:
    """List committed claims, newest service date first"""
    if sort_by and sort_by not in COLUMN_TYPES:
        raise ValidationException(
            f"Unknown sort key: {sort_by}",
            field="sortBy",
            value=sort_by,
            details={"allowed": list(COLUMN_TYPES)},
        )

    records = service.search(filters, sort_by=sort_by, direction=direction)
    return [ClaimRecordSchema.from_entity(record) for record in records]


@router.get("/summary", response_model=ClaimsSummaryResponse)
async def summarize_claims(
    filters: ClaimFilters = Depends(get_claim_filters),
    service: ClaimsQueryService = Depends(get_query_service),
) -> ClaimsSummaryResponse:
    """Count and total amount of the matching claims"""
    return ClaimsSummaryResponse.from_entity(service.summarize(filters))
