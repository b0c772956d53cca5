from .base import ErrorDetail, ErrorResponse, HealthCheckSchema
from .claims import (
    ClaimRecordSchema,
    ClaimsSummaryResponse,
    InvalidRowSchema,
    RowErrorSchema,
    UploadResultResponse,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "HealthCheckSchema",
    "ClaimRecordSchema",
    "ClaimsSummaryResponse",
    "InvalidRowSchema",
    "RowErrorSchema",
    "UploadResultResponse",
]
