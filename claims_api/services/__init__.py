"""
Services package for the claims service.
Contains the store and the ingestion and query services.
"""

from .claims_store import ClaimsStore
from .ingestion_service import ClaimsIngestionService
from .query_service import ClaimFilters, ClaimsQueryService, ClaimsSummary

__all__ = [
    "ClaimsStore",
    "ClaimsIngestionService",
    "ClaimFilters",
    "ClaimsQueryService",
    "ClaimsSummary",
]
