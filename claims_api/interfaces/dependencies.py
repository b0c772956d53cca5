from fastapi import Depends, Request

from claims_api.core.config import Settings
from claims_api.services import ClaimsIngestionService, ClaimsQueryService, ClaimsStore
from claims_api.processors import get_processor


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_claims_store(request: Request) -> ClaimsStore:
    """The store created at application start."""
    return request.app.state.claims_store


def get_ingestion_service(
    store: ClaimsStore = Depends(get_claims_store),
    settings: Settings = Depends(get_app_settings),
) -> ClaimsIngestionService:
    processor = get_processor('csv', encoding=settings.upload.encoding)
    return ClaimsIngestionService(store, processor=processor)


def get_query_service(store: ClaimsStore = Depends(get_claims_store)) -> ClaimsQueryService:
    return ClaimsQueryService(store)
