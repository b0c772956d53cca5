from fastapi import APIRouter

from .claims import router as claims_router

api_router = APIRouter()

api_router.include_router(claims_router, prefix="/claims", tags=["Claims"])
