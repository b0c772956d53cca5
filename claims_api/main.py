from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from claims_api.core.config import Settings, get_settings
from claims_api.core.exceptions import AppException
from claims_api.core.logging import setup_logging
from claims_api.interfaces.http.middleware import LoggingMiddleware
from claims_api.interfaces.http.routes import api_router
from claims_api.schemas.base import HealthCheckSchema
from claims_api.services import ClaimsStore
from claims_api.utils.logger import get_logger


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings
    setup_logging(settings)
    logger.info(f"Starting {settings.PROJECT_NAME} {settings.VERSION} ({settings.ENVIRONMENT})")

    try:
        yield
    finally:
        logger.info(f"Shutting down with {len(app.state.claims_store)} claims in memory")


def create_application(settings: Optional[Settings] = None,
                       store: Optional[ClaimsStore] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Claims upload validation and query service",
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # One store per process, shared by ingestion and queries
    app.state.settings = settings
    app.state.claims_store = store if store is not None else ClaimsStore()

    app.add_middleware(LoggingMiddleware)

    if settings.cors_settings.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.cors_settings.allowed_origins],
            allow_credentials=settings.cors_settings.allow_credentials,
            allow_methods=settings.cors_settings.allowed_methods,
            allow_headers=settings.cors_settings.allowed_headers,
        )

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Handle application-specific exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "type": exc.error_code,
                    "message": exc.message,
                    "details": exc.details,
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle general exceptions."""
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
        if settings.DEBUG:
            import traceback
            return JSONResponse(
                status_code=500,
                content={
                    "error": {
                        "type": "internal_server_error",
                        "message": str(exc),
                        "traceback": traceback.format_exc(),
                    }
                },
            )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "type": "internal_server_error",
                    "message": "Internal server error occurred",
                }
            },
        )

    @app.get("/health", response_model=HealthCheckSchema)
    async def health_check() -> HealthCheckSchema:
        """Health check endpoint."""
        return HealthCheckSchema(
            status="healthy",
            version=settings.VERSION,
            environment=settings.ENVIRONMENT,
            claims=len(app.state.claims_store),
        )

    app.include_router(api_router)

    return app


app = create_application()


def main():
    settings = get_settings()
    uvicorn.run(
        "claims_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info" if not settings.DEBUG else "debug",
        access_log=True,
        server_header=False,
        date_header=False,
    )


if __name__ == "__main__":
    main()
