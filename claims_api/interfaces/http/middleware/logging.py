import json
import time
import uuid
from typing import Callable, List, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from claims_api.core.constants import LOG_EXCLUDE_PATHS
from claims_api.core.logging import request_id_var
from claims_api.utils.logger import get_logger

logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Request/response logging with a per-request ID.

    The ID is exposed to log records through a context variable and echoed
    back in the X-Request-ID header.
    """

    def __init__(self, app, exclude_paths: Optional[List[str]] = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths if exclude_paths is not None else LOG_EXCLUDE_PATHS

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        skip = self._should_skip_logging(request.url.path)
        start_time = time.time()

        try:
            if not skip:
                self._log_request(request, request_id)

            try:
                response = await call_next(request)
            except Exception as e:
                self._log_error(request, e, request_id, time.time() - start_time)
                raise

            process_time = time.time() - start_time
            if not skip:
                self._log_response(request, response, request_id, process_time)

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = str(round(process_time, 4))
            return response
        finally:
            request_id_var.reset(token)

    def _should_skip_logging(self, path: str) -> bool:
        return any(path.startswith(excluded) for excluded in self.exclude_paths)

    def _log_request(self, request: Request, request_id: str):
        request_data = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_ip": self._get_client_ip(request),
            "content_type": request.headers.get("Content-Type"),
            "content_length": request.headers.get("Content-Length"),
        }
        logger.info(f"REQUEST: {json.dumps(request_data, default=str)}")

    def _log_response(self, request: Request, response: Response, request_id: str, process_time: float):
        response_data = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "process_time": round(process_time, 4),
        }

        if response.status_code >= 500:
            logger.error(f"RESPONSE: {json.dumps(response_data, default=str)}")
        elif response.status_code >= 400:
            logger.warning(f"RESPONSE: {json.dumps(response_data, default=str)}")
        else:
            logger.info(f"RESPONSE: {json.dumps(response_data, default=str)}")

    def _log_error(self, request: Request, exception: Exception, request_id: str, process_time: float):
        error_data = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "error_type": type(exception).__name__,
            "error_message": str(exception),
            "process_time": round(process_time, 4),
        }
        logger.error(f"ERROR: {json.dumps(error_data, default=str)}")

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address considering proxies"""
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

        return request.client.host if request.client else "unknown"
