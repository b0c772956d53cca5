import functools
import json
import logging
import logging.handlers
import sys
import time
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Settings, get_settings

# Set by the request logging middleware
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

AUDIT_LOGGER_NAME = "claims_api.audit"


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with request id and audit fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.lineno}",
        }
        request_id = getattr(record, "request_id", None)
        if request_id:
            entry["request_id"] = request_id
        entry.update(getattr(record, "audit", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


class RequestContextFilter(logging.Filter):
    """Stamps the current request id onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def _build_handlers(settings: Settings):
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.logging.file:
        path = Path(settings.logging.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            filename=path,
            maxBytes=settings.logging.max_bytes,
            backupCount=settings.logging.backup_count,
            encoding="utf-8",
        ))
    return handlers


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure the root logger from settings, replacing any existing handlers."""
    settings = settings or get_settings()

    if settings.logging.json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(fmt=settings.logging.format, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.logging.level.upper(), logging.INFO))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in _build_handlers(settings):
        handler.setFormatter(formatter)
        handler.addFilter(RequestContextFilter())
        root_logger.addHandler(handler)

    if settings.is_production:
        logging.getLogger("aiohttp").setLevel(logging.WARNING)


def log_execution_time(logger: logging.Logger, level: int = logging.INFO):
    """
    Decorator logging how long the wrapped call took.

    Failures are logged with their traceback and re-raised.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception(f"{func.__name__} failed after {time.perf_counter() - started:.4f}s")
                raise
            logger.log(level, f"{func.__name__} took {time.perf_counter() - started:.4f}s")
            return result
        return wrapper
    return decorator


def audit_log(action: str, resource: str, details: Optional[Dict[str, Any]] = None, success: bool = True):
    """
    Record a store mutation decision.

    Args:
        action: Action performed (e.g., 'COMMIT', 'REJECT')
        resource: Resource affected (e.g., 'CLAIMS')
        details: Additional details about the action
        success: Whether the action was successful
    """
    logging.getLogger(AUDIT_LOGGER_NAME).info(
        f"{action} {resource}",
        extra={"audit": {
            "event_type": "audit",
            "action": action,
            "resource": resource,
            "success": success,
            "details": details or {},
        }},
    )
