from starlette.status import HTTP_400_BAD_REQUEST
from typing import Any, Dict, Optional


class AppException(Exception):
    def __init__(self, message: str,
                 error_code: Optional[str] = None,
                 status_code: int = HTTP_400_BAD_REQUEST,
                 details: Optional[Dict[str, Any]] = None,):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', status_code={self.status_code})"


class ValidationException(AppException):
    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.field = field
        self.value = value

        exception_details = details or {}
        if field:
            exception_details["field"] = field
        if value is not None:
            exception_details["value"] = value

        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=exception_details,
            status_code=422,
        )


class BadRequestError(AppException):
    """Exception raised for bad requests."""

    def __init__(
        self,
        message: str = "Bad request",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code="BAD_REQUEST",
            details=details,
            status_code=HTTP_400_BAD_REQUEST,
        )


class PayloadTooLargeError(AppException):
    """Exception raised when an uploaded file exceeds the configured size limit."""

    def __init__(
        self,
        size: int,
        limit: int,
        message: Optional[str] = None,
    ):
        self.size = size
        self.limit = limit

        super().__init__(
            message=message or f"File size {size} bytes exceeds limit of {limit} bytes",
            error_code="PAYLOAD_TOO_LARGE",
            details={"size": size, "limit": limit},
            status_code=413,
        )


class FileDecodeError(AppException):
    """Raised when an uploaded file cannot be read as a claims table."""

    def __init__(
        self,
        message: str = "Unable to decode file",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code="DECODE_ERROR",
            details=details,
            status_code=HTTP_400_BAD_REQUEST,
        )


class TransportFailure(Exception):
    """Raised by the claims client when a request could not complete."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
