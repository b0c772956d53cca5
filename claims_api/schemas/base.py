from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Body of an error response."""
    type: str
    message: str
    details: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Error response schema."""
    error: ErrorDetail


class HealthCheckSchema(BaseModel):
    """Schema for health check response."""
    status: str = Field(description="Health status: healthy, unhealthy")
    version: str
    environment: str
    claims: int = Field(description="Number of committed claims")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
